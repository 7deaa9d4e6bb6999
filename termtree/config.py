"""JSON config file holding defaults for the command line."""

from __future__ import annotations

import json
import os

DEFAULT_CONFIG_PATH = "tree_config.json"


def load_config(path: str) -> dict:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return data
