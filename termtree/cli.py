"""
Grow a random tree and print it to the terminal.

Defaults for every option can come from a JSON config file
(``tree_config.json`` in the working directory unless ``--config`` says
otherwise); flags given on the command line win.
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import List, Optional

from .canvas import Canvas
from .config import DEFAULT_CONFIG_PATH, load_config
from .growth import GrowthParams
from .image import save_image
from .terminal import TerminalSizeError, terminal_size, write_lines
from .tree import DEPTH, draw_tree


def build_parser(config: dict, config_path: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termtree", description="Grow a random tree in the terminal"
    )
    parser.add_argument("--config", type=str, default=config_path, help="Config file")
    parser.add_argument(
        "--seed",
        type=int,
        default=config.get("seed"),
        help="Random seed (unseeded when omitted)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=config.get("rounds", DEPTH),
        help="Number of growth rounds",
    )
    parser.add_argument(
        "--spawn-chance",
        type=float,
        default=config.get("spawn_chance", GrowthParams.spawn_chance),
        help="Probability of a new branch after each step (0..1)",
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=config.get("rows"),
        help="Display rows (defaults to the terminal height)",
    )
    parser.add_argument(
        "--columns",
        type=int,
        default=config.get("columns"),
        help="Display columns (defaults to the terminal width)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        default=config.get("no_color", False),
        help="Print glyphs without ANSI colors",
    )
    parser.add_argument(
        "--image",
        type=str,
        default=config.get("image"),
        help="Also save the pixel grid as an image to this path",
    )
    parser.add_argument(
        "--image-format",
        type=str,
        default=config.get("image_format", "ppm"),
        choices=["ppm", "png"],
    )
    parser.add_argument(
        "--image-scale",
        type=int,
        default=config.get("image_scale", 4),
        help="Image pixels per canvas pixel",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=config.get("verbose", False),
        help="Print a run summary to stderr",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    config_parser = argparse.ArgumentParser(add_help=False)
    config_parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help="Path to JSON config file",
    )
    config_args, remaining = config_parser.parse_known_args(argv)
    try:
        config = load_config(config_args.config)
    except ValueError as exc:
        config_parser.error(str(exc))

    parser = build_parser(config, config_args.config)
    args = parser.parse_args(remaining)

    if args.rounds is None or args.rounds < 0:
        parser.error("--rounds must be zero or more")
    if args.spawn_chance is None or not 0.0 <= args.spawn_chance <= 1.0:
        parser.error("--spawn-chance must be between 0 and 1")
    for name in ("rows", "columns"):
        value = getattr(args, name)
        if value is not None and value < 1:
            parser.error(f"--{name} must be at least 1")
    if args.image_scale is None or args.image_scale < 1:
        parser.error("--image-scale must be at least 1")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    rows, columns = args.rows, args.columns
    if rows is None or columns is None:
        try:
            term_rows, term_columns = terminal_size()
        except TerminalSizeError as exc:
            print(f"Failed to get terminal dimensions: {exc}", file=sys.stderr)
            return 1
        rows = rows if rows is not None else term_rows
        columns = columns if columns is not None else term_columns

    canvas = Canvas(columns=columns, rows=rows)
    rng = random.Random(args.seed)
    params = GrowthParams(spawn_chance=args.spawn_chance)
    grown = draw_tree(canvas, rng=rng, rounds=args.rounds, params=params)

    try:
        write_lines(canvas.render_lines(color=not args.no_color))
    except (OSError, UnicodeEncodeError) as exc:
        print(f"Failed to write to terminal: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        seed = args.seed if args.seed is not None else "none"
        print(
            f"Grew {grown} branches over {args.rounds} rounds on {columns}x{rows} "
            f"(seed={seed}, filled={canvas.filled_count()})",
            file=sys.stderr,
        )

    if args.image:
        try:
            save_image(args.image, canvas, fmt=args.image_format, scale=args.image_scale)
        except (ValueError, RuntimeError, OSError) as exc:
            print(f"Failed to save image: {exc}", file=sys.stderr)
            return 1
        print(f"Saved: {args.image}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
