"""Terminal size discovery and line output."""

from __future__ import annotations

import os
import sys
from typing import Iterable, Optional, TextIO, Tuple


class TerminalSizeError(OSError):
    pass


def terminal_size(stream: Optional[TextIO] = None) -> Tuple[int, int]:
    """Return ``(rows, columns)`` of the terminal behind ``stream`` (stdout by default)."""
    stream = stream if stream is not None else sys.stdout
    try:
        size = os.get_terminal_size(stream.fileno())
    except (AttributeError, ValueError, OSError) as exc:
        raise TerminalSizeError(f"not a terminal ({exc})") from exc
    if size.lines <= 0 or size.columns <= 0:
        raise TerminalSizeError(f"terminal reports {size.lines}x{size.columns}")
    return size.lines, size.columns


def write_lines(lines: Iterable[str], stream: Optional[TextIO] = None) -> None:
    stream = stream if stream is not None else sys.stdout
    for line in lines:
        stream.write(line + "\n")
    stream.flush()
