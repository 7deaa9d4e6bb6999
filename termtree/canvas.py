"""
Pixel canvas at twice the terminal resolution in each axis.

Branches draw into the canvas with ``draw_line``; ``render`` folds every
2x2 block of pixels into one quadrant-block glyph:

    bit 0  top-left      bit 1  top-right
    bit 2  bottom-left   bit 3  bottom-right
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List

from .geometry import Coordinate

FILL_CHARS = (
    " ", "▘", "▝", "▀", "▖", "▌", "▞", "▛",
    "▗", "▚", "▐", "▜", "▄", "▙", "▟", "█",
)

ANSI_RESET = "\033[0m"


class Pixel(Enum):
    EMPTY = 0
    LARGE_BRANCH = 1
    SMALLER_BRANCH = 2
    LEAF = 3


class Color(Enum):
    WOOD = "\033[33m"
    FOLIAGE = "\033[32m"


@dataclass(frozen=True)
class Glyph:
    char: str
    color: Color

    def styled(self) -> str:
        return f"{self.color.value}{self.char}{ANSI_RESET}"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class Canvas:
    def __init__(self, columns: int, rows: int) -> None:
        if columns <= 0 or rows <= 0:
            raise ValueError(f"Canvas needs a positive size, got {columns}x{rows}")
        self.columns = columns
        self.rows = rows
        self.width = columns * 2
        self.height = rows * 2
        self.data: List[List[Pixel]] = [
            [Pixel.EMPTY] * self.width for _ in range(self.height)
        ]

    def draw_line(self, p0: Coordinate, p1: Coordinate, pixel: Pixel) -> None:
        if pixel is Pixel.EMPTY:
            raise ValueError("Lines cannot be drawn with Pixel.EMPTY")
        dy = p1.y - p0.y
        dx = p1.x - p0.x
        n = max(abs(dy), abs(dx))
        if n == 0:
            return
        x_step = dx / n
        y_step = dy / n

        x = float(p0.x)
        y = float(p0.y)
        for _ in range(n):
            # Coordinates are unsigned; anything rounding below 0 pins to 0 and is dropped.
            c = Coordinate(max(0, _round_half_up(x)), max(0, _round_half_up(y)))
            if c.in_bounds(self.height, self.width):
                self.data[c.y][c.x] = pixel
            x += x_step
            y += y_step

    def filled_count(self) -> int:
        return sum(1 for row in self.data for value in row if value is not Pixel.EMPTY)

    def render(self) -> List[List[Glyph]]:
        lines: List[List[Glyph]] = []
        for y in range(0, self.height, 2):
            top = self.data[y]
            bottom = self.data[y + 1]
            line: List[Glyph] = []
            for x in range(0, self.width, 2):
                block = (top[x], top[x + 1], bottom[x], bottom[x + 1])
                mask = 0
                for bit, value in enumerate(block):
                    if value is not Pixel.EMPTY:
                        mask |= 1 << bit
                color = Color.FOLIAGE if Pixel.LEAF in block else Color.WOOD
                line.append(Glyph(FILL_CHARS[mask], color))
            lines.append(line)
        return lines

    def render_lines(self, color: bool = True) -> List[str]:
        if color:
            return ["".join(glyph.styled() for glyph in line) for line in self.render()]
        return ["".join(glyph.char for glyph in line) for line in self.render()]
