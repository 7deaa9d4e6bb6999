"""2D integer coordinates on the pixel canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int

    def displace(self, angle: float, distance: int) -> "Coordinate":
        # Truncates toward zero; anything left of or above the origin saturates at 0.
        x = self.x + math.cos(angle) * distance
        y = self.y + math.sin(angle) * distance
        return Coordinate(max(0, int(x)), max(0, int(y)))

    def in_bounds(self, height: int, width: int) -> bool:
        # Row 0 and column 0 are excluded as well as the far edges.
        return 0 < self.x < width and 0 < self.y < height
