"""Single-branch growth: a drifting walk that draws into the canvas and may sprout children."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List

from .canvas import Canvas, Pixel
from .geometry import Coordinate


@dataclass(frozen=True)
class GrowthParams:
    step_length: int = 2
    angle_jitter: float = 0.3
    spawn_chance: float = 0.25
    spawn_spread: float = 1.0
    child_length_ratio: float = 3.0 / 5.0


@dataclass
class Branch:
    pos: Coordinate
    angle: float
    length: int
    # Number of ancestors; the root has depth 0.
    depth: int = 0


def pixel_for_depth(depth: int) -> Pixel:
    if depth == 0:
        return Pixel.LARGE_BRANCH
    if depth <= 3:
        return Pixel.SMALLER_BRANCH
    return Pixel.LEAF


def child_length(length: int, ratio: float) -> int:
    return int(math.floor(length * ratio + 0.5))


def grow(
    branch: Branch,
    canvas: Canvas,
    rng: random.Random,
    params: GrowthParams = GrowthParams(),
) -> List[Branch]:
    """Walk the branch until its length is used up and return the branches it spawned.

    The walk advances ``params.step_length`` pixels per step, drifting the
    heading by up to ``angle_jitter`` radians each time. After every step a
    child may sprout from the current position. ``branch`` is advanced in
    place.
    """
    pixel = pixel_for_depth(branch.depth)
    children: List[Branch] = []
    for _ in range(0, branch.length, params.step_length):
        end = branch.pos.displace(branch.angle, params.step_length)
        canvas.draw_line(branch.pos, end, pixel)
        branch.pos = end
        branch.angle += rng.uniform(-params.angle_jitter, params.angle_jitter)

        if rng.random() < params.spawn_chance:
            children.append(
                Branch(
                    pos=branch.pos,
                    angle=branch.angle + rng.uniform(-params.spawn_spread, params.spawn_spread),
                    length=child_length(branch.length, params.child_length_ratio),
                    depth=branch.depth + 1,
                )
            )
    return children
