"""Round-based driver that grows a whole tree from one root branch."""

from __future__ import annotations

import math
import random
from typing import List, Optional

from .canvas import Canvas
from .geometry import Coordinate
from .growth import Branch, GrowthParams, grow

DEPTH = 6


def root_branch(canvas: Canvas) -> Branch:
    return Branch(
        pos=Coordinate(canvas.width // 2, canvas.height - 1),
        angle=-0.5 * math.pi,
        length=canvas.height * 2 // 3,
        depth=0,
    )


def draw_tree(
    canvas: Canvas,
    rng: Optional[random.Random] = None,
    rounds: int = DEPTH,
    params: GrowthParams = GrowthParams(),
) -> int:
    """Grow a tree from the bottom centre of ``canvas`` for ``rounds`` rounds.

    Every round grows each active branch to completion, in order, and the
    children they spawn become the next round's active branches. Branches
    still pending after the last round are dropped. Returns how many
    branches were grown.
    """
    if rng is None:
        rng = random.Random()

    active: List[Branch] = [root_branch(canvas)]
    grown = 0
    for _ in range(rounds):
        spawned: List[Branch] = []
        for branch in active:
            spawned.extend(grow(branch, canvas, rng, params))
        grown += len(active)
        active = spawned
    return grown
