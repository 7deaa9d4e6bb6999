import math
import random

from termtree.canvas import Canvas, Color, Pixel
from termtree.geometry import Coordinate
from termtree.growth import Branch, GrowthParams, grow
from termtree.tree import DEPTH, draw_tree, root_branch


def test_root_branch_placement():
    canvas = Canvas(columns=40, rows=12)
    root = root_branch(canvas)
    assert root.pos == Coordinate(40, 23)
    assert root.angle == -0.5 * math.pi
    assert root.length == 16
    assert root.depth == 0


def test_same_seed_same_tree():
    first = Canvas(columns=60, rows=30)
    second = Canvas(columns=60, rows=30)

    draw_tree(first, rng=random.Random(42))
    draw_tree(second, rng=random.Random(42))

    assert first.data == second.data
    assert first.render() == second.render()
    assert first.filled_count() > 0


def test_zero_rounds_draws_nothing():
    canvas = Canvas(columns=20, rows=10)
    assert draw_tree(canvas, rng=random.Random(0), rounds=0) == 0
    assert canvas.filled_count() == 0


def test_single_round_grows_only_the_trunk():
    canvas = Canvas(columns=40, rows=20)
    grown = draw_tree(canvas, rng=random.Random(5), rounds=1, params=GrowthParams(spawn_chance=1.0))
    assert grown == 1
    values = {value for row in canvas.data for value in row}
    assert values == {Pixel.EMPTY, Pixel.LARGE_BRANCH}


def test_rounds_count_branches():
    canvas = Canvas(columns=80, rows=40)
    grown = draw_tree(canvas, rng=random.Random(9), rounds=DEPTH)
    assert grown >= 1


def test_trunk_without_spawning():
    """
    20x20 pixel canvas, one root of length 12 pointing up from (10, 19) and
    no spawning: a wood-colored line rises from the bottom centre.
    """
    canvas = Canvas(columns=10, rows=10)
    root = Branch(pos=Coordinate(10, 19), angle=-0.5 * math.pi, length=12, depth=0)

    children = grow(root, canvas, random.Random(2024), GrowthParams(spawn_chance=0.0))
    lines = canvas.render()

    assert children == []
    assert all(glyph.color is Color.WOOD for line in lines for glyph in line)
    # first step goes straight up from (10, 19): left half of display cell (5, 9)
    assert lines[9][5].char == "▌"

    drawn_rows = [i for i, line in enumerate(lines) if any(g.char != " " for g in line)]
    assert drawn_rows[-1] == 9
    assert drawn_rows == list(range(drawn_rows[0], 10))
    assert len(drawn_rows) >= 3
