"""
Procedural tree growth rendered as quadrant-block glyphs in the terminal.
"""

from .canvas import FILL_CHARS, Canvas, Color, Glyph, Pixel
from .geometry import Coordinate
from .growth import Branch, GrowthParams, grow, pixel_for_depth
from .tree import DEPTH, draw_tree, root_branch

__version__ = "0.1.0"

__all__ = [
    "FILL_CHARS",
    "Canvas",
    "Color",
    "Glyph",
    "Pixel",
    "Coordinate",
    "Branch",
    "GrowthParams",
    "grow",
    "pixel_for_depth",
    "DEPTH",
    "draw_tree",
    "root_branch",
]
