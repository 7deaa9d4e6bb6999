"""
Still-image snapshot of a finished canvas.

Each canvas pixel becomes a ``scale`` x ``scale`` square. PPM is written
directly; PNG goes through Pillow.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .canvas import Canvas, Pixel

RGB = Tuple[int, int, int]

PIXEL_COLORS: Dict[Pixel, RGB] = {
    Pixel.EMPTY: (12, 14, 18),
    Pixel.LARGE_BRANCH: (120, 80, 40),
    Pixel.SMALLER_BRANCH: (170, 130, 60),
    Pixel.LEAF: (60, 170, 70),
}


def to_rgb_pixels(canvas: Canvas, scale: int = 1) -> List[RGB]:
    pixels: List[RGB] = []
    for row in canvas.data:
        scaled_row: List[RGB] = []
        for value in row:
            scaled_row.extend([PIXEL_COLORS[value]] * scale)
        for _ in range(scale):
            pixels.extend(scaled_row)
    return pixels


def save_ppm(path: str, width: int, height: int, pixels: List[RGB]) -> None:
    with open(path, "w", encoding="ascii") as handle:
        handle.write(f"P3\n{width} {height}\n255\n")
        for y in range(height):
            row = pixels[y * width : (y + 1) * width]
            for r, g, b in row:
                handle.write(f"{r} {g} {b} ")
            handle.write("\n")


def save_image(path: str, canvas: Canvas, fmt: str = "ppm", scale: int = 1) -> None:
    if scale < 1:
        raise ValueError(f"Image scale must be at least 1, got {scale}")
    fmt = fmt.lower()
    if fmt not in ("ppm", "png"):
        raise ValueError(f"Unsupported image format: {fmt}")

    width = canvas.width * scale
    height = canvas.height * scale
    pixels = to_rgb_pixels(canvas, scale)
    if fmt == "ppm":
        save_ppm(path, width, height, pixels)
        return

    try:
        from PIL import Image
    except ImportError as exc:
        raise RuntimeError("Saving PNG requires Pillow to be installed.") from exc

    img = Image.new("RGB", (width, height))
    img.putdata(pixels)
    img.save(path)
