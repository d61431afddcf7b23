"""Preview rendering for packer state.

Draws the canvas, the packer's free regions and the placed rectangles into
a single RGBA image so a packing run can be inspected visually.

Typical usage example:
    img = render_preview(packer, placements, scale=5)
    img.save("atlas.png")
"""

from itertools import cycle
from typing import Iterable, List

import numpy as np
from PIL import Image

from ..globs import debug_print
from .packers.shelf_packer import Packer, Rect
from .type_hints import PixelBuffer, RGBAColor

BACKGROUND_GRAY = 0.8
FREE_REGION_GRAY = 0.5
FREE_REGION_GRAY_STEP = 0.025

PLACEMENT_COLORS: List[RGBAColor] = [
    (0, 0, 255, 255),  # blue
    (0, 255, 255, 255),  # cyan
    (64, 64, 64, 255),  # dark gray
    (0, 255, 0, 255),  # green
    (192, 192, 192, 255),  # light gray
    (255, 0, 255, 255),  # magenta
]


def gray(value: float) -> RGBAColor:
    level = int(round(np.clip(value, 0.0, 1.0) * 255))
    return level, level, level, 255


def _fill(buffer: PixelBuffer, rect: Rect, color: RGBAColor) -> None:
    height, width = buffer.shape[:2]
    left, top = rect.top_left
    right, bottom = rect.bottom_right
    buffer[max(top, 0):min(bottom, height), max(left, 0):min(right, width)] = color


def render_buffer(packer: Packer, placements: Iterable[Rect]) -> PixelBuffer:
    """Draw the packer state into a height x width x 4 uint8 array.

    Free regions get darker with their position in the store. Placements are
    drawn on top in a repeating color cycle.
    """
    buffer = np.zeros((packer.height, packer.width, 4), dtype=np.uint8)
    buffer[:, :] = gray(BACKGROUND_GRAY)

    for i, area in enumerate(packer.areas):
        _fill(buffer, area, gray(FREE_REGION_GRAY - FREE_REGION_GRAY_STEP * i))

    colors = cycle(PLACEMENT_COLORS)
    for rect in placements:
        _fill(buffer, rect, next(colors))

    return buffer


def render_preview(packer: Packer, placements: Iterable[Rect], scale: int = 1) -> Image.Image:
    """Render the packer state as an image.

    Args:
        packer: Packer whose free regions are drawn.
        placements: Rectangles returned by the packer.
        scale: Integer magnification applied with nearest neighbour sampling.

    Returns:
        RGBA image of size (width * scale, height * scale).
    """
    if scale < 1:
        raise ValueError("scale must be positive")

    img = Image.fromarray(render_buffer(packer, placements))
    if scale != 1:
        img = img.resize((packer.width * scale, packer.height * scale), Image.NEAREST)
    return img


def save_preview(path: str, packer: Packer, placements: Iterable[Rect], scale: int = 1) -> None:
    img = render_preview(packer, placements, scale)
    img.save(path)
    debug_print("DEBUG: Saved preview %dx%d to %s", img.width, img.height, path)
