"""Grid arithmetic and text primitives for building collages."""

from __future__ import annotations

from functools import lru_cache

from PIL import ImageFont

from image_collage.constants import (
    TEXT_FONT_FILES,
    TEXT_FONT_PX,
    TEXT_LINE_HEIGHT,
    TEXT_ORIGIN_X,
    TEXT_ORIGIN_Y,
)
from image_collage.type_defs import CollageLayout


def derived_canvas_size(
    grid: tuple[int, int],
    tile: tuple[int, int],
    spacing: int,
) -> tuple[int, int]:
    """
    Return the canvas size that exactly fits the grid.

    Each axis is ``count * tile + (count - 1) * spacing``.
    """
    cols, rows = grid
    tile_w, tile_h = tile
    return (
        cols * tile_w + (cols - 1) * spacing,
        rows * tile_h + (rows - 1) * spacing,
    )


def tile_origin(index: int, layout: CollageLayout) -> tuple[int, int] | None:
    """
    Return the top-left pixel of tile ``index``, or None past capacity.

    Tiles fill row-major. The horizontal offset adds one spacing per
    column including the first, and the vertical offset adds none.
    """
    if index < 0 or index >= layout.capacity:
        return None
    col = index % layout.width
    row = index // layout.width
    x = (col * layout.image_width + (col + 1) * layout.spacing
         + layout.outer_left)
    y = row * layout.image_height + layout.outer_top
    return x, y


def text_origin(index: int) -> tuple[int, int]:
    """Return the baseline origin for the text line at ``index``."""
    return TEXT_ORIGIN_X, TEXT_ORIGIN_Y + TEXT_LINE_HEIGHT * index


@lru_cache(maxsize=8)
def get_font(px: int = TEXT_FONT_PX) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load the text face at the given pixel size with fallback; cached."""
    for name in TEXT_FONT_FILES:
        try:
            return ImageFont.truetype(name, px)
        except OSError:
            continue
    return ImageFont.load_default(size=px)
