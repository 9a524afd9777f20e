"""
Public collage entry points.

Each operation follows the same shape: validate options into a fresh
record, create a surface, resolve every source concurrently, then draw
sequentially in source order so the final raster never depends on which
fetch finished first.
"""

from __future__ import annotations

import asyncio
from typing import Any

from image_collage.canvas import Canvas, decode_image
from image_collage.collage.core import (
    derived_canvas_size,
    get_font,
    text_origin,
    tile_origin,
)
from image_collage.config import LayoutOptions, OverlayOptions, TextOptions
from image_collage.constants import TEXT_FILL
from image_collage.logging_utils import logger
from image_collage.runtime.validation import coerce_options, require_fields
from image_collage.sources import (
    as_image_source,
    classify_sources,
    resolve_source,
    resolve_sources,
)
from image_collage.type_defs import CollageLayout, ImageSource

LAYOUT_REQUIRED = ("sources", "width", "height", "image_width",
                   "image_height")
TEXT_REQUIRED = ("canvas_width", "canvas_height", "text_strings")
OVERLAY_REQUIRED = ("canvas_width", "canvas_height", "sources", "overlay",
                    "image_width", "image_height")


def resolve_layout_options(options: Any) -> CollageLayout:
    """
    Validate collage options and apply defaults.

    Accepts a :class:`LayoutOptions`, a mapping of option keys or a bare
    list of sources. Returns a new frozen record; the input is left
    untouched.

    Raises:
        MissingOption: For the first absent field among sources, width,
            height, image_width and image_height.
        pydantic.ValidationError: For values of the wrong type or range.

    """
    opts = coerce_options(options, LayoutOptions)
    require_fields(opts, LAYOUT_REQUIRED)

    derived_w, derived_h = derived_canvas_size(
        (opts.width, opts.height),
        (opts.image_width, opts.image_height),
        opts.spacing,
    )
    return CollageLayout(
        sources=tuple(opts.sources),
        width=opts.width,
        height=opts.height,
        image_width=opts.image_width,
        image_height=opts.image_height,
        spacing=opts.spacing,
        background_color=opts.background_color,
        canvas_width=opts.canvas_width or derived_w,
        canvas_height=opts.canvas_height or derived_h,
        outer_left=opts.outer_spacing.left,
        outer_top=opts.outer_spacing.top,
        overlay=opts.overlay,
        overlay_width=opts.overlay_width,
        overlay_height=opts.overlay_height,
    )


def _classify(
    sources: tuple[Any, ...] | list[Any],
    overlay: Any,
) -> tuple[list[ImageSource], ImageSource | None]:
    """Classify sources and overlay before any surface is created."""
    overlay_source = None if overlay is None else as_image_source(overlay)
    return classify_sources(sources), overlay_source


async def _resolve_with_overlay(
    sources: list[ImageSource],
    overlay: ImageSource | None,
) -> tuple[list[bytes], bytes | None]:
    """Resolve sources and the optional overlay in one gather."""
    if overlay is None:
        return await resolve_sources(sources), None
    photos, overlay_data = await asyncio.gather(
        resolve_sources(sources),
        resolve_source(overlay),
    )
    return photos, overlay_data


async def create_collage(options: Any) -> Canvas:
    """
    Tile every source onto a grid canvas.

    Sources past ``width * height`` are dropped without error. When an
    overlay is configured it is drawn at the canvas origin after every
    tile.
    """
    layout = resolve_layout_options(options)
    sources, overlay = _classify(layout.sources, layout.overlay)

    canvas = Canvas.new(*layout.canvas_size,
                        background=layout.background_color)
    photos, overlay_data = await _resolve_with_overlay(sources, overlay)
    overlay_img = (
        None if overlay_data is None else decode_image(overlay_data)
    )

    if len(photos) > layout.capacity:
        logger.warning(
            "Dropping %d source(s) beyond grid capacity %d",
            len(photos) - layout.capacity,
            layout.capacity,
        )

    for i, photo in enumerate(photos):
        origin = tile_origin(i, layout)
        if origin is None:
            continue
        canvas.draw_image(photo, *origin, layout.image_width,
                          layout.image_height)
        if overlay_img is not None:
            canvas.draw_image(overlay_img, 0, 0, layout.overlay_width,
                              layout.overlay_height)

    logger.info(
        "Collage composed: %dx%d canvas, %d tile(s)",
        canvas.width,
        canvas.height,
        min(len(photos), layout.capacity),
    )
    return canvas


async def _as_text(value: str) -> str:
    return value


async def generate_image_from_text(options: Any) -> Canvas:
    """
    Draw each string on its own line over a filled background.

    Lines start at x=150, with baselines from y=150 down in steps of
    75px. Text is always black.
    """
    opts = coerce_options(options, TextOptions)
    require_fields(opts, TEXT_REQUIRED)

    canvas = Canvas.new(opts.canvas_width, opts.canvas_height,
                        background=opts.background_color)
    font = get_font()
    texts = await asyncio.gather(*(_as_text(t) for t in opts.text_strings))
    for i, text in enumerate(texts):
        x, y = text_origin(i)
        canvas.fill_text(text, x, y, font=font, fill=TEXT_FILL)

    logger.info("Rendered %d text line(s)", len(texts))
    return canvas


async def add_overlay(options: Any) -> Canvas:
    """
    Stamp every source at the origin with the overlay on top of each.

    All sources share the rectangle (0, 0, image_width, image_height),
    so later sources cover earlier ones. The canvas starts transparent.
    """
    opts = coerce_options(options, OverlayOptions)
    require_fields(opts, OVERLAY_REQUIRED)
    sources, overlay = _classify(opts.sources, opts.overlay)

    canvas = Canvas.new(opts.canvas_width, opts.canvas_height)
    photos, overlay_data = await _resolve_with_overlay(sources, overlay)
    overlay_img = decode_image(overlay_data)

    for photo in photos:
        canvas.draw_image(photo, 0, 0, opts.image_width, opts.image_height)
        canvas.draw_image(overlay_img, 0, 0, opts.overlay_width,
                          opts.overlay_height)

    logger.info("Overlay stamped on %d source(s)", len(photos))
    return canvas
