"""
Collage building split into grid primitives and public layouts.

The three entry points are re-exported here and from the top-level
package.
"""

from __future__ import annotations

from . import core, layouts
from .core import derived_canvas_size, get_font, text_origin, tile_origin
from .layouts import (
    add_overlay,
    create_collage,
    generate_image_from_text,
    resolve_layout_options,
)

__all__ = [
    "add_overlay",
    "core",
    "create_collage",
    "derived_canvas_size",
    "generate_image_from_text",
    "get_font",
    "layouts",
    "resolve_layout_options",
    "text_origin",
    "tile_origin",
]
