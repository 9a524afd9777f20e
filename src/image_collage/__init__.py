"""Public package exports for the image collage library."""

from __future__ import annotations

from .canvas import Canvas
from .collage import (
    add_overlay,
    create_collage,
    generate_image_from_text,
    resolve_layout_options,
)
from .config import (
    CollageConfig,
    ConfigLoader,
    LayoutOptions,
    OuterSpacing,
    OverlayOptions,
    TextOptions,
)
from .errors import (
    CollageError,
    ImageDecodeError,
    MissingOption,
    SourceUnavailable,
    UnsupportedSourceType,
)
from .runtime import resolve_project_version
from .sources import as_image_source, resolve_source, resolve_sources
from .type_defs import BufferSource, PathSource, SurfaceSource, UrlSource

__version__ = resolve_project_version()

__all__ = [
    "BufferSource",
    "Canvas",
    "CollageConfig",
    "CollageError",
    "ConfigLoader",
    "ImageDecodeError",
    "LayoutOptions",
    "MissingOption",
    "OuterSpacing",
    "OverlayOptions",
    "PathSource",
    "SourceUnavailable",
    "SurfaceSource",
    "TextOptions",
    "UnsupportedSourceType",
    "UrlSource",
    "__version__",
    "add_overlay",
    "as_image_source",
    "create_collage",
    "generate_image_from_text",
    "resolve_layout_options",
    "resolve_source",
    "resolve_sources",
]
