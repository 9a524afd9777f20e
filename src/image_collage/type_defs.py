"""
Defines shared type aliases and records for the image collage library.

Image sources are modelled as a closed set of tagged variants. Raw
caller values are classified into one of them exactly once, at the call
boundary, by :func:`image_collage.sources.as_image_source`.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Union

if TYPE_CHECKING:  # pragma: no cover
    from PIL import Image

    from image_collage.canvas import Canvas

Color = Union[str, tuple[int, int, int], tuple[int, int, int, int]]
SourceKind = Literal["buffer", "path", "url", "surface"]


@dataclass(frozen=True, slots=True)
class BufferSource:
    """Raw encoded image bytes held in memory."""

    data: bytes
    kind: SourceKind = "buffer"


@dataclass(frozen=True, slots=True)
class PathSource:
    """Image file on the local filesystem."""

    path: str
    kind: SourceKind = "path"


@dataclass(frozen=True, slots=True)
class UrlSource:
    """Remote image reachable over http(s) or ftp."""

    url: str
    kind: SourceKind = "url"


@dataclass(frozen=True, slots=True)
class SurfaceSource:
    """An already rendered surface, encoded on demand."""

    surface: Canvas | Image.Image
    kind: SourceKind = "surface"


ImageSource = Union[BufferSource, PathSource, UrlSource, SurfaceSource]
SourceValue = Union[
    bytes, bytearray, memoryview, str, os.PathLike, "Canvas", "Image.Image",
    ImageSource,
]


@dataclass(frozen=True, slots=True)
class CollageLayout:
    """Validated, fully defaulted collage configuration."""

    sources: tuple[SourceValue, ...]
    width: int
    height: int
    image_width: int
    image_height: int
    spacing: int
    background_color: Color
    canvas_width: int
    canvas_height: int
    outer_left: int = 0
    outer_top: int = 0
    overlay: SourceValue | None = None
    overlay_width: int | None = None
    overlay_height: int | None = None

    @property
    def canvas_size(self) -> tuple[int, int]:
        """Return (canvas_width, canvas_height)."""
        return self.canvas_width, self.canvas_height

    @property
    def capacity(self) -> int:
        """Number of tiles the grid can hold."""
        return self.width * self.height
