"""
Raster surface wrapper used as the drawing target for every operation.

A :class:`Canvas` owns one RGBA Pillow image and exposes the handful of
2D-context style calls the collage layouts need: filling rectangles,
drawing an image scaled into a rectangle, filling text on a baseline and
encoding the result back to bytes.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError

from image_collage.constants import (
    COLOR_BLACK,
    COLOR_MODE_RGBA,
    COLOR_TRANSPARENT,
    ENCODE_FORMAT,
)
from image_collage.errors import ImageDecodeError

if TYPE_CHECKING:  # pragma: no cover
    from image_collage.type_defs import Color

_Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


def decode_image(data: bytes | Image.Image) -> Image.Image:
    """Decode encoded image bytes into an RGBA Pillow image."""
    if isinstance(data, Image.Image):
        return data.convert(COLOR_MODE_RGBA)
    try:
        with Image.open(io.BytesIO(data)) as img:
            return img.convert(COLOR_MODE_RGBA)
    except (UnidentifiedImageError, OSError) as e:
        msg = f"Could not decode image data ({len(data)} bytes): {e!s}"
        raise ImageDecodeError(msg) from e


class Canvas:
    """Mutable RGBA raster surface with drawing helpers."""

    def __init__(self, image: Image.Image) -> None:
        self.image = image

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        background: Color | None = None,
    ) -> Canvas:
        """Create a transparent surface, filled when background is set."""
        canvas = cls(Image.new(COLOR_MODE_RGBA, (width, height),
                               COLOR_TRANSPARENT))
        if background is not None:
            canvas.fill_rect(0, 0, width, height, background)
        return canvas

    @property
    def width(self) -> int:
        """Width in pixels."""
        return self.image.width

    @property
    def height(self) -> int:
        """Height in pixels."""
        return self.image.height

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height)."""
        return self.image.size

    def fill_rect(  # noqa: PLR0913
        self,
        x: int,
        y: int,
        w: int,
        h: int,
        color: Color,
    ) -> None:
        """Fill the rectangle (x, y, w, h) with a solid color."""
        if w <= 0 or h <= 0:
            return
        draw = ImageDraw.Draw(self.image)
        draw.rectangle([x, y, x + w - 1, y + h - 1], fill=color)

    def draw_image(  # noqa: PLR0913
        self,
        data: bytes | Image.Image,
        x: int,
        y: int,
        w: int | None = None,
        h: int | None = None,
    ) -> None:
        """
        Draw an image scaled into the rectangle (x, y, w, h).

        Missing w or h fall back to the image's natural size. The image
        is composited source-over; anything outside the surface is
        clipped.
        """
        img = decode_image(data)
        target = (w or img.width, h or img.height)
        if target != img.size:
            img = img.resize(target, Image.Resampling.LANCZOS)
        layer = Image.new(COLOR_MODE_RGBA, self.image.size, COLOR_TRANSPARENT)
        layer.paste(img, (x, y))
        self.image.alpha_composite(layer)

    def fill_text(  # noqa: PLR0913
        self,
        text: str,
        x: int,
        y: int,
        *,
        font: _Font | None = None,
        fill: Color = COLOR_BLACK,
    ) -> None:
        """Draw text with its alphabetic baseline starting at (x, y)."""
        draw = ImageDraw.Draw(self.image)
        face = font or ImageFont.load_default()
        if isinstance(face, ImageFont.FreeTypeFont):
            draw.text((x, y), text, font=face, fill=fill, anchor="ls")
        else:
            # Bitmap fonts have no anchor support; lift by the glyph box
            top = draw.textbbox((0, 0), text, font=face)[3]
            draw.text((x, y - top), text, font=face, fill=fill)

    def to_bytes(self, fmt: str = ENCODE_FORMAT) -> bytes:
        """Encode the surface, PNG by default."""
        buffer = io.BytesIO()
        self.image.save(buffer, format=fmt)
        return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"
