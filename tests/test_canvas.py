"""Tests for the Canvas surface wrapper."""

from __future__ import annotations

import io

import pytest
from PIL import Image, ImageFont

from image_collage.canvas import Canvas, decode_image
from image_collage.errors import CollageError, ImageDecodeError
pytestmark = pytest.mark.visual

RGBA_RED = (255, 0, 0, 255)
RGBA_WHITE = (255, 255, 255, 255)
RGBA_BLACK = (0, 0, 0, 255)


def test_new_canvas_is_transparent_by_default() -> None:
    canvas = Canvas.new(20, 10)
    assert canvas.size == (20, 10)
    assert canvas.width == 20  # noqa: PLR2004
    assert canvas.height == 10  # noqa: PLR2004
    assert canvas.image.mode == "RGBA"
    assert canvas.image.getpixel((5, 5)) == (0, 0, 0, 0)


def test_new_canvas_fills_background() -> None:
    canvas = Canvas.new(8, 8, background="#000000")
    assert canvas.image.getpixel((0, 0)) == RGBA_BLACK
    assert canvas.image.getpixel((7, 7)) == RGBA_BLACK


def test_fill_rect_covers_exact_area() -> None:
    canvas = Canvas.new(10, 10, background="white")
    canvas.fill_rect(2, 3, 4, 5, "red")
    assert canvas.image.getpixel((2, 3)) == RGBA_RED
    assert canvas.image.getpixel((5, 7)) == RGBA_RED
    assert canvas.image.getpixel((6, 7)) == RGBA_WHITE
    assert canvas.image.getpixel((5, 8)) == RGBA_WHITE


def test_fill_rect_ignores_empty_area() -> None:
    canvas = Canvas.new(4, 4, background="white")
    canvas.fill_rect(0, 0, 0, 4, "red")
    assert canvas.image.getpixel((0, 0)) == RGBA_WHITE


def test_draw_image_scales_into_rect(red_png: bytes) -> None:
    canvas = Canvas.new(40, 40, background="white")
    canvas.draw_image(red_png, 10, 10, 20, 20)
    assert canvas.image.getpixel((10, 10)) == RGBA_RED
    assert canvas.image.getpixel((29, 29)) == RGBA_RED
    assert canvas.image.getpixel((30, 30)) == RGBA_WHITE
    assert canvas.image.getpixel((9, 9)) == RGBA_WHITE


def test_draw_image_natural_size_and_clipping(red_png: bytes) -> None:
    canvas = Canvas.new(15, 15, background="white")
    canvas.draw_image(red_png, 10, 10)
    assert canvas.image.getpixel((14, 14)) == RGBA_RED
    assert canvas.image.getpixel((9, 9)) == RGBA_WHITE


def test_draw_image_respects_alpha() -> None:
    translucent = Image.new("RGBA", (4, 4), (255, 0, 0, 0))
    canvas = Canvas.new(4, 4, background="white")
    canvas.draw_image(translucent, 0, 0, 4, 4)
    assert canvas.image.getpixel((1, 1)) == RGBA_WHITE


def test_fill_text_marks_pixels_above_baseline() -> None:
    canvas = Canvas.new(200, 100, background="white")
    canvas.fill_text("M", 20, 60, font=ImageFont.load_default(size=40))
    box = canvas.image.getchannel("R").point(lambda v: 255 - v).getbbox()
    assert box is not None
    assert box[3] <= 61  # noqa: PLR2004
    assert box[0] >= 19  # noqa: PLR2004


def test_to_bytes_round_trips_png() -> None:
    canvas = Canvas.new(6, 4, background="red")
    with Image.open(io.BytesIO(canvas.to_bytes())) as img:
        assert img.format == "PNG"
        assert img.size == (6, 4)


def test_decode_image_rejects_garbage() -> None:
    with pytest.raises(ImageDecodeError, match="9 bytes") as exc_info:
        decode_image(b"not a png")
    assert isinstance(exc_info.value, CollageError)


def test_repr_mentions_size() -> None:
    assert repr(Canvas.new(3, 2)) == "Canvas(width=3, height=2)"
