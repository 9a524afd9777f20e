"""
Test configuration and shared fixtures for image_collage.

This module defines reusable pytest fixtures for building encoded
images in memory and on disk. These fixtures support all test modules
in the test suite.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
import io
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from image_collage.logging_utils import logger


def encode_png(color: str, size: tuple[int, int] = (10, 10)) -> bytes:
    """Return PNG bytes for a solid image of the given color."""
    buffer = io.BytesIO()
    Image.new("RGB", size, color=color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def make_png() -> Callable[..., bytes]:
    """Factory for solid-color PNG payloads."""
    return encode_png


@pytest.fixture
def red_png() -> bytes:
    """A 10x10 red PNG."""
    return encode_png("red")


@pytest.fixture
def make_image_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing solid-color PNG files under tmp_path."""

    def _make(name: str, color: str = "red",
              size: tuple[int, int] = (10, 10)) -> Path:
        path = tmp_path / name
        path.write_bytes(encode_png(color, size))
        return path

    return _make


@pytest.fixture
def sample_image() -> Image.Image:
    """Create a sample 100x100 red RGB PIL image."""
    return Image.new("RGB", (100, 100), color="red")


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the collage logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
