"""
Exception hierarchy raised by the collage entry points.

Every error is fatal to the enclosing operation; callers catch
:class:`CollageError` to handle all of them at once.
"""

from __future__ import annotations


class CollageError(Exception):
    """Base class for all collage failures."""


class MissingOption(CollageError):  # noqa: N818
    """A required option was absent from an option record."""

    def __init__(self, field: str, alias: str | None = None) -> None:
        self.field = field
        self.alias = alias or field
        label = field if self.alias == field else f"{field} ({self.alias})"
        super().__init__(f"Missing required option: {label}")


class SourceUnavailable(CollageError):  # noqa: N818
    """A URL or file source could not be fetched."""

    def __init__(self, location: str, kind: str = "file") -> None:
        self.location = location
        self.kind = kind
        verb = "download url" if kind == "url" else "load file"
        super().__init__(f"Could not {verb} source: {location}")


class UnsupportedSourceType(CollageError, TypeError):  # noqa: N818
    """A source value is none of the recognised kinds."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Unsupported source type: {type_name}")


class ImageDecodeError(CollageError):
    """Resolved bytes could not be decoded as an image."""
