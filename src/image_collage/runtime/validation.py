"""Option validation helpers shared by the collage entry points."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel

from image_collage.errors import MissingOption

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def coerce_options(options: Any, model: type[_ModelT]) -> _ModelT:
    """
    Build a fresh options model from a model, mapping, or source list.

    A bare list or tuple is read as ``{"sources": options}``. The
    caller's object is never modified.
    """
    if isinstance(options, model):
        return options.model_copy()
    if isinstance(options, Sequence) and not isinstance(
            options, (str, bytes, bytearray)):
        return model.model_validate({"sources": list(options)})
    if isinstance(options, Mapping):
        return model.model_validate(dict(options))
    msg = (f"Options must be a {model.__name__}, a mapping or a list of "
           f"sources, got {type(options).__name__}")
    raise TypeError(msg)


def require_fields(options: BaseModel, fields: Sequence[str]) -> None:
    """Raise MissingOption for the first field, in order, that is None."""
    model_fields = type(options).model_fields
    for name in fields:
        if getattr(options, name) is None:
            alias = model_fields[name].alias
            raise MissingOption(name, alias)
