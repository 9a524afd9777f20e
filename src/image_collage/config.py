"""
Option schemas and config loader for the image collage library.

Defines Pydantic models for the three entry points plus a TOML-based
loader. Field names are snake_case; the camelCase keys of
JavaScript-style option objects are accepted as aliases. Every field is
optional at the schema level so that required-ness can be reported as
:class:`~image_collage.errors.MissingOption` in a fixed order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from image_collage.config_defaults import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_OUTER_SPACING_LEFT,
    DEFAULT_OUTER_SPACING_TOP,
    DEFAULT_SPACING,
)
from image_collage.type_defs import Color  # noqa: TC001


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


class _Options(BaseModel):
    model_config = ConfigDict(
        alias_generator=_camel,
        populate_by_name=True,
        frozen=True,
    )


class OuterSpacing(_Options):
    """Margins applied before the first column and the first row."""

    left: int = Field(DEFAULT_OUTER_SPACING_LEFT, ge=0)
    top: int = Field(DEFAULT_OUTER_SPACING_TOP, ge=0)


class LayoutOptions(_Options):
    """Options for :func:`~image_collage.create_collage`."""

    sources: list[Any] | None = None
    width: int | None = Field(None, ge=1)
    height: int | None = Field(None, ge=1)
    image_width: int | None = Field(None, ge=1)
    image_height: int | None = Field(None, ge=1)
    spacing: int = Field(DEFAULT_SPACING, ge=0)
    background_color: Color = DEFAULT_BACKGROUND_COLOR
    overlay: Any | None = None
    overlay_width: int | None = Field(None, ge=1)
    overlay_height: int | None = Field(None, ge=1)
    canvas_width: int | None = Field(None, ge=1)
    canvas_height: int | None = Field(None, ge=1)
    outer_spacing: OuterSpacing = Field(
        default_factory=lambda: OuterSpacing.model_validate({}),
        validation_alias=AliasChoices(
            "outer_spacing", "outerSpacing", "outerspacing",
        ),
    )


class TextOptions(_Options):
    """Options for :func:`~image_collage.generate_image_from_text`."""

    canvas_width: int | None = Field(None, ge=1)
    canvas_height: int | None = Field(None, ge=1)
    text_strings: list[str] | None = None
    background_color: Color = DEFAULT_BACKGROUND_COLOR


class OverlayOptions(_Options):
    """Options for :func:`~image_collage.add_overlay`."""

    canvas_width: int | None = Field(None, ge=1)
    canvas_height: int | None = Field(None, ge=1)
    sources: list[Any] | None = None
    overlay: Any | None = None
    image_width: int | None = Field(None, ge=1)
    image_height: int | None = Field(None, ge=1)
    overlay_width: int | None = Field(None, ge=1)
    overlay_height: int | None = Field(None, ge=1)


class CollageConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of a collage TOML file with optional
    ``[layout]``, ``[text]`` and ``[overlay]`` tables.
    """

    layout: LayoutOptions = Field(
        default_factory=lambda: LayoutOptions.model_validate({}),
    )
    text: TextOptions = Field(
        default_factory=lambda: TextOptions.model_validate({}),
    )
    overlay: OverlayOptions = Field(
        default_factory=lambda: OverlayOptions.model_validate({}),
    )


class ConfigLoader:
    """Loads a TOML configuration file into a typed config object."""

    @staticmethod
    def load(path: str | Path) -> CollageConfig:
        """
        Load a collage configuration from a TOML file.

        Missing tables fall back to empty option records; required
        options are only enforced when the record is used.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return CollageConfig.model_validate(doc.unwrap())
