"""Installed package version lookup."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

from image_collage.logging_utils import logger

DISTRIBUTION_NAME = "image-collage"
UNKNOWN_VERSION = "0.0.0"


def resolve_project_version() -> str:
    """Return the installed distribution version, or 0.0.0 from a checkout."""
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        logger.debug("%s is not installed; version unknown",
                     DISTRIBUTION_NAME)
        return UNKNOWN_VERSION
