"""Runtime utilities for option validation and version helpers."""

from .validation import coerce_options, require_fields
from .version import resolve_project_version

__all__ = [
    "coerce_options",
    "require_fields",
    "resolve_project_version",
]
