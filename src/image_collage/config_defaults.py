"""Shared default values for user-facing option records."""

# Layout
DEFAULT_SPACING = 0
DEFAULT_BACKGROUND_COLOR = "#000000"
DEFAULT_OUTER_SPACING_LEFT = 0
DEFAULT_OUTER_SPACING_TOP = 0
