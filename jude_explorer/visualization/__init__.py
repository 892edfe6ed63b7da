"""Visualization utilities for the explorer."""

from .colors import DEFAULT_COLOR, HIGHLIGHT_COLOR, ColorScheme, normalize_color

__all__ = [
    "DEFAULT_COLOR",
    "HIGHLIGHT_COLOR",
    "ColorScheme",
    "normalize_color",
]
