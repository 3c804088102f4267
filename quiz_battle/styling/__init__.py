"""Styling module for Quiz Battle."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
