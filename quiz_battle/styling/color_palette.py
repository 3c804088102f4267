"""Color palette for Quiz Battle supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        light="#000000",      # Black
        dark="#F5F5F5"        # WhiteSmoke
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",      # White
        dark="#1E1E1E"        # Dark Gray
    )

    BORDER_PRIMARY = ThemeColors(
        light="#D1D5DB",      # Gray 300
        dark="#555555"        # Dark Gray
    )

    # Buttons: blue/indigo
    BUTTON_PRIMARY_BG = ThemeColors(
        light="#3B82F6",      # Blue 500
        dark="#4A9EFF"        # Lighter Blue
    )

    BUTTON_PRIMARY_HOVER = ThemeColors(
        light="#2563EB",      # Blue 600
        dark="#3B82F6"        # Blue 500
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",      # White
        dark="#000000"        # Black
    )

    BUTTON_DISABLED_BG = ThemeColors(
        light="#D1D5DB",      # Gray 300
        dark="#3A3A3A"        # Dark Gray
    )

    # Option highlighting after an answer is checked
    OPTION_HOVER_BG = ThemeColors(
        light="#DBEAFE",      # Blue 100
        dark="#1E3A5F"        # Navy
    )

    OPTION_CORRECT_BG = ThemeColors(
        light="#BBF7D0",      # Green 200
        dark="#14532D"        # Green 900
    )

    OPTION_WRONG_BG = ThemeColors(
        light="#FECACA",      # Red 200
        dark="#7F1D1D"        # Red 900
    )

    ERROR = ThemeColors(
        light="#EF4444",      # Red 500
        dark="#FF6B6B"        # Light Red
    )
