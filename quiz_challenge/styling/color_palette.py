"""Color palette for Quiz Challenge supporting light and dark themes."""

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

    # Window background gradient
    WINDOW_GRADIENT_START = ThemeColors(
        light="#EC4899",      # Pink
        dark="#831843"        # Deep Pink
    )

    WINDOW_GRADIENT_END = ThemeColors(
        light="#FFFFFF",      # White
        dark="#1E1E1E"        # Dark Gray
    )

    HEADER_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#F5F5F5"
    )

    # Card
    CARD_BG = ThemeColors(
        light="#FFFFFF",
        dark="#2D2D2D"
    )

    CARD_TEXT = ThemeColors(
        light="#000000",
        dark="#F5F5F5"
    )

    # Option buttons
    OPTION_BG = ThemeColors(
        light="#1D4ED8",      # Blue 700
        dark="#1E40AF"
    )

    OPTION_HOVER_BG = ThemeColors(
        light="#1E40AF",      # Blue 800
        dark="#1E3A8A"
    )

    OPTION_SELECTED_BG = ThemeColors(
        light="#22C55E",      # Green 500
        dark="#16A34A"
    )

    # Action buttons
    SUBMIT_BG = ThemeColors(
        light="#16A34A",      # Green 600
        dark="#15803D"
    )

    ACTION_BG = ThemeColors(
        light="#2563EB",      # Blue 600
        dark="#3B82F6"
    )

    BUTTON_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#FFFFFF"
    )

    BUTTON_DISABLED_BG = ThemeColors(
        light="#9CA3AF",
        dark="#4B5563"
    )

    # Status colors
    SUCCESS = ThemeColors(
        light="#22C55E",      # Green
        dark="#6FCF6F"
    )

    WARNING = ThemeColors(
        light="#EAB308",      # Yellow
        dark="#FFC83D"
    )

    ERROR = ThemeColors(
        light="#EF4444",      # Red
        dark="#FF6B6B"
    )

    TIMER = ThemeColors(
        light="#DC2626",      # Red 600
        dark="#F87171"
    )

    TIMER_EMPHASIS_BG = ThemeColors(
        light="#B91C1C",
        dark="#EF4444"
    )

    FOOTER_TEXT = ThemeColors(
        light="#000000",
        dark="#D1D5DB"
    )
