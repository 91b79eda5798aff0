"""Color palette for VoxMind supporting light and dark themes."""

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
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#1B1B1F", dark="#F2F2F5")
    TEXT_SECONDARY = ThemeColors(light="#5F6368", dark="#A8ACB3")
    TEXT_ON_ACCENT = ThemeColors(light="#FFFFFF", dark="#FFFFFF")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#17181C")
    BACKGROUND_CARD = ThemeColors(light="#F4F5F7", dark="#23252B")
    BORDER = ThemeColors(light="#D5D8DD", dark="#3B3E46")

    # Option buttons: idle options are gray, the picked option turns red
    OPTION_IDLE = ThemeColors(light="#9E9E9E", dark="#5A5D66")
    OPTION_SELECTED = ThemeColors(light="#E53935", dark="#EF5350")

    # Result styling
    PASS = ThemeColors(light="#00897B", dark="#26A69A")
    FAIL = ThemeColors(light="#E53935", dark="#EF5350")

    ACCENT = ThemeColors(light="#3949AB", dark="#7986CB")
    NOTICE_BG = ThemeColors(light="#323232", dark="#E0E0E0")
    NOTICE_TEXT = ThemeColors(light="#FFFFFF", dark="#111111")
