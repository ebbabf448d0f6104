"""Theme definitions for line diagrams."""

from linemap.themes.light import LIGHT_THEME
from linemap.themes.slate import SLATE_THEME

THEMES = {
    "slate": SLATE_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "SLATE_THEME", "LIGHT_THEME"]
