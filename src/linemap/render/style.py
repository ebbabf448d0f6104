"""Theme and style constants for line diagram rendering."""

from __future__ import annotations

from dataclasses import dataclass

from linemap.parser.model import Color


@dataclass
class Theme:
    """Visual theme for a line diagram."""

    name: str
    background_color: str
    stop_fill: str
    shared_stop_fill: str
    stop_stroke: str
    stop_radius: float
    stop_stroke_width: float
    line_width: float
    label_color: str
    label_background: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    legend_background: str
    legend_text_color: str
    legend_font_size: float


def rgb(color: Color) -> str:
    """Format a 0-255 RGB triple as an SVG color."""
    r, g, b = color
    return f"rgb({r},{g},{b})"
