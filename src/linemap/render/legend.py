"""Legend generation for line diagram SVGs."""

from __future__ import annotations

from collections.abc import Sequence

import drawsvg as draw

from linemap.parser.model import Trip
from linemap.render.constants import (
    LEGEND_BORDER_RADIUS,
    LEGEND_CHAR_WIDTH_RATIO,
    LEGEND_LINE_HEIGHT,
    LEGEND_PADDING,
    LEGEND_SWATCH_WIDTH,
    LEGEND_TEXT_GAP,
)
from linemap.render.style import Theme, rgb


def compute_legend_dimensions(
    trips: Sequence[Trip],
    theme: Theme,
) -> tuple[float, float]:
    """Compute the width and height of the legend without rendering it.

    Returns (width, height). Returns (0, 0) if there are no trips.
    """
    if not trips:
        return (0.0, 0.0)

    text_offset = LEGEND_SWATCH_WIDTH + LEGEND_TEXT_GAP
    max_name_len = max(len(trip.name) for trip in trips)
    char_width = theme.legend_font_size * LEGEND_CHAR_WIDTH_RATIO

    width = LEGEND_PADDING * 2 + text_offset + max_name_len * char_width
    height = LEGEND_PADDING * 2 + len(trips) * LEGEND_LINE_HEIGHT
    return (width, height)


def render_legend(
    drawing: draw.Drawing,
    trips: Sequence[Trip],
    theme: Theme,
    x: float,
    y: float,
) -> None:
    """Render a legend of trip names and colors at (x, y), drawing downward."""
    if not trips:
        return

    legend_width, legend_height = compute_legend_dimensions(trips, theme)
    text_offset = LEGEND_SWATCH_WIDTH + LEGEND_TEXT_GAP

    drawing.append(
        draw.Rectangle(
            x,
            y,
            legend_width,
            legend_height,
            rx=LEGEND_BORDER_RADIUS,
            ry=LEGEND_BORDER_RADIUS,
            fill=theme.legend_background,
        )
    )

    for i, trip in enumerate(trips):
        entry_y = y + LEGEND_PADDING + i * LEGEND_LINE_HEIGHT + LEGEND_LINE_HEIGHT / 2

        drawing.append(
            draw.Line(
                x + LEGEND_PADDING,
                entry_y,
                x + LEGEND_PADDING + LEGEND_SWATCH_WIDTH,
                entry_y,
                stroke=rgb(trip.color),
                stroke_width=theme.line_width / 2,
                stroke_linecap="round",
            )
        )
        drawing.append(
            draw.Text(
                trip.name,
                theme.legend_font_size,
                x + LEGEND_PADDING + text_offset,
                entry_y,
                fill=theme.legend_text_color,
                font_family=theme.label_font_family,
                dominant_baseline="central",
            )
        )
