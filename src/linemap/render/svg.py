"""SVG preview rendering for line diagrams using drawsvg.

The renderer only consumes computed coordinates and path arrays; it never
looks at the route's raw stop sequences.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import drawsvg as draw

from linemap.layout.labels import LabelPlacement, place_labels
from linemap.parser.model import LayoutResult, RouteData, TripPath
from linemap.render.constants import (
    CANVAS_PADDING,
    LABEL_CHAR_WIDTH_RATIO,
    LABEL_PAD_X,
    LABEL_PAD_Y,
    LEGEND_GAP,
    TITLE_HEIGHT,
)
from linemap.render.legend import compute_legend_dimensions, render_legend
from linemap.render.style import Theme, rgb


def render_svg(
    route: RouteData,
    result: LayoutResult,
    paths: Sequence[TripPath],
    theme: Theme,
    visible_trip_ids: Iterable[str] | None = None,
    title: str = "",
    width: int | None = None,
    height: int | None = None,
    padding: float = CANVAS_PADDING,
    legend: bool = True,
) -> str:
    """Render a laid-out route to an SVG string."""
    if not result.stops:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    visible = set(visible_trip_ids) if visible_trip_ids is not None else None
    shown = [tp for tp in paths if visible is None or tp.id in visible]
    legend_trips = [tp.trip for tp in shown]
    labels = place_labels(result)

    min_x, min_y, max_x, max_y = _content_bounds(result, shown, labels, theme)

    top = min_y - padding - (TITLE_HEIGHT if title else 0.0)
    left = min_x - padding

    legend_w, legend_h = (
        compute_legend_dimensions(legend_trips, theme) if legend else (0.0, 0.0)
    )
    legend_y = max_y + LEGEND_GAP

    auto_width = max(max_x - min_x, legend_w) + padding * 2
    auto_height = (legend_y + legend_h if legend_h else max_y) + padding - top

    svg_width = width or int(auto_width)
    svg_height = height or int(auto_height)

    d = draw.Drawing(svg_width, svg_height, origin=(left, top))

    d.append(draw.Rectangle(left, top, svg_width, svg_height, fill=theme.background_color))

    if title:
        d.append(
            draw.Text(
                title,
                theme.title_font_size,
                min_x,
                top + padding / 2 + theme.title_font_size,
                fill=theme.title_color,
                font_family=theme.label_font_family,
                font_weight="bold",
            )
        )

    # Lines behind stops, stops behind labels
    _render_paths(d, shown, theme)
    _render_stops(d, result, theme)
    _render_labels(d, labels, theme)

    if legend:
        render_legend(d, legend_trips, theme, min_x, legend_y)

    return d.as_svg()


def _content_bounds(
    result: LayoutResult,
    paths: Sequence[TripPath],
    labels: Sequence[LabelPlacement],
    theme: Theme,
) -> tuple[float, float, float, float]:
    """Bounding box of stops, path points and label boxes."""
    xs = [s.x for s in result.stops]
    ys = [s.y for s in result.stops]
    for tp in paths:
        for x, y, _z in (*tp.inbound_path, *tp.outbound_path):
            xs.append(x)
            ys.append(y)

    char_width = theme.label_font_size * LABEL_CHAR_WIDTH_RATIO
    for label in labels:
        half_w = len(label.text) * char_width / 2 + LABEL_PAD_X
        xs.extend((label.x - half_w, label.x + half_w))
        if label.above:
            ys.append(label.y - theme.label_font_size - LABEL_PAD_Y)
        else:
            ys.append(label.y + theme.label_font_size + LABEL_PAD_Y)

    return min(xs), min(ys), max(xs), max(ys)


def _render_paths(
    d: draw.Drawing,
    paths: Sequence[TripPath],
    theme: Theme,
) -> None:
    """Draw each trip as one polyline: inbound followed by outbound."""
    for tp in paths:
        points = [*tp.inbound_path, *tp.outbound_path]
        if len(points) < 2:
            continue
        coords: list[float] = []
        for x, y, _z in points:
            coords.extend((x, y))
        d.append(
            draw.Lines(
                *coords,
                close=False,
                fill="none",
                stroke=rgb(tp.color),
                stroke_width=theme.line_width,
                stroke_linejoin="round",
                stroke_linecap="round",
                **{"data-trip-id": tp.id},
            )
        )


def _render_stops(
    d: draw.Drawing,
    result: LayoutResult,
    theme: Theme,
) -> None:
    """Draw a marker for every laid-out stop, highlighting shared stops."""
    for stop in result.stops:
        pos = result.positions_for(stop.direction).get(stop.stop_id)
        served_by = len(pos.trip_ids) if pos else 0
        fill = theme.shared_stop_fill if served_by > 1 else theme.stop_fill
        d.append(
            draw.Circle(
                stop.x,
                stop.y,
                theme.stop_radius,
                fill=fill,
                stroke=theme.stop_stroke,
                stroke_width=theme.stop_stroke_width,
            )
        )


def _render_labels(
    d: draw.Drawing,
    labels: Sequence[LabelPlacement],
    theme: Theme,
) -> None:
    """Draw labels on a background box so they stay legible over lines."""
    char_width = theme.label_font_size * LABEL_CHAR_WIDTH_RATIO
    for label in labels:
        box_w = len(label.text) * char_width + LABEL_PAD_X * 2
        box_h = theme.label_font_size + LABEL_PAD_Y * 2
        box_y = label.y - box_h if label.above else label.y
        d.append(
            draw.Rectangle(
                label.x - box_w / 2,
                box_y,
                box_w,
                box_h,
                rx=3,
                ry=3,
                fill=theme.label_background,
            )
        )
        d.append(
            draw.Text(
                label.text,
                theme.label_font_size,
                label.x,
                box_y + box_h / 2,
                fill=theme.label_color,
                font_family=theme.label_font_family,
                text_anchor="middle",
                dominant_baseline="central",
            )
        )
