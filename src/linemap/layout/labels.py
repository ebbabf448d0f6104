"""Label placement for stop names.

Horizontal labels, placed on the side of each stop facing away from the
other direction (inbound above, outbound below), with collision avoidance.
"""

from __future__ import annotations

from dataclasses import dataclass

from linemap.layout.constants import (
    CHAR_WIDTH,
    COLLISION_MULTIPLIER,
    FONT_HEIGHT,
    LABEL_MARGIN,
    LABEL_OFFSET,
)
from linemap.parser.model import Direction, LayoutResult, StopLayout


@dataclass
class LabelPlacement:
    """Placement information for a stop label."""

    stop_id: str
    text: str
    x: float
    y: float
    above: bool
    direction: Direction = Direction.INBOUND


def label_text(stop: StopLayout) -> str:
    return f"{stop.name} - {stop.stop_id}"


def _label_bbox(placement: LabelPlacement) -> tuple[float, float, float, float]:
    """Return (x_min, y_min, x_max, y_max) bounding box for a label."""
    half_w = len(placement.text) * CHAR_WIDTH / 2
    if placement.above:
        return (
            placement.x - half_w,
            placement.y - FONT_HEIGHT,
            placement.x + half_w,
            placement.y,
        )
    return (
        placement.x - half_w,
        placement.y,
        placement.x + half_w,
        placement.y + FONT_HEIGHT,
    )


def _boxes_overlap(
    a: tuple[float, float, float, float],
    b: tuple[float, float, float, float],
    margin: float = LABEL_MARGIN,
) -> bool:
    return not (
        a[2] + margin < b[0]
        or b[2] + margin < a[0]
        or a[3] + margin < b[1]
        or b[3] + margin < a[1]
    )


def _has_collision(
    candidate: LabelPlacement,
    existing: list[LabelPlacement],
) -> bool:
    cbox = _label_bbox(candidate)
    return any(_boxes_overlap(cbox, _label_bbox(placed)) for placed in existing)


def _place(stop: StopLayout, above: bool, offset: float) -> LabelPlacement:
    return LabelPlacement(
        stop_id=stop.stop_id,
        text=label_text(stop),
        x=stop.x,
        y=stop.y - offset if above else stop.y + offset,
        above=above,
        direction=stop.direction,
    )


def place_labels(
    result: LayoutResult,
    label_offset: float = LABEL_OFFSET,
) -> list[LabelPlacement]:
    """Place one label per laid-out stop.

    Strategy:
    1. Default: above inbound stops, below outbound stops.
    2. If it collides with an existing label, push further out.
    3. If still colliding, try the other side.
    """
    ordered = sorted(
        result.stops,
        key=lambda s: (s.direction is Direction.OUTBOUND, s.lane, s.layer),
    )

    placements: list[LabelPlacement] = []
    for stop in ordered:
        preferred = stop.direction is Direction.INBOUND

        candidate = _place(stop, preferred, label_offset)
        if _has_collision(candidate, placements):
            candidate = _place(stop, preferred, label_offset * COLLISION_MULTIPLIER)
            if _has_collision(candidate, placements):
                candidate = _place(stop, not preferred, label_offset)

        placements.append(candidate)

    return placements
