"""Coordinate mapping: (layer, lane, direction) -> (x, y).

Y grows downward (screen coordinates). Inbound runs left-to-right with
lanes stacking upward from ``inbound_y``; outbound is mirrored to run
right-to-left with lanes stacking downward from ``outbound_y``. With the
default ``inbound_y < outbound_y`` the two directions never share a y.
"""

from __future__ import annotations

__all__ = ["merge_stop_positions", "position_stops"]

from collections.abc import Iterable

from linemap.layout.constants import INBOUND_Y, LANE_HEIGHT, OUTBOUND_Y, STOP_SPACING
from linemap.parser.model import Connection, Direction, StopLayout, StopPosition


def position_stops(
    layers: dict[str, int],
    lanes: dict[str, int],
    direction: Direction,
    stop_names: dict[str, str] | None = None,
    shared: set[str] | None = None,
    stop_spacing: float = STOP_SPACING,
    lane_height: float = LANE_HEIGHT,
    inbound_y: float = INBOUND_Y,
    outbound_y: float = OUTBOUND_Y,
) -> list[StopLayout]:
    """Place every layered stop of one direction.

    Stops without a layer are not positioned. Missing names fall back to
    the stop id.
    """
    stop_names = stop_names or {}
    shared = shared or set()
    max_layer = max(layers.values(), default=0)

    placed: list[StopLayout] = []
    for sid, layer in layers.items():
        lane = lanes.get(sid, 0)
        if direction is Direction.INBOUND:
            x = layer * stop_spacing
            y = inbound_y - lane * lane_height
        else:
            x = (max_layer - layer) * stop_spacing
            y = outbound_y + lane * lane_height

        placed.append(
            StopLayout(
                stop_id=sid,
                name=stop_names.get(sid, sid),
                layer=layer,
                lane=lane,
                x=x,
                y=y,
                direction=direction,
                is_shared=sid in shared,
            )
        )
    return placed


def merge_stop_positions(
    stops: Iterable[StopLayout],
    connections: Iterable[Connection],
    extra_trip_ids: dict[str, list[str]] | None = None,
) -> dict[str, StopPosition]:
    """Collapse per-direction layouts into one StopPosition per stop id.

    Coordinates and level come from the last layout seen for an id, so
    outbound layouts passed after inbound ones take precedence. Trip ids
    are the union, in first-seen order, of every connection touching the
    stop in either direction, plus any ``extra_trip_ids`` (trips that visit
    a stop without forming an edge there).
    """
    touching: dict[str, list[str]] = {}

    def _touch(sid: str, trip_id: str) -> None:
        ids = touching.setdefault(sid, [])
        if trip_id not in ids:
            ids.append(trip_id)

    for conn in connections:
        _touch(conn.source, conn.trip_id)
        _touch(conn.target, conn.trip_id)
    for sid, trip_ids in (extra_trip_ids or {}).items():
        for trip_id in trip_ids:
            _touch(sid, trip_id)

    positions: dict[str, StopPosition] = {}
    for layout in stops:
        positions[layout.stop_id] = StopPosition(
            x=layout.x,
            y=layout.y,
            level=layout.layer,
            trip_ids=list(touching.get(layout.stop_id, [])),
        )
    return positions
