"""JSON export of a computed layout for external renderers."""

from __future__ import annotations

import json
from collections.abc import Iterable

from linemap.parser.model import (
    Connection,
    LayoutResult,
    StopLayout,
    StopPosition,
    TripPath,
)


def export_layout(
    result: LayoutResult,
    paths: Iterable[TripPath],
    visible_trip_ids: Iterable[str] | None = None,
) -> dict:
    """Build the renderer payload: positions, stops, connections and paths.

    Paths are limited to *visible_trip_ids* when given.
    """
    visible = set(visible_trip_ids) if visible_trip_ids is not None else None
    return {
        "positions": {
            sid: _position_dict(pos) for sid, pos in result.positions.items()
        },
        "stops": [_stop_dict(s) for s in result.stops],
        "connections": [_connection_dict(c) for c in result.connections],
        "inboundSequence": list(result.inbound_sequence),
        "outboundSequence": list(result.outbound_sequence),
        "paths": [
            _path_dict(tp) for tp in paths if visible is None or tp.id in visible
        ],
    }


def export_layout_json(
    result: LayoutResult,
    paths: Iterable[TripPath],
    visible_trip_ids: Iterable[str] | None = None,
    indent: int | None = 2,
) -> str:
    return json.dumps(export_layout(result, paths, visible_trip_ids), indent=indent) + "\n"


def _position_dict(pos: StopPosition) -> dict:
    return {"x": pos.x, "y": pos.y, "level": pos.level, "tripIds": list(pos.trip_ids)}


def _stop_dict(stop: StopLayout) -> dict:
    return {
        "stopId": stop.stop_id,
        "name": stop.name,
        "layer": stop.layer,
        "lane": stop.lane,
        "x": stop.x,
        "y": stop.y,
        "direction": stop.direction.value,
        "isShared": stop.is_shared,
    }


def _connection_dict(conn: Connection) -> dict:
    return {
        "from": conn.source,
        "to": conn.target,
        "tripId": conn.trip_id,
        "tripName": conn.trip_name,
        "color": list(conn.color),
        "direction": conn.direction.value,
        "isExpress": conn.is_express,
        "isBranch": conn.is_branch,
    }


def _path_dict(tp: TripPath) -> dict:
    return {
        "id": tp.id,
        "name": tp.name,
        "color": list(tp.color),
        "inboundPath": [list(p) for p in tp.inbound_path],
        "outboundPath": [list(p) for p in tp.outbound_path],
    }
