"""Parser for JSON route definitions.

Route data is validated once here, at the boundary. Everything downstream
assumes a well-formed ``RouteData`` and never re-checks it.

Expected shape::

    {
      "trips": [
        {"id": "t1", "name": "Main", "color": [230, 25, 75],
         "inbound": ["a", "b", "c"], "outbound": ["c", "b", "a"]}
      ],
      "stops": [{"id": "a", "name": "Alpha", "lat": 1.0, "lon": 2.0}]
    }
"""

from __future__ import annotations

import json
from pathlib import Path

from linemap.parser.model import Color, RouteData, Stop, Trip

DEFAULT_COLOR: Color = (128, 128, 128)


class RouteDataError(ValueError):
    """Raised when raw route input does not have the expected shape."""


def load_route(path: str | Path) -> RouteData:
    """Read and parse a JSON route file."""
    return parse_route_json(Path(path).read_text())


def parse_route_json(text: str) -> RouteData:
    """Parse a JSON route definition into a validated ``RouteData``."""
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise RouteDataError(f"Invalid JSON: {e}") from e
    return parse_route_dict(doc)


def parse_route_dict(doc: object) -> RouteData:
    """Validate an already-decoded route document."""
    if not isinstance(doc, dict):
        raise RouteDataError("Route data must be a JSON object")

    raw_trips = doc.get("trips")
    raw_stops = doc.get("stops")
    if not isinstance(raw_trips, list) or not isinstance(raw_stops, list):
        raise RouteDataError(
            "Route data must contain 'trips' and 'stops' lists"
        )

    trips = [_parse_trip(item, i) for i, item in enumerate(raw_trips)]
    stops = [_parse_stop(item, i) for i, item in enumerate(raw_stops)]

    _check_unique([t.id for t in trips], "trip")
    _check_unique([s.id for s in stops], "stop")

    return RouteData(trips=tuple(trips), stops=tuple(stops))


def _parse_trip(item: object, index: int) -> Trip:
    if not isinstance(item, dict):
        raise RouteDataError(f"Trip #{index} must be an object")

    trip_id = _require_id(item, f"Trip #{index}")
    where = f"Trip '{trip_id}'"

    name = item.get("name", trip_id)
    if not isinstance(name, str):
        raise RouteDataError(f"{where}: 'name' must be a string")

    return Trip(
        id=trip_id,
        name=name,
        color=_parse_color(item.get("color"), where),
        outbound=_parse_sequence(item.get("outbound"), where, "outbound"),
        inbound=_parse_sequence(item.get("inbound"), where, "inbound"),
    )


def _parse_stop(item: object, index: int) -> Stop:
    if not isinstance(item, dict):
        raise RouteDataError(f"Stop #{index} must be an object")

    stop_id = _require_id(item, f"Stop #{index}")
    where = f"Stop '{stop_id}'"

    name = item.get("name", stop_id)
    if not isinstance(name, str):
        raise RouteDataError(f"{where}: 'name' must be a string")

    coords: dict[str, float | None] = {}
    for key in ("lat", "lon"):
        value = item.get(key)
        if value is not None and (
            isinstance(value, bool) or not isinstance(value, (int, float))
        ):
            raise RouteDataError(f"{where}: '{key}' must be a number")
        coords[key] = float(value) if value is not None else None

    return Stop(id=stop_id, name=name, lat=coords["lat"], lon=coords["lon"])


def _require_id(item: dict, where: str) -> str:
    value = item.get("id")
    # Numeric ids are common in GTFS-derived exports
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str) or not value:
        raise RouteDataError(f"{where}: missing 'id'")
    return value


def _parse_color(value: object, where: str) -> Color:
    if value is None:
        return DEFAULT_COLOR
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise RouteDataError(f"{where}: 'color' must be three integers")
    channels = []
    for channel in value:
        if isinstance(channel, bool) or not isinstance(channel, int):
            raise RouteDataError(f"{where}: 'color' must be three integers")
        if not 0 <= channel <= 255:
            raise RouteDataError(f"{where}: color channel {channel} out of 0-255")
        channels.append(channel)
    return (channels[0], channels[1], channels[2])


def _parse_sequence(value: object, where: str, key: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise RouteDataError(f"{where}: '{key}' must be a list of stop ids")
    sequence = []
    for sid in value:
        if isinstance(sid, int) and not isinstance(sid, bool):
            sid = str(sid)
        if not isinstance(sid, str):
            raise RouteDataError(f"{where}: '{key}' must be a list of stop ids")
        sequence.append(sid)
    return tuple(sequence)


def _check_unique(ids: list[str], kind: str) -> None:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            raise RouteDataError(f"Duplicate {kind} id '{item_id}'")
        seen.add(item_id)
