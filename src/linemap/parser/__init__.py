"""Route data model and JSON parser."""

from linemap.parser.model import (
    Connection,
    Direction,
    LayoutResult,
    RouteData,
    Stop,
    StopLayout,
    StopPosition,
    Trip,
    TripPath,
)
from linemap.parser.route_json import (
    RouteDataError,
    load_route,
    parse_route_dict,
    parse_route_json,
)

__all__ = [
    "Connection",
    "Direction",
    "LayoutResult",
    "RouteData",
    "RouteDataError",
    "Stop",
    "StopLayout",
    "StopPosition",
    "Trip",
    "TripPath",
    "load_route",
    "parse_route_dict",
    "parse_route_json",
]
