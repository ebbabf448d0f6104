"""Path geometry subpackage for line diagram layout.

Public API:
- generate_octilinear_paths: Per-trip inbound/outbound polylines
- extend_path_to_match_length: Inbound/outbound length equalization
- straighten_path: Manhattan (orthogonal) straightening
- normalize_trip_paths: Apply both to a list of TripPaths
- path_length: Cumulative polyline length
"""

from linemap.layout.routing.common import path_length
from linemap.layout.routing.normalize import (
    extend_path_to_match_length,
    normalize_trip_paths,
    straighten_path,
)
from linemap.layout.routing.octilinear import generate_octilinear_paths, octilinear_path

__all__ = [
    "extend_path_to_match_length",
    "generate_octilinear_paths",
    "normalize_trip_paths",
    "octilinear_path",
    "path_length",
    "straighten_path",
]
