"""Path normalization: length equalization and orthogonal straightening."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from linemap.layout.constants import LENGTH_EPSILON
from linemap.layout.routing.common import is_diagonal, path_length, unit_vector
from linemap.parser.model import Point3D, TripPath


def extend_path_to_match_length(
    inbound_path: Sequence[Point3D],
    outbound_path: Sequence[Point3D],
    epsilon: float = LENGTH_EPSILON,
) -> tuple[list[Point3D], list[Point3D]]:
    """Extend the shorter of two paths so both have the same length.

    A short inbound path grows at its start, continuing its first segment
    backward; a short outbound path grows at its end, continuing its last
    segment forward. Zero-length segments at the extended end are skipped
    when picking the direction. A path with no non-degenerate segment
    cannot be extended and is left as is.

    Returns new lists; the inputs are not modified.
    """
    inbound = list(inbound_path)
    outbound = list(outbound_path)

    inbound_length = path_length(inbound)
    outbound_length = path_length(outbound)
    difference = abs(inbound_length - outbound_length)
    if difference < epsilon:
        return inbound, outbound

    if inbound_length < outbound_length:
        first = inbound[0] if inbound else None
        direction = _first_direction(inbound)
        if first is not None and direction is not None:
            inbound.insert(0, _advance(first, direction, -difference))
    else:
        last = outbound[-1] if outbound else None
        direction = _first_direction(outbound[::-1])
        if last is not None and direction is not None:
            # Reversed search yields the backward direction; flip it.
            outbound.append(_advance(last, direction, -difference))

    return inbound, outbound


def straighten_path(path: Sequence[Point3D]) -> list[Point3D]:
    """Convert diagonal moves into two axis-aligned moves (Manhattan routing).

    The first point is kept; before every point reached by a move changing
    both x and y, an elbow at (current x, previous y) is inserted.
    """
    if not path:
        return []

    straightened: list[Point3D] = [path[0]]
    for prev, curr in zip(path, path[1:]):
        if is_diagonal(prev, curr):
            straightened.append((curr[0], prev[1], prev[2]))
        straightened.append(curr)
    return straightened


def normalize_trip_paths(
    paths: Iterable[TripPath],
    straighten: bool = False,
    epsilon: float = LENGTH_EPSILON,
) -> list[TripPath]:
    """Return new TripPaths with equal-length inbound and outbound polylines.

    When *straighten* is set, both polylines are converted to Manhattan
    routing first, so the equalized lengths hold on the final geometry.
    """
    normalized: list[TripPath] = []
    for tp in paths:
        inbound = tp.inbound_path
        outbound = tp.outbound_path
        if straighten:
            inbound = straighten_path(inbound)
            outbound = straighten_path(outbound)
        inbound, outbound = extend_path_to_match_length(inbound, outbound, epsilon)
        normalized.append(
            TripPath(trip=tp.trip, inbound_path=inbound, outbound_path=outbound)
        )
    return normalized


def _first_direction(path: Sequence[Point3D]) -> Point3D | None:
    """Unit vector of the first non-degenerate segment of *path*."""
    for start, end in zip(path, path[1:]):
        direction = unit_vector(start, end)
        if direction is not None:
            return direction
    return None


def _advance(point: Point3D, direction: Point3D, distance: float) -> Point3D:
    return (
        point[0] + direction[0] * distance,
        point[1] + direction[1] * distance,
        point[2] + direction[2] * distance,
    )
