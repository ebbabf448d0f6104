"""Octilinear path generation.

Turns each trip's stop sequence into a polyline through the stops'
positions. Moves that change both x and y are broken up at grid-unit
steps along the straight line, so long arbitrary-angle diagonals become a
run of short segments, matching schematic-map aesthetics.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from linemap.layout.constants import GRID_SIZE
from linemap.layout.routing.common import is_diagonal
from linemap.parser.model import Point3D, StopPosition, Trip, TripPath


def generate_octilinear_paths(
    trips: Iterable[Trip],
    positions: Mapping[str, StopPosition],
    outbound_positions: Mapping[str, StopPosition] | None = None,
    grid_size: float = GRID_SIZE,
) -> list[TripPath]:
    """Build inbound and outbound polylines for every trip.

    Args:
        trips: Trips in input order.
        positions: Stop positions used for inbound sequences, and for
            outbound ones too unless *outbound_positions* is given.
        outbound_positions: Optional separate positions for outbound.
        grid_size: Step size for diagonal interpolation.
    """
    if outbound_positions is None:
        outbound_positions = positions

    return [
        TripPath(
            trip=trip,
            inbound_path=octilinear_path(trip.inbound, positions, grid_size),
            outbound_path=octilinear_path(trip.outbound, outbound_positions, grid_size),
        )
        for trip in trips
    ]


def octilinear_path(
    stop_ids: Sequence[str],
    positions: Mapping[str, StopPosition],
    grid_size: float = GRID_SIZE,
) -> list[Point3D]:
    """Polyline through the positioned stops of one sequence.

    Stops without a position are skipped.
    """
    resolved = [positions[sid] for sid in stop_ids if sid in positions]
    path: list[Point3D] = []

    for current, following in zip(resolved, resolved[1:] + [None]):
        start = (current.x, current.y, 0.0)
        path.append(start)
        if following is None:
            continue
        end = (following.x, following.y, 0.0)
        if is_diagonal(start, end):
            path.extend(interpolate(start, end, grid_size))

    return path


def interpolate(start: Point3D, end: Point3D, grid_size: float) -> list[Point3D]:
    """Intermediate points between *start* and *end* at grid-unit steps.

    The number of steps is the larger axis delta divided by the grid size;
    one point is emitted per whole step strictly inside the segment.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    steps = max(abs(dx), abs(dy)) / grid_size
    if steps <= 0:
        return []

    step_x = dx / steps
    step_y = dy / steps
    points: list[Point3D] = []
    step = 1
    while step < steps:
        points.append((start[0] + step_x * step, start[1] + step_y * step, 0.0))
        step += 1
    return points
