"""Shared helpers for path geometry."""

from __future__ import annotations

import math
from collections.abc import Sequence

from linemap.parser.model import Point3D


def path_length(path: Sequence[Point3D]) -> float:
    """Cumulative 2-D Euclidean length of a polyline."""
    total = 0.0
    for (x1, y1, _z1), (x2, y2, _z2) in zip(path, path[1:]):
        total += math.hypot(x2 - x1, y2 - y1)
    return total


def unit_vector(start: Point3D, end: Point3D) -> Point3D | None:
    """Normalized 3-D direction from *start* to *end*, or None if they coincide."""
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    dz = end[2] - start[2]
    length = math.sqrt(dx * dx + dy * dy + dz * dz)
    if length == 0:
        return None
    return (dx / length, dy / length, dz / length)


def is_diagonal(start: Point3D, end: Point3D) -> bool:
    """True when a move changes both x and y."""
    return end[0] != start[0] and end[1] != start[1]
