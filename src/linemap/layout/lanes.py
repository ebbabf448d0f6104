"""Lane assignment (vertical branch separation).

Greedy first-fit packing of trips into lanes, in trip input order. A trip
may reuse a lane as long as none of the layers it visits already holds a
stop from a different trip in that lane. Shared stops keep the lowest lane
of any trip through them, so the trunk stays on the main line.
"""

from __future__ import annotations

__all__ = ["assign_lanes", "lane_conflicts"]

from collections import defaultdict
from collections.abc import Iterable

from linemap.parser.model import Direction, Trip


def assign_lanes(
    trips: Iterable[Trip],
    direction: Direction,
    layers: dict[str, int],
) -> dict[str, int]:
    """Assign each stop of one direction to a lane.

    Args:
        trips: Trips in input order.
        direction: Which stop sequence of each trip to use.
        layers: Layer assignment from assign_layers().

    Returns a dict mapping stop_id -> lane (0 = main line).
    """
    layer_groups: dict[int, list[str]] = defaultdict(list)
    for sid, layer in layers.items():
        layer_groups[layer].append(sid)

    lanes: dict[str, int] = {}
    next_lane = 0

    for trip in trips:
        stops = trip.stops_for(direction)
        own = set(stops)

        assigned = -1
        for lane in range(next_lane):
            if not _lane_has_conflict(lane, stops, own, layers, layer_groups, lanes):
                assigned = lane
                break

        if assigned == -1:
            assigned = next_lane
            next_lane += 1

        for sid in stops:
            lanes[sid] = min(lanes.get(sid, assigned), assigned)

    return lanes


def _lane_has_conflict(
    lane: int,
    stops: tuple[str, ...],
    own: set[str],
    layers: dict[str, int],
    layer_groups: dict[int, list[str]],
    lanes: dict[str, int],
) -> bool:
    """True if a foreign stop already occupies *lane* in one of our layers."""
    for sid in stops:
        layer = layers.get(sid)
        if layer is None:
            continue
        for other in layer_groups[layer]:
            if other != sid and other not in own and lanes.get(other) == lane:
                return True
    return False


def lane_conflicts(
    trips: Iterable[Trip],
    direction: Direction,
    layers: dict[str, int],
    lanes: dict[str, int],
) -> list[tuple[str, str]]:
    """Return pairs of stops sharing a (layer, lane) slot without a common trip.

    An empty list means branches are fully separated.
    """
    trips_at: dict[str, set[str]] = defaultdict(set)
    for trip in trips:
        for sid in trip.stops_for(direction):
            trips_at[sid].add(trip.id)

    slots: dict[tuple[int, int], list[str]] = defaultdict(list)
    for sid, layer in layers.items():
        if sid in lanes:
            slots[(layer, lanes[sid])].append(sid)

    conflicts: list[tuple[str, str]] = []
    for members in slots.values():
        for i, a in enumerate(members):
            for b in members[i + 1 :]:
                if not trips_at[a] & trips_at[b]:
                    conflicts.append((a, b))
    return conflicts
