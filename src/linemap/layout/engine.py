"""Layout coordinator: combines layering, lanes, coordinate mapping and paths.

Each direction is laid out independently, then the two are merged into one
StopPosition per stop. Everything is recomputed from the RouteData on every
call; no state survives between calls.
"""

from __future__ import annotations

__all__ = ["build_trip_paths", "compute_layout", "layout_direction"]

import logging

from linemap.layout.connections import build_connections
from linemap.layout.consensus import merge_sequences
from linemap.layout.constants import (
    GRID_SIZE,
    INBOUND_Y,
    LANE_HEIGHT,
    LENGTH_EPSILON,
    OUTBOUND_Y,
    STOP_SPACING,
)
from linemap.layout.graph import build_precedence_graph, direction_sequences
from linemap.layout.lanes import assign_lanes
from linemap.layout.layers import layer_graph
from linemap.layout.positions import merge_stop_positions, position_stops
from linemap.layout.routing import generate_octilinear_paths, normalize_trip_paths
from linemap.parser.model import (
    Connection,
    Direction,
    LayoutResult,
    RouteData,
    StopLayout,
    TripPath,
)

logger = logging.getLogger(__name__)


def compute_layout(
    route: RouteData,
    stop_spacing: float = STOP_SPACING,
    lane_height: float = LANE_HEIGHT,
    inbound_y: float = INBOUND_Y,
    outbound_y: float = OUTBOUND_Y,
) -> LayoutResult:
    """Compute stop layouts, connections and merged positions for a route."""
    stop_names = route.stop_names()
    inbound_ids = {sid for trip in route.trips for sid in trip.inbound}
    outbound_ids = {sid for trip in route.trips for sid in trip.outbound}
    shared = inbound_ids & outbound_ids

    result = LayoutResult()
    for direction in (Direction.INBOUND, Direction.OUTBOUND):
        stops, connections, sequence, dropped = layout_direction(
            route,
            direction,
            stop_names=stop_names,
            shared=shared,
            stop_spacing=stop_spacing,
            lane_height=lane_height,
            inbound_y=inbound_y,
            outbound_y=outbound_y,
        )
        result.stops.extend(stops)
        result.connections.extend(connections)
        result.dropped[direction] = dropped

        visits = _trip_visits(route, direction)
        per_direction = merge_stop_positions(stops, connections, visits)
        if direction is Direction.INBOUND:
            result.inbound_positions = per_direction
            result.inbound_sequence = sequence
        else:
            result.outbound_positions = per_direction
            result.outbound_sequence = sequence

    visits = _trip_visits(route, Direction.INBOUND, Direction.OUTBOUND)
    result.positions = merge_stop_positions(result.stops, result.connections, visits)

    logger.debug(
        "Laid out %d stop positions (%d inbound, %d outbound), %d connections",
        len(result.positions),
        len(result.inbound_positions),
        len(result.outbound_positions),
        len(result.connections),
    )
    return result


def layout_direction(
    route: RouteData,
    direction: Direction,
    stop_names: dict[str, str] | None = None,
    shared: set[str] | None = None,
    stop_spacing: float = STOP_SPACING,
    lane_height: float = LANE_HEIGHT,
    inbound_y: float = INBOUND_Y,
    outbound_y: float = OUTBOUND_Y,
) -> tuple[list[StopLayout], list[Connection], list[str], list[str]]:
    """Lay out one direction.

    Returns (stop layouts, connections, consensus sequence, dropped stop ids).
    Dropped stops are those excluded from layering by cyclic precedence.
    """
    sequences = direction_sequences(route.trips, direction)
    G = build_precedence_graph(sequences)

    layers = layer_graph(G)
    lanes = assign_lanes(route.trips, direction, layers)
    stops = position_stops(
        layers,
        lanes,
        direction,
        stop_names=stop_names if stop_names is not None else route.stop_names(),
        shared=shared,
        stop_spacing=stop_spacing,
        lane_height=lane_height,
        inbound_y=inbound_y,
        outbound_y=outbound_y,
    )
    connections = build_connections(route.trips, direction, layers, graph=G)

    # Only sequences with content take part in the consensus
    sequence = merge_sequences([seq for seq in sequences if seq])
    dropped = [sid for sid in G.nodes if sid not in layers]

    logger.debug(
        "%s: %d stops in %d layers, %d lanes, %d dropped",
        direction.value,
        len(layers),
        max(layers.values(), default=-1) + 1,
        max(lanes.values(), default=-1) + 1,
        len(dropped),
    )
    return stops, connections, sequence, dropped


def build_trip_paths(
    route: RouteData,
    result: LayoutResult,
    grid_size: float = GRID_SIZE,
    straighten: bool = False,
    epsilon: float = LENGTH_EPSILON,
) -> list[TripPath]:
    """Generate and normalize every trip's renderable polylines.

    Inbound sequences resolve against inbound positions and outbound
    sequences against outbound positions, so a stop served in both
    directions keeps its own coordinate in each.
    """
    paths = generate_octilinear_paths(
        route.trips,
        result.inbound_positions,
        outbound_positions=result.outbound_positions,
        grid_size=grid_size,
    )
    return normalize_trip_paths(paths, straighten=straighten, epsilon=epsilon)


def _trip_visits(route: RouteData, *directions: Direction) -> dict[str, list[str]]:
    """Map stop_id -> ids of trips visiting it in the given directions."""
    visits: dict[str, list[str]] = {}
    for direction in directions:
        for trip in route.trips:
            for sid in trip.stops_for(direction):
                ids = visits.setdefault(sid, [])
                if trip.id not in ids:
                    ids.append(trip.id)
    return visits
