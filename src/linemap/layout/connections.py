"""Connection building: one edge per consecutive stop pair, per trip."""

from __future__ import annotations

__all__ = ["build_connections"]

from collections.abc import Sequence

import networkx as nx

from linemap.layout.graph import build_precedence_graph, direction_sequences
from linemap.parser.model import Connection, Direction, Trip


def build_connections(
    trips: Sequence[Trip],
    direction: Direction,
    layers: dict[str, int],
    graph: nx.DiGraph | None = None,
) -> list[Connection]:
    """Build the connections of one direction, in trip order.

    A connection is *express* when both ends are layered and it spans more
    than one layer, i.e. it skips stops other trips serve. It is a *branch*
    when fewer than all trips serving this direction use it.

    Args:
        trips: Trips in input order.
        direction: Which stop sequence of each trip to use.
        layers: Layer assignment from assign_layers().
        graph: Precedence graph of the same sequences, if already built.
    """
    if graph is None:
        graph = build_precedence_graph(direction_sequences(trips, direction))
    serving = sum(1 for trip in trips if trip.stops_for(direction))

    connections: list[Connection] = []
    for trip in trips:
        stops = trip.stops_for(direction)
        for source, target in zip(stops, stops[1:]):
            src_layer = layers.get(source)
            tgt_layer = layers.get(target)
            is_express = (
                src_layer is not None
                and tgt_layer is not None
                and abs(tgt_layer - src_layer) > 1
            )
            usage = (
                graph[source][target]["count"]
                if graph.has_edge(source, target)
                else 0
            )
            connections.append(
                Connection(
                    source=source,
                    target=target,
                    trip_id=trip.id,
                    trip_name=trip.name,
                    color=trip.color,
                    direction=direction,
                    is_express=is_express,
                    is_branch=usage < serving,
                )
            )
    return connections
