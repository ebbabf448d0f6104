"""Layer assignment for line diagram layout (X-coordinate positioning).

Uses longest-path layering over a FIFO topological pass so every edge goes
from a lower layer to a higher layer within one direction.
"""

from __future__ import annotations

__all__ = ["assign_layers", "layer_graph"]

import logging
from collections import deque
from collections.abc import Iterable

import networkx as nx

from linemap.layout.graph import build_precedence_graph, direction_sequences, in_degrees
from linemap.parser.model import Direction, Trip

logger = logging.getLogger(__name__)


def assign_layers(trips: Iterable[Trip], direction: Direction) -> dict[str, int]:
    """Assign each stop of one direction to a layer (integer X position).

    Returns a dict mapping stop_id -> layer number (0-based). See
    ``layer_graph`` for the details.
    """
    G = build_precedence_graph(direction_sequences(trips, direction))
    return layer_graph(G)


def layer_graph(G: nx.DiGraph) -> dict[str, int]:
    """Longest-path layering of a precedence graph.

    Nodes with no predecessors start at layer 0; every other node ends up
    one past the highest layer among its predecessors. The queue is seeded
    and grown in discovery order, so stops that become ready together keep
    the order in which they first appeared across trips.

    Nodes on a cycle never reach zero in-degree. They, and anything only
    reachable through them, get no layer and are left out of positioning.
    """
    indegree = in_degrees(G)
    layers: dict[str, int] = {}

    queue: deque[str] = deque()
    for node, deg in indegree.items():
        if deg == 0:
            queue.append(node)
            layers[node] = 0

    done: set[str] = set()
    while queue:
        current = queue.popleft()
        done.add(current)
        for succ in G.successors(current):
            indegree[succ] -= 1
            layers[succ] = max(layers.get(succ, 0), layers[current] + 1)
            if indegree[succ] == 0:
                queue.append(succ)

    # Partially relaxed nodes on a cycle picked up a candidate layer
    # but were never released; drop them.
    dropped = [node for node in G.nodes if node not in done]
    for node in dropped:
        layers.pop(node, None)
    if dropped:
        logger.debug(
            "Dropped %d stop(s) on cyclic precedence: %s",
            len(dropped),
            ", ".join(dropped),
        )

    return layers
