"""Precedence graph shared by layering and consensus ordering.

Both algorithms work on the union of consecutive-stop edges across a set of
stop sequences. Node and successor order follow discovery order (first
appearance scanning sequences in input order), which is what makes the
downstream topological passes deterministic.
"""

from __future__ import annotations

__all__ = ["build_precedence_graph", "direction_sequences", "in_degrees"]

from collections.abc import Iterable, Sequence

import networkx as nx

from linemap.parser.model import Direction, Trip


def direction_sequences(
    trips: Iterable[Trip], direction: Direction
) -> list[tuple[str, ...]]:
    """Return each trip's stop sequence for one direction, in trip order."""
    return [trip.stops_for(direction) for trip in trips]


def build_precedence_graph(sequences: Iterable[Sequence[str]]) -> nx.DiGraph:
    """Build the union precedence graph of a set of stop sequences.

    Every stop becomes a node. Each consecutive pair ``s[i] -> s[i+1]``
    becomes an edge whose ``count`` attribute is the number of sequences
    containing that pair. Consecutive repeats of the same stop are ignored.
    """
    G = nx.DiGraph()
    for seq in sequences:
        for sid in seq:
            if sid not in G:
                G.add_node(sid)

        # Each pair counts once per sequence
        seen: set[tuple[str, str]] = set()
        for u, v in zip(seq, seq[1:]):
            if u == v or (u, v) in seen:
                continue
            seen.add((u, v))
            if G.has_edge(u, v):
                G[u][v]["count"] += 1
            else:
                G.add_edge(u, v, count=1)
    return G


def in_degrees(G: nx.DiGraph) -> dict[str, int]:
    """In-degree per node, in node (discovery) order."""
    return {node: G.in_degree(node) for node in G.nodes}
