"""Consensus ordering of several, possibly conflicting, stop sequences.

Kahn's algorithm over the union precedence graph, preferring the order of
the first sequence whenever several stops are ready at once. Stops caught
in a cycle (trips disagreeing on their relative order) never become ready
and are left out of the result.
"""

from __future__ import annotations

__all__ = ["merge_sequences"]

from collections.abc import Sequence

from linemap.layout.graph import build_precedence_graph, in_degrees


def merge_sequences(sequences: Sequence[Sequence[str]]) -> list[str]:
    """Merge stop sequences into a single consensus ordering.

    A single sequence is returned unchanged. With several, stops ready at
    the same time are emitted by their index in the first sequence; stops
    absent from it come after all present ones, in discovery order.
    """
    if not sequences:
        return []
    if len(sequences) == 1:
        return list(sequences[0])

    G = build_precedence_graph(sequences)
    indegree = in_degrees(G)

    reference = {}
    for i, sid in enumerate(sequences[0]):
        reference.setdefault(sid, i)
    discovery = {sid: i for i, sid in enumerate(G.nodes)}
    absent = len(sequences[0])

    def priority(sid: str) -> tuple[int, int]:
        return (reference.get(sid, absent), discovery[sid])

    ready = [sid for sid, deg in indegree.items() if deg == 0]
    result: list[str] = []

    while ready:
        current = min(ready, key=priority)
        ready.remove(current)
        result.append(current)

        for succ in G.successors(current):
            indegree[succ] -= 1
            if indegree[succ] == 0:
                ready.append(succ)

    return result
