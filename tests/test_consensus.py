"""Tests for consensus sequence merging and the shared precedence graph."""

from linemap.layout.consensus import merge_sequences
from linemap.layout.graph import build_precedence_graph


def test_single_sequence_unchanged():
    assert merge_sequences([["A", "B", "C"]]) == ["A", "B", "C"]


def test_empty_input():
    assert merge_sequences([]) == []


def test_branch_stops_follow_reference_order():
    merged = merge_sequences([["A", "B", "C"], ["A", "X", "C"]])
    assert merged == ["A", "B", "X", "C"]


def test_reference_stops_before_absent_ones():
    """A ready stop from the first sequence beats one that was ready earlier."""
    merged = merge_sequences([["A", "B", "C"], ["X", "C"]])
    assert merged == ["A", "B", "X", "C"]


def test_absent_stops_in_discovery_order():
    merged = merge_sequences([["A"], ["N", "M"], ["K"]])
    # K and N are both absent from the reference; N was discovered first
    assert merged == ["A", "N", "M", "K"]


def test_conflicting_orders_drop_cycle():
    merged = merge_sequences([["A", "B", "C"], ["A", "C", "B"]])
    assert merged == ["A"]


def test_precedence_graph_counts_edges():
    G = build_precedence_graph([["A", "B", "C"], ["A", "B", "D"], ["A", "B", "A", "B"]])
    assert list(G.nodes) == ["A", "B", "C", "D"]
    # A->B appears in all three sequences; repeats within one count once
    assert G["A"]["B"]["count"] == 3
    assert G["B"]["C"]["count"] == 1
    assert G["B"]["A"]["count"] == 1


def test_precedence_graph_ignores_consecutive_repeats():
    G = build_precedence_graph([["A", "A", "B"]])
    assert not G.has_edge("A", "A")
    assert G.has_edge("A", "B")
