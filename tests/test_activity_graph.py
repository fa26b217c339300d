"""Tests for the frozen activity graph."""
from __future__ import annotations

import pytest

from pertcpm.workflow.activity_graph import Activity, ActivityGraph


class TestActivityGraph:
    def test_indices_follow_input_order(self, abcd_graph: ActivityGraph) -> None:
        assert abcd_graph.labels == ["A", "B", "C", "D"]
        assert [abcd_graph.index_of(x) for x in "ABCD"] == [0, 1, 2, 3]
        assert abcd_graph.label(2) == "C"
        assert abcd_graph.duration(2) == 4

    def test_structural_queries(self, abcd_graph: ActivityGraph) -> None:
        a, b, c, d = (abcd_graph.index_of(x) for x in "ABCD")
        assert abcd_graph.successors(a) == [b, c]
        assert abcd_graph.predecessors(d) == [b, c]
        assert abcd_graph.is_source(a) and not abcd_graph.is_source(d)
        assert abcd_graph.is_sink(d) and not abcd_graph.is_sink(b)

    def test_neighbors_sorted_by_index_not_insertion(self) -> None:
        g = ActivityGraph(
            [Activity("A", 1), Activity("B", 1), Activity("C", 1)],
            [("A", "C"), ("A", "B")],
        )
        assert g.successors(0) == [1, 2]
        assert g.edge_labels() == [("A", "B"), ("A", "C")]

    def test_duplicate_edges_are_idempotent(self) -> None:
        g = ActivityGraph(
            [Activity("A", 1), Activity("B", 1)],
            [("A", "B"), ("A", "B"), ("A", "B")],
        )
        assert g.edge_count == 1
        assert g.successors(0) == [1]
        assert g.predecessors(1) == [0]

    def test_build_from_declarations(self) -> None:
        g = ActivityGraph.build(
            [("A", 3), ("B", 2), ("C", 4)],
            [("A", None), ("B", ["A"]), ("C", ["A", "B"])],
        )
        assert g.edge_labels() == [("A", "B"), ("A", "C"), ("B", "C")]
        assert g.has_edge("B", "C")
        assert not g.has_edge("C", "B")
        assert not g.has_edge("A", "Z")

    def test_edges_predecessor_major(self, graph_from) -> None:
        g = graph_from({"A": 1, "B": 1, "C": 1}, [("C", "A"), ("B", "A"), ("A", "C")])
        assert g.edge_labels() == [("A", "C"), ("B", "A"), ("C", "A")]

    def test_cycles_are_allowed_in_structure(self, graph_from) -> None:
        g = graph_from({"A": 1, "B": 1}, [("A", "B"), ("B", "A")])
        assert g.edge_count == 2

    def test_rejects_duplicate_labels(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            ActivityGraph([Activity("A", 1), Activity("A", 2)])

    def test_rejects_negative_duration(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            ActivityGraph([Activity("A", -1)])

    @pytest.mark.parametrize("duration", [2.5, 2.0, True, "3", None])
    def test_rejects_non_integer_duration(self, duration) -> None:
        with pytest.raises(ValueError, match="non-integer"):
            ActivityGraph([Activity("A", duration)])

    def test_build_does_not_truncate_durations(self) -> None:
        with pytest.raises(ValueError, match="non-integer"):
            ActivityGraph.build([("A", 2.5)])

    def test_rejects_unknown_edge_endpoint(self) -> None:
        with pytest.raises(ValueError, match="unknown activity"):
            ActivityGraph([Activity("A", 1)], [("A", "B")])

    def test_index_of_unknown(self, abcd_graph: ActivityGraph) -> None:
        with pytest.raises(KeyError):
            abcd_graph.index_of("Z")

    def test_networkx_view_is_read_only(self, abcd_graph: ActivityGraph) -> None:
        view = abcd_graph.to_networkx()
        assert view.number_of_edges() == 4
        with pytest.raises(Exception):
            view.add_edge(3, 0)
        assert abcd_graph.edge_count == 4

    def test_dunders(self, abcd_graph: ActivityGraph) -> None:
        assert len(abcd_graph) == 4
        assert "A" in abcd_graph
        assert "Z" not in abcd_graph
        assert repr(abcd_graph) == "ActivityGraph(activities=4, edges=4)"
