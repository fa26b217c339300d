"""Tests for topological ordering (Kahn's algorithm)."""
from __future__ import annotations

from typing import List

import pytest

from pertcpm.errors import CycleDetected
from pertcpm.workflow.activity_graph import ActivityGraph
from pertcpm.workflow.topological import find_cycle_labels, topological_labels, topological_order


class TestTopologicalOrder:
    def test_empty_graph(self, graph_from) -> None:
        assert topological_order(graph_from({})) == []

    def test_single_activity(self, graph_from) -> None:
        assert topological_labels(graph_from({"A": 5})) == ["A"]

    def test_abcd(self, abcd_graph: ActivityGraph) -> None:
        assert topological_labels(abcd_graph) == ["A", "B", "C", "D"]

    def test_discovery_order_tie_break(self, graph_from) -> None:
        # E and C are both sources; E comes first in input order
        g = graph_from(
            {"E": 1, "C": 1, "B": 1, "A": 1},
            [("E", "A"), ("C", "B")],
        )
        assert topological_labels(g) == ["E", "C", "A", "B"]

    def test_input_order_need_not_be_topological(self, graph_from) -> None:
        g = graph_from({"D": 1, "C": 1, "B": 1, "A": 1}, [("A", "B"), ("B", "C"), ("C", "D")])
        assert topological_labels(g) == ["A", "B", "C", "D"]

    def test_respects_every_edge(self, random_dags: List[ActivityGraph]) -> None:
        for g in random_dags:
            order = topological_order(g)
            assert sorted(order) == list(g.indices())
            pos = {n: i for i, n in enumerate(order)}
            for u, v in g.edges():
                assert pos[u] < pos[v]

    def test_deterministic(self, random_dags: List[ActivityGraph]) -> None:
        for g in random_dags:
            assert topological_order(g) == topological_order(g)


class TestCycleDetected:
    def test_three_cycle(self, graph_from) -> None:
        g = graph_from({"A": 1, "B": 1, "C": 1, "X": 1}, [("X", "A"), ("A", "B"), ("B", "C"), ("C", "A")])
        with pytest.raises(CycleDetected) as exc_info:
            topological_order(g)
        err = exc_info.value
        assert err.remaining == ["A", "B", "C"]
        assert err.cycle[0] == err.cycle[-1]
        assert set(err.cycle) == {"A", "B", "C"}
        assert "Cycle detected" in str(err)

    def test_self_loop(self, graph_from) -> None:
        g = graph_from({"A": 1}, [("A", "A")])
        with pytest.raises(CycleDetected) as exc_info:
            topological_order(g)
        assert exc_info.value.cycle == ["A", "A"]

    def test_back_edge_into_any_dag(self, graph_from, random_dags: List[ActivityGraph]) -> None:
        checked = 0
        for g in random_dags:
            edges = g.edge_labels()
            if not edges:
                continue
            u, v = edges[0]
            cyclic = graph_from({a.label: a.duration for a in g.activities}, edges + [(v, u)])
            with pytest.raises(CycleDetected):
                topological_order(cyclic)
            checked += 1
        assert checked > 0

    def test_find_cycle_on_dag(self, abcd_graph: ActivityGraph) -> None:
        assert find_cycle_labels(abcd_graph) == []
