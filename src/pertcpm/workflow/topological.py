"""Topological ordering of an activity graph (Kahn's algorithm).

Zero in-degree activities are seeded in activity order and released into a
FIFO queue as their in-degree drops to zero, so the order produced is the
"discovery order". Any valid order yields the same ES/EF/LS/LF values; the
tie-break only decides which valid order is returned.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, List

import networkx as nx

from pertcpm.errors import CycleDetected
from pertcpm.workflow.activity_graph import ActivityGraph


def topological_order(graph: ActivityGraph) -> List[int]:
    """Activity indices in precedence order.

    Raises CycleDetected if some activities can never reach in-degree zero.
    """
    in_deg: List[int] = [len(graph.predecessors(i)) for i in graph.indices()]

    q: Deque[int] = deque(i for i, d in enumerate(in_deg) if d == 0)
    order: List[int] = []
    while q:
        u = q.popleft()
        order.append(u)
        for v in graph.successors(u):
            in_deg[v] -= 1
            if in_deg[v] == 0:
                q.append(v)

    if len(order) != len(graph):
        placed = set(order)
        remaining = [graph.label(i) for i in graph.indices() if i not in placed]
        raise CycleDetected(remaining, find_cycle_labels(graph))

    return order


def topological_labels(graph: ActivityGraph) -> List[str]:
    return [graph.label(i) for i in topological_order(graph)]


def find_cycle_labels(graph: ActivityGraph) -> List[str]:
    """One directed cycle as ``[a, b, ..., a]``, or ``[]`` for a DAG."""
    try:
        cycle_edges = nx.find_cycle(graph.to_networkx())
    except nx.NetworkXNoCycle:
        return []
    labels = [graph.label(u) for u, _ in cycle_edges]
    labels.append(labels[0])
    return labels
