"""Shared fixtures for scheduling tests."""
from __future__ import annotations

import random
from typing import Callable, Dict, List, Sequence, Tuple

import pytest

from pertcpm.workflow.activity_graph import Activity, ActivityGraph

SEED = 42


def make_graph(durations: Dict[str, int], edges: Sequence[Tuple[str, str]] = ()) -> ActivityGraph:
    return ActivityGraph([Activity(label, d) for label, d in durations.items()], edges)


def random_dag(rng: random.Random, max_nodes: int = 12, edge_prob: float = 0.3) -> ActivityGraph:
    """Random DAG whose input order is shuffled so it is rarely topological."""
    n = rng.randint(1, max_nodes)
    labels = [f"T{i}" for i in range(n)]
    edges = [(labels[i], labels[j]) for i in range(n) for j in range(i + 1, n) if rng.random() < edge_prob]
    rng.shuffle(edges)
    shuffled = labels[:]
    rng.shuffle(shuffled)
    return make_graph({label: rng.randint(0, 9) for label in shuffled}, edges)


@pytest.fixture
def graph_from() -> Callable[..., ActivityGraph]:
    return make_graph


@pytest.fixture
def abcd_graph() -> ActivityGraph:
    """
    A(3) -> B(2) -> D(1)
    A(3) -> C(4) -> D(1)
    """
    return make_graph(
        {"A": 3, "B": 2, "C": 4, "D": 1},
        [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")],
    )


@pytest.fixture
def branching_graph() -> ActivityGraph:
    """Two equally long critical branches: A -> B -> D and A -> C -> D."""
    return make_graph(
        {"A": 2, "B": 3, "C": 3, "D": 1},
        [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")],
    )


@pytest.fixture
def random_dags() -> List[ActivityGraph]:
    rng = random.Random(SEED)
    return [random_dag(rng) for _ in range(40)]
