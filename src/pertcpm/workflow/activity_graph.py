from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import networkx as nx


@dataclass(frozen=True)
class Activity:
    label: str
    duration: int


class ActivityGraph:
    """Activities and precedence edges, frozen at construction.

    Each label is mapped once to a stable integer index (its position in the
    input). Structural queries take and return indices; ``label``/``index_of``
    translate at the boundary. Successors and predecessors come back in
    ascending index order so every traversal over the graph is deterministic.
    """

    def __init__(self, activities: Iterable[Activity], edges: Iterable[Tuple[str, str]] = ()) -> None:
        self._activities: List[Activity] = []
        self._index: Dict[str, int] = {}
        self._g = nx.DiGraph()

        for a in activities:
            if a.label in self._index:
                raise ValueError(f"Duplicate activity label {a.label!r}")
            if isinstance(a.duration, bool) or not isinstance(a.duration, int):
                raise ValueError(f"Activity {a.label!r} has non-integer duration {a.duration!r}")
            if a.duration < 0:
                raise ValueError(f"Activity {a.label!r} has negative duration {a.duration}")
            idx = len(self._activities)
            self._activities.append(a)
            self._index[a.label] = idx
            self._g.add_node(idx)

        for pre, suc in edges:
            if pre not in self._index or suc not in self._index:
                raise ValueError(f"Edge {pre!r} -> {suc!r} references an unknown activity")
            # DiGraph keeps a single edge per pair
            self._g.add_edge(self._index[pre], self._index[suc])

        self._succ: List[List[int]] = [sorted(self._g.successors(i)) for i in range(len(self._activities))]
        self._pred: List[List[int]] = [sorted(self._g.predecessors(i)) for i in range(len(self._activities))]

    @classmethod
    def build(
        cls,
        activities: Sequence[Tuple[str, int]],
        precedences: Iterable[Tuple[str, Optional[Sequence[str]]]] = (),
    ) -> "ActivityGraph":
        """Build from (label, duration) pairs and (successor, predecessors) declarations."""
        edges: List[Tuple[str, str]] = []
        for suc, preds in precedences:
            for pre in preds or []:
                edges.append((pre, suc))
        return cls([Activity(label, dur) for label, dur in activities], edges)

    # ---- structural queries ----------------------------------------------

    def successors(self, idx: int) -> List[int]:
        return list(self._succ[idx])

    def predecessors(self, idx: int) -> List[int]:
        return list(self._pred[idx])

    def has_edge(self, pre: str, suc: str) -> bool:
        if pre not in self._index or suc not in self._index:
            return False
        return self._g.has_edge(self._index[pre], self._index[suc])

    def is_source(self, idx: int) -> bool:
        return not self._pred[idx]

    def is_sink(self, idx: int) -> bool:
        return not self._succ[idx]

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Edges predecessor-major, successor-minor."""
        for u, succ in enumerate(self._succ):
            for v in succ:
                yield u, v

    def edge_labels(self) -> List[Tuple[str, str]]:
        return [(self.label(u), self.label(v)) for u, v in self.edges()]

    def to_networkx(self) -> nx.DiGraph:
        """Read-only view of the index graph."""
        return self._g.copy(as_view=True)

    # ---- labels / attributes ---------------------------------------------

    def index_of(self, label: str) -> int:
        try:
            return self._index[label]
        except KeyError:
            raise KeyError(f"Unknown activity {label!r}") from None

    def label(self, idx: int) -> str:
        return self._activities[idx].label

    def duration(self, idx: int) -> int:
        return self._activities[idx].duration

    def indices(self) -> range:
        return range(len(self._activities))

    @property
    def activities(self) -> List[Activity]:
        return list(self._activities)

    @property
    def labels(self) -> List[str]:
        return [a.label for a in self._activities]

    @property
    def edge_count(self) -> int:
        return self._g.number_of_edges()

    def __contains__(self, label: object) -> bool:
        return label in self._index

    def __len__(self) -> int:
        return len(self._activities)

    def __repr__(self) -> str:
        return f"ActivityGraph(activities={len(self)}, edges={self.edge_count})"
