from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from pertcpm.workflow.activity_graph import ActivityGraph
from pertcpm.workflow.topological import topological_order

SCHEDULE_COLUMNS = ["label", "duration", "es", "ef", "ls", "lf", "slack", "critical"]


@dataclass(frozen=True)
class ActivityTimes:
    label: str
    duration: int
    es: int
    ef: int
    ls: int
    lf: int

    @property
    def slack(self) -> int:
        return self.ls - self.es

    @property
    def critical(self) -> bool:
        return self.slack == 0


@dataclass(frozen=True)
class Schedule:
    times: Dict[str, ActivityTimes]  # activity (input) order
    project_duration: int

    def __getitem__(self, label: str) -> ActivityTimes:
        return self.times[label]

    def __contains__(self, label: object) -> bool:
        return label in self.times

    def __len__(self) -> int:
        return len(self.times)

    def slack(self, label: str) -> int:
        return self.times[label].slack

    def as_dict(self) -> Dict[str, Dict[str, int]]:
        return {
            label: {"es": t.es, "ef": t.ef, "ls": t.ls, "lf": t.lf, "slack": t.slack}
            for label, t in self.times.items()
        }

    def to_frame(self) -> pd.DataFrame:
        rows = [
            {
                "label": t.label,
                "duration": t.duration,
                "es": t.es,
                "ef": t.ef,
                "ls": t.ls,
                "lf": t.lf,
                "slack": t.slack,
                "critical": t.critical,
            }
            for t in self.times.values()
        ]
        return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def _check_order(graph: ActivityGraph, order: Sequence[int]) -> None:
    if len(order) != len(graph) or set(order) != set(graph.indices()):
        raise ValueError("Order must list every activity exactly once")


def forward_pass(graph: ActivityGraph, order: Sequence[int]) -> Tuple[List[int], List[int]]:
    """Earliest start/finish per activity index."""
    _check_order(graph, order)
    es: List[Optional[int]] = [None] * len(graph)
    ef: List[Optional[int]] = [None] * len(graph)

    for u in order:
        start = 0
        for p in graph.predecessors(u):
            p_finish = ef[p]
            if p_finish is None:
                raise ValueError(f"{graph.label(p)!r} is not placed before {graph.label(u)!r}; order is not topological")
            start = max(start, p_finish)
        es[u] = start
        ef[u] = start + graph.duration(u)

    return [int(x) for x in es], [int(x) for x in ef]  # type: ignore[arg-type]


def backward_pass(graph: ActivityGraph, order: Sequence[int], project_duration: int) -> Tuple[List[int], List[int]]:
    """Latest start/finish per activity index.

    Sinks must finish exactly at ``project_duration``.
    """
    _check_order(graph, order)
    ls: List[Optional[int]] = [None] * len(graph)
    lf: List[Optional[int]] = [None] * len(graph)

    for u in reversed(order):
        succ = graph.successors(u)
        if not succ:
            finish = project_duration
        else:
            starts: List[int] = []
            for v in succ:
                v_start = ls[v]
                if v_start is None:
                    raise ValueError(f"{graph.label(v)!r} is not placed after {graph.label(u)!r}; order is not topological")
                starts.append(v_start)
            finish = min(starts)
        lf[u] = finish
        ls[u] = finish - graph.duration(u)

    return [int(x) for x in ls], [int(x) for x in lf]  # type: ignore[arg-type]


def compute_schedule(graph: ActivityGraph, order: Optional[Sequence[int]] = None) -> Schedule:
    """Run both CPM passes.

    Without an explicit ``order`` the graph is sorted first, which raises
    CycleDetected for a cyclic graph before anything is computed.
    """
    if order is None:
        order = topological_order(graph)

    es, ef = forward_pass(graph, order)
    project_duration = max(ef, default=0)
    ls, lf = backward_pass(graph, order, project_duration)

    times: Dict[str, ActivityTimes] = {}
    for i in graph.indices():
        label = graph.label(i)
        times[label] = ActivityTimes(
            label=label,
            duration=graph.duration(i),
            es=es[i],
            ef=ef[i],
            ls=ls[i],
            lf=lf[i],
        )
    return Schedule(times=times, project_duration=project_duration)
