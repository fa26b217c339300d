from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import networkx as nx

from pertcpm.workflow.activity_graph import ActivityGraph
from pertcpm.workflow.schedule import Schedule


@dataclass(frozen=True)
class CriticalPathResult:
    critical_path: List[str]
    critical_edges: List[Tuple[str, str]]
    total_duration: int


def _is_critical_edge(graph: ActivityGraph, schedule: Schedule, u: int, v: int) -> bool:
    tu = schedule[graph.label(u)]
    tv = schedule[graph.label(v)]
    return tu.slack == 0 and tv.slack == 0 and tv.es == tu.ef


def critical_edges(graph: ActivityGraph, schedule: Schedule) -> List[Tuple[str, str]]:
    """Every edge whose endpoints are critical and meet with no gap."""
    return [
        (graph.label(u), graph.label(v))
        for u, v in graph.edges()
        if _is_critical_edge(graph, schedule, u, v)
    ]


def _start_activity(graph: ActivityGraph, schedule: Schedule) -> Optional[int]:
    zero = [i for i in graph.indices() if schedule.slack(graph.label(i)) == 0]
    for i in zero:
        if graph.is_source(i):
            return i
    return zero[0] if zero else None


def critical_path(graph: ActivityGraph, schedule: Schedule) -> List[str]:
    """One slack-zero chain, walked greedily from the first critical source.

    When the critical edges branch only the first branch (in successor
    order) is followed; see ``critical_chains`` for all of them.
    """
    cur = _start_activity(graph, schedule)
    if cur is None:
        return []

    path = [graph.label(cur)]
    while True:
        nxt = next((v for v in graph.successors(cur) if _is_critical_edge(graph, schedule, cur, v)), None)
        if nxt is None:
            break
        path.append(graph.label(nxt))
        cur = nxt
    return path


def extract_critical(graph: ActivityGraph, schedule: Schedule) -> CriticalPathResult:
    return CriticalPathResult(
        critical_path=critical_path(graph, schedule),
        critical_edges=critical_edges(graph, schedule),
        total_duration=schedule.project_duration,
    )


def critical_chains(graph: ActivityGraph, schedule: Schedule) -> List[List[str]]:
    """All maximal chains through the critical-edge graph.

    Chains start at critical activities with no incoming critical edge and
    end at ones with no outgoing critical edge, grouped by start in activity
    order. The count can grow exponentially with parallel critical branches.
    """
    cg = nx.DiGraph()
    for i in graph.indices():
        if schedule.slack(graph.label(i)) == 0:
            cg.add_node(i)
    for u, v in graph.edges():
        if _is_critical_edge(graph, schedule, u, v):
            cg.add_edge(u, v)

    starts = sorted(n for n in cg.nodes if cg.in_degree(n) == 0)
    ends = sorted(n for n in cg.nodes if cg.out_degree(n) == 0)

    chains: List[List[str]] = []
    for s in starts:
        if s in ends:
            chains.append([graph.label(s)])
            continue
        for e in ends:
            for p in nx.all_simple_paths(cg, s, e):
                chains.append([graph.label(i) for i in p])
    return chains
