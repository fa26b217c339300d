from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from pertcpm.workflow.activity_graph import ActivityGraph
from pertcpm.workflow.critical_path import CriticalPathResult, extract_critical
from pertcpm.workflow.schedule import Schedule, compute_schedule
from pertcpm.workflow.topological import topological_order


@dataclass(frozen=True)
class PertResult:
    graph: ActivityGraph
    order: List[str]
    schedule: Schedule
    critical: CriticalPathResult

    @property
    def project_duration(self) -> int:
        return self.schedule.project_duration

    @property
    def critical_path(self) -> List[str]:
        return self.critical.critical_path

    @property
    def critical_edges(self) -> List[Tuple[str, str]]:
        return self.critical.critical_edges

    @property
    def critical_activities(self) -> List[str]:
        return [label for label, t in self.schedule.times.items() if t.critical]


def compute_pert(graph: ActivityGraph) -> PertResult:
    """Sort, schedule and extract the critical path in one go.

    CycleDetected from the sort propagates before any pass runs.
    """
    order = topological_order(graph)
    schedule = compute_schedule(graph, order)
    critical = extract_critical(graph, schedule)
    return PertResult(
        graph=graph,
        order=[graph.label(i) for i in order],
        schedule=schedule,
        critical=critical,
    )
