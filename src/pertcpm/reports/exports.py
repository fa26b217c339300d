from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pandas as pd

from pertcpm.workflow.engine import PertResult
from pertcpm.workflow.schedule import Schedule

log = logging.getLogger(__name__)


def write_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, ensure_ascii=False, indent=2), encoding="utf-8")


def write_csv(path: Path, df: pd.DataFrame) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)


def _edge_list(edges: List[Tuple[str, str]]) -> List[Dict[str, str]]:
    return [{"from": u, "to": v} for u, v in edges]


def visualization_document(
    result: PertResult,
    sentinels: bool = False,
    start_label: str = "start",
    end_label: str = "end",
) -> Dict[str, Any]:
    """Graph document for external viewers.

    Keys and ordering are fixed: nodes in activity order, edges
    predecessor-major. With *sentinels* a zero-duration start/end pair is
    wrapped around the graph and around the critical path/edges.
    """
    graph = result.graph
    nodes = [{"id": a.label, "duration": a.duration} for a in graph.activities]
    edges = graph.edge_labels()
    path = list(result.critical_path)
    crit_edges = list(result.critical_edges)

    if sentinels:
        for s in (start_label, end_label):
            if s in graph:
                raise ValueError(f"Sentinel label {s!r} clashes with an activity label")
        if start_label == end_label:
            raise ValueError("Sentinel start and end labels must differ")

        sources = [graph.label(i) for i in graph.indices() if graph.is_source(i)]
        sinks = [graph.label(i) for i in graph.indices() if graph.is_sink(i)]
        critical = set(result.critical_activities)

        nodes = [{"id": start_label, "duration": 0}] + nodes + [{"id": end_label, "duration": 0}]
        edges = [(start_label, s) for s in sources] + edges + [(s, end_label) for s in sinks]
        crit_edges = (
            [(start_label, s) for s in sources if s in critical]
            + crit_edges
            + [(s, end_label) for s in sinks if s in critical]
        )
        if path:
            path = [start_label] + path + [end_label]

    return {
        "nodes": nodes,
        "edges": _edge_list(edges),
        "critical_path": path,
        "critical_edges": _edge_list(crit_edges),
    }


def write_visualization(path: Path, result: PertResult, sentinels: bool = False, start_label: str = "start", end_label: str = "end") -> Path:
    doc = visualization_document(result, sentinels=sentinels, start_label=start_label, end_label=end_label)
    write_json(path, doc)
    log.info("Wrote visualization graph to %s", path)
    return path


def write_schedule_csv(path: Path, schedule: Schedule) -> Path:
    write_csv(path, schedule.to_frame())
    log.info("Wrote schedule table to %s", path)
    return path
