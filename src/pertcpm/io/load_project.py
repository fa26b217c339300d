from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
import yaml

from pertcpm.errors import InvalidProject, UnknownLabel
from pertcpm.io.project_input import ActivitySpec, ProjectInput, coerce_duration, parse_predecessors
from pertcpm.validation.validators import validate_project
from pertcpm.workflow.activity_graph import ActivityGraph

log = logging.getLogger(__name__)

CSV_COLUMNS = ["label", "duration", "predecessors"]


def _read_yaml(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"{path}: invalid YAML: {e}") from e


def _spec_from_mapping(row: Dict[str, Any]) -> ActivitySpec:
    label = row.get("label")
    return ActivitySpec(
        label="" if label is None else str(label).strip(),
        duration=coerce_duration(row.get("duration")),
        predecessors=parse_predecessors(row.get("predecessors")),
    )


def load_project_yaml(path: Path) -> ProjectInput:
    data = _read_yaml(path) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping with an 'activities' list, got {type(data).__name__}")
    items = data.get("activities", []) or []
    if not isinstance(items, list):
        raise ValueError(f"{path}: 'activities' must be a list, got {type(items).__name__}")
    for pos, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            raise ValueError(f"{path}: activity #{pos} must be a mapping, got {item!r}")
    return ProjectInput(
        name=str(data.get("name") or path.stem),
        activities=[_spec_from_mapping(item) for item in items],
    )


def load_project_csv(path: Path, name: Optional[str] = None) -> ProjectInput:
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = [c for c in ["label", "duration"] if c not in df.columns]
    if missing:
        raise ValueError(f"{path}: missing column(s) {missing}")
    if "predecessors" not in df.columns:
        df["predecessors"] = ""
    activities = [_spec_from_mapping(r) for r in df[CSV_COLUMNS].to_dict(orient="records")]
    return ProjectInput(name=name or path.stem, activities=activities)


def load_project(path: Path) -> ProjectInput:
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        project = load_project_yaml(path)
    elif suffix == ".csv":
        project = load_project_csv(path)
    else:
        raise ValueError(f"Unsupported project file type: {path.suffix!r} (use .yaml, .yml or .csv)")
    log.info("Loaded project %r from %s: %d activities", project.name, path, len(project.activities))
    return project


def resolve_predecessors(project: ProjectInput) -> List[Tuple[str, List[str]]]:
    """(successor, predecessors) declarations with every label checked.

    Raises UnknownLabel on the first predecessor that names no activity.
    """
    known = set(project.labels)
    resolved: List[Tuple[str, List[str]]] = []
    for a in project.activities:
        for p in a.predecessors:
            if p not in known:
                raise UnknownLabel(a.label, p)
        resolved.append((a.label, list(a.predecessors)))
    return resolved


def build_graph(project: ProjectInput) -> ActivityGraph:
    """Validate *project* and freeze it into an ActivityGraph.

    Unknown predecessors raise UnknownLabel; any other validation error
    raises InvalidProject. Warnings are logged and do not stop the build.
    """
    issues = validate_project(project)
    for i in issues:
        if i.severity == "WARN":
            log.warning("%s: %s", i.code, i.message)
    errors = [i for i in issues if i.severity == "ERROR" and i.code != "DEP_UNKNOWN_LABEL"]
    if errors:
        raise InvalidProject(errors)

    precedences = resolve_predecessors(project)
    graph = ActivityGraph.build(
        [(a.label, a.duration) for a in project.activities],
        precedences,
    )
    log.debug("Built %r for project %r", graph, project.name)
    return graph
