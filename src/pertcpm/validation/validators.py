from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Set

from pertcpm.io.project_input import ProjectInput


@dataclass
class ValidationIssue:
    severity: str  # ERROR/WARN
    code: str
    message: str


def validate_not_empty(project: ProjectInput) -> List[ValidationIssue]:
    if not project.activities:
        return [ValidationIssue("ERROR", "PROJECT_EMPTY", f"Project {project.name!r} has no activities.")]
    return []


def validate_labels(project: ProjectInput) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    seen: Set[str] = set()
    dupes: List[str] = []
    for pos, a in enumerate(project.activities, start=1):
        if not a.label.strip():
            issues.append(ValidationIssue("ERROR", "ACTIVITY_EMPTY_LABEL", f"Activity #{pos} has an empty label."))
            continue
        if a.label in seen and a.label not in dupes:
            dupes.append(a.label)
        seen.add(a.label)
    if dupes:
        issues.append(ValidationIssue("ERROR", "ACTIVITY_DUPLICATE", f"Duplicate activity label(s): {dupes}"))
    return issues


def validate_durations(project: ProjectInput) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for a in project.activities:
        d = a.duration
        if isinstance(d, bool) or not isinstance(d, int):
            issues.append(ValidationIssue("ERROR", "ACTIVITY_BAD_DURATION", f"Activity {a.label!r}: duration {d!r} is not an integer."))
        elif d < 0:
            issues.append(ValidationIssue("ERROR", "ACTIVITY_NEGATIVE_DURATION", f"Activity {a.label!r}: duration {d} is negative."))
    return issues


def validate_predecessor_references(project: ProjectInput) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    known = set(project.labels)
    for a in project.activities:
        for p in a.predecessors:
            if p not in known:
                issues.append(ValidationIssue("ERROR", "DEP_UNKNOWN_LABEL", f"Activity {a.label!r}: predecessor {p!r} is not a known activity."))
    return issues


def validate_self_loops(project: ProjectInput) -> List[ValidationIssue]:
    # scheduling reports these as cycles; flag them early
    return [
        ValidationIssue("WARN", "DEP_SELF_LOOP", f"Activity {a.label!r} lists itself as a predecessor.")
        for a in project.activities
        if a.label in a.predecessors
    ]


def validate_project(project: ProjectInput) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    issues += validate_not_empty(project)
    issues += validate_labels(project)
    issues += validate_durations(project)
    issues += validate_predecessor_references(project)
    issues += validate_self_loops(project)
    return issues


def run_all_validations(project: ProjectInput) -> Dict[str, Any]:
    issues = validate_project(project)
    summary = {
        "errors": sum(1 for i in issues if i.severity == "ERROR"),
        "warnings": sum(1 for i in issues if i.severity == "WARN"),
    }
    return {
        "project": project.name,
        "summary": summary,
        "issues": [i.__dict__ for i in issues],
    }
