from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from pertcpm.validation.validators import ValidationIssue


class PertError(Exception):
    """Base class for every error raised by pertcpm."""


class CycleDetected(PertError):
    """The precedence graph is not a DAG, so no schedule exists.

    ``remaining`` lists the activities Kahn's algorithm could not place and
    ``cycle`` is one concrete loop ``[a, b, ..., a]`` among them.
    """

    def __init__(self, remaining: List[str], cycle: List[str]) -> None:
        self.remaining = remaining
        self.cycle = cycle
        msg = f"Cycle detected: {len(remaining)} activity(ies) involved in circular precedence"
        if cycle:
            msg += f" ({' -> '.join(cycle)})"
        super().__init__(msg)


class UnknownLabel(PertError):
    def __init__(self, activity: str, label: str) -> None:
        self.activity = activity
        self.label = label
        super().__init__(f"Activity {activity!r} declares unknown predecessor {label!r}")


class InvalidProject(PertError):
    def __init__(self, issues: List["ValidationIssue"]) -> None:
        self.issues = issues
        lines = "; ".join(f"{i.code}: {i.message}" for i in issues)
        super().__init__(f"Project input has {len(issues)} error(s): {lines}")
