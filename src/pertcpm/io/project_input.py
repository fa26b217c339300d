from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List


@dataclass(frozen=True)
class ActivitySpec:
    label: str
    duration: Any  # int once validated; raw value otherwise
    predecessors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ProjectInput:
    name: str
    activities: List[ActivitySpec]

    @property
    def labels(self) -> List[str]:
        return [a.label for a in self.activities]


def parse_predecessors(raw: Any) -> List[str]:
    """Normalize a predecessor declaration.

    Accepts a list, a comma separated string, ``-``/blank for none, or a
    missing value (None/NaN).
    """
    if raw is None:
        return []
    if isinstance(raw, float) and math.isnan(raw):
        return []
    if isinstance(raw, (list, tuple)):
        items = [str(x).strip() for x in raw]
    else:
        s = str(raw).strip()
        if s in {"", "-"}:
            return []
        items = [x.strip() for x in s.split(",")]
    return [x for x in items if x and x != "-"]


def coerce_duration(raw: Any) -> Any:
    """Integral values become int; anything else is returned untouched for validation."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else raw
    if isinstance(raw, str):
        s = raw.strip()
        try:
            return int(s)
        except ValueError:
            try:
                f = float(s)
            except ValueError:
                return raw
            return int(f) if f.is_integer() else raw
    return raw
