"""Collect a project from the console, re-asking until each answer is valid."""
from __future__ import annotations

from typing import List, Optional, Set, TextIO, cast

from rich.console import Console
from rich.prompt import IntPrompt, Prompt

from pertcpm.io.project_input import ActivitySpec, ProjectInput, parse_predecessors


class _EndOfInput:
    """Stream wrapper that turns an exhausted ``readline`` into EOFError, as ``input()`` does."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def readline(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError("input ended")
        return line


def _ask_int(console: Console, prompt: str, minimum: int, stream: Optional[TextIO]) -> int:
    while True:
        value = IntPrompt.ask(prompt, console=console, stream=stream)
        if value >= minimum:
            return value
        console.print(f"[red]Enter an integer >= {minimum}.[/red]")


def _ask_label(console: Console, prompt: str, taken: Set[str], stream: Optional[TextIO]) -> str:
    while True:
        label = Prompt.ask(prompt, console=console, stream=stream).strip()
        if not label:
            console.print("[red]Label cannot be empty.[/red]")
        elif "," in label or label == "-":
            console.print("[red]Label cannot contain ',' or be '-'.[/red]")
        elif label in taken:
            console.print(f"[red]Label {label!r} is already used.[/red]")
        else:
            return label


def _ask_predecessors(console: Console, label: str, known: Set[str], stream: Optional[TextIO]) -> List[str]:
    while True:
        raw = Prompt.ask(f"Predecessors of {label}", console=console, stream=stream).strip()
        if not raw:
            continue
        preds = parse_predecessors(raw)
        unknown = [p for p in preds if p not in known]
        if unknown:
            console.print(f"[red]Unknown label(s): {', '.join(unknown)}. Try again.[/red]")
            continue
        return preds


def collect_project(console: Optional[Console] = None, stream: Optional[TextIO] = None, name: str = "interactive") -> ProjectInput:
    """Ask for count, labels, durations, then predecessors of each activity.

    *stream* replaces stdin, mainly for scripted input. Running out of input
    raises EOFError instead of asking again.
    """
    console = console or Console()
    reader = cast(TextIO, _EndOfInput(stream)) if stream is not None else None
    console.print("[bold]PERT/CPM (activities on nodes)[/bold]")

    count = _ask_int(console, "Number of activities", 1, reader)

    console.print("\nActivity labels:")
    labels: List[str] = []
    for i in range(count):
        labels.append(_ask_label(console, f"Label of activity {i + 1}", set(labels), reader))

    console.print("\nDurations:")
    durations = [_ask_int(console, f"Duration of {label}", 0, reader) for label in labels]

    console.print("\nPredecessors for each activity, e.g. A,B or '-' for none:")
    known = set(labels)
    activities = [
        ActivitySpec(label=label, duration=dur, predecessors=_ask_predecessors(console, label, known, reader))
        for label, dur in zip(labels, durations)
    ]
    return ProjectInput(name=name, activities=activities)
