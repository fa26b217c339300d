from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from pertcpm.workflow.activity_graph import ActivityGraph
from pertcpm.workflow.engine import PertResult


def render_graph(graph: ActivityGraph, console: Optional[Console] = None) -> None:
    console = console or Console()
    table = Table(title="Activity graph")
    table.add_column("#", justify="right")
    table.add_column("Activity")
    table.add_column("Dur", justify="right")
    table.add_column("Predecessors")
    table.add_column("Successors")
    for i in graph.indices():
        preds = ", ".join(graph.label(p) for p in graph.predecessors(i)) or "-"
        succs = ", ".join(graph.label(s) for s in graph.successors(i)) or "-"
        table.add_row(str(i), graph.label(i), str(graph.duration(i)), preds, succs)
    console.print(table)


def render_schedule(result: PertResult, console: Optional[Console] = None) -> None:
    console = console or Console()
    table = Table(title="PERT/CPM schedule")
    for col in ["Activity", "Dur", "ES", "EF", "LS", "LF", "Slack"]:
        table.add_column(col, justify="left" if col == "Activity" else "right")
    for t in result.schedule.times.values():
        style = "bold red" if t.critical else None
        table.add_row(t.label, str(t.duration), str(t.es), str(t.ef), str(t.ls), str(t.lf), str(t.slack), style=style)
    console.print(table)
    console.print(f"Project duration: [bold]{result.project_duration}[/bold]")

    crit = result.critical_activities
    console.print(f"Critical activities (slack = 0): {' '.join(crit) if crit else '(none)'}")

    if result.critical_path:
        console.print(f"Critical path: {' -> '.join(result.critical_path)}")
    else:
        console.print("[yellow]No linear critical path could be extracted.[/yellow]")
