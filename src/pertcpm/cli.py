"""pertcpm command line entry point.

Usage: pertcpm [schedule|validate|interactive] ...
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from pertcpm.errors import CycleDetected, InvalidProject, PertError, UnknownLabel
from pertcpm.io.interactive import collect_project
from pertcpm.io.load_project import build_graph, load_project
from pertcpm.io.project_input import ProjectInput
from pertcpm.logging_setup import configure_logging
from pertcpm.reports.console import render_graph, render_schedule
from pertcpm.reports.exports import write_json, write_schedule_csv, write_visualization
from pertcpm.settings import LOG_LEVELS, Settings, get_settings
from pertcpm.validation.validators import run_all_validations
from pertcpm.workflow.engine import compute_pert

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 2
EXIT_CYCLE = 3


def _add_export_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--json", type=Path, default=None,
                   help="Visualization JSON path (default: <output_dir>/<visualization_filename>)")
    p.add_argument("--csv", type=Path, default=None, help="Also write the schedule table as CSV.")
    p.add_argument("--sentinels", action="store_true", default=None,
                   help="Add synthetic start/end nodes to the visualization JSON.")
    p.add_argument("--no-export", action="store_true", help="Skip writing the visualization JSON.")
    p.add_argument("--show-graph", action="store_true", help="Print the activity graph before the schedule.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pertcpm", description="Critical path (PERT/CPM) scheduling.")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help="Override PERTCPM_LOG_LEVEL.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("schedule", help="Compute the schedule for a project file (.yaml/.csv).")
    p.add_argument("project", type=Path)
    _add_export_args(p)

    p = sub.add_parser("validate", help="Validate a project file and print the issue report.")
    p.add_argument("project", type=Path)
    p.add_argument("--report", type=Path, default=None, help="Write the validation report as JSON.")

    p = sub.add_parser("interactive", help="Enter a project at the console and schedule it.")
    _add_export_args(p)

    return parser


def _schedule(project: ProjectInput, args: argparse.Namespace, settings: Settings, console: Console) -> int:
    try:
        graph = build_graph(project)
        if args.show_graph:
            render_graph(graph, console)
        result = compute_pert(graph)
    except UnknownLabel as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return EXIT_INVALID
    except InvalidProject as e:
        for i in e.issues:
            console.print(f"[red]{i.code}[/red] {escape(i.message)}")
        return EXIT_INVALID
    except CycleDetected as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return EXIT_CYCLE

    render_schedule(result, console)

    if not args.no_export:
        out = args.json or Path(settings.output_dir) / settings.visualization_filename
        sentinels = settings.export_sentinels if args.sentinels is None else args.sentinels
        write_visualization(out, result, sentinels=sentinels,
                            start_label=settings.sentinel_start, end_label=settings.sentinel_end)
        console.print(f"Wrote: {out}")
    if args.csv:
        write_schedule_csv(args.csv, result.schedule)
        console.print(f"Wrote: {args.csv}")
    return EXIT_OK


def _validate(args: argparse.Namespace, console: Console) -> int:
    project = load_project(args.project)
    report = run_all_validations(project)
    console.print(f"[bold]Project validation[/bold]: {report['project']}")
    for i in report["issues"]:
        color = "red" if i["severity"] == "ERROR" else "yellow"
        console.print(f"[{color}]{i['severity']} {i['code']}[/{color}] {escape(i['message'])}")
    console.print(f"Errors: {report['summary']['errors']} | Warnings: {report['summary']['warnings']}")
    if args.report:
        write_json(args.report, report)
        console.print(f"Wrote: {args.report}")
    return EXIT_INVALID if report["summary"]["errors"] > 0 else EXIT_OK


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()

    try:
        settings = get_settings()
        configure_logging(args.log_level or settings.log_level)
        if args.command == "validate":
            return _validate(args, console)
        if args.command == "interactive":
            project = collect_project(console)
        else:
            project = load_project(args.project)
        return _schedule(project, args, settings, console)
    except (PertError, ValueError, OSError) as e:
        log.debug("command failed", exc_info=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return EXIT_INVALID
    except (EOFError, KeyboardInterrupt):
        console.print("\n[red]Input ended before the project was complete.[/red]")
        return EXIT_INVALID


if __name__ == "__main__":
    raise SystemExit(main())
