from __future__ import annotations

from pathlib import Path
from datetime import datetime

from rich.console import Console

from pertcpm.settings import get_settings
from pertcpm.io.load_project import build_graph, load_project
from pertcpm.workflow.engine import compute_pert
from pertcpm.workflow.critical_path import critical_chains
from pertcpm.reports.console import render_schedule
from pertcpm.reports.exports import write_json, write_schedule_csv, write_visualization


console = Console()
ROOT = Path(__file__).resolve().parents[1]
PROJECT_PATH = ROOT / "project_library" / "projects" / "example_project.yaml"
OUT_DIR = ROOT / "outputs" / "reports"


def main() -> None:
    s = get_settings()
    project = load_project(PROJECT_PATH)
    graph = build_graph(project)
    result = compute_pert(graph)

    render_schedule(result, console)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    write_schedule_csv(OUT_DIR / f"{ts}_schedule.csv", result.schedule)
    write_visualization(OUT_DIR / f"{ts}_{s.visualization_filename}", result,
                        sentinels=s.export_sentinels, start_label=s.sentinel_start, end_label=s.sentinel_end)

    # every critical branch, not just the one the greedy walk picked
    chains = critical_chains(graph, result.schedule)
    write_json(OUT_DIR / f"{ts}_report_summary.json", {
        "project": project.name,
        "project_duration": result.project_duration,
        "critical_path": result.critical_path,
        "critical_chains": chains,
        "critical_activities": result.critical_activities,
    })

    console.print("[bold]Schedule & reports complete[/bold]")
    console.print(f"Wrote reports to: {OUT_DIR}")

if __name__ == "__main__":
    main()
