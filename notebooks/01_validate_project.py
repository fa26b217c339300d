from __future__ import annotations

from pathlib import Path
from datetime import datetime

from rich.console import Console

from pertcpm.io.load_project import load_project
from pertcpm.reports.exports import write_json
from pertcpm.validation.validators import run_all_validations


console = Console()
ROOT = Path(__file__).resolve().parents[1]
PROJECT_PATH = ROOT / "project_library" / "projects" / "example_project.yaml"
OUT_DIR = ROOT / "outputs" / "audit_snapshots"


def main() -> None:
    project = load_project(PROJECT_PATH)
    report = run_all_validations(project)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_path = OUT_DIR / f"{ts}_validation_report.json"
    write_json(out_path, report)

    console.print("[bold]Project Validation[/bold]")
    console.print(f"Errors: {report['summary']['errors']} | Warnings: {report['summary']['warnings']}")
    console.print(f"Wrote: {out_path}")

    if report["summary"]["errors"] > 0:
        raise SystemExit(2)

if __name__ == "__main__":
    main()
