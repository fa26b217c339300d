"""Tests for interactive project collection."""
from __future__ import annotations

import io

import pytest
from rich.console import Console

from pertcpm.io.interactive import collect_project
from pertcpm.io.load_project import build_graph
from pertcpm.workflow.engine import compute_pert


class TestCollectProject:
    def test_reprompts_until_valid(self) -> None:
        answers = "\n".join([
            "0", "4",                      # count: rejected, accepted
            "A", "A", "B", "C", "D",       # labels: duplicate A rejected
            "3", "-1", "2", "4", "1",      # durations: -1 rejected
            "-",                           # A
            "Z", "A",                      # B: unknown Z rejected
            "A",                           # C
            "", "B,C",                     # D: blank line ignored
        ]) + "\n"
        console = Console(file=io.StringIO(), width=120, color_system=None)
        project = collect_project(console, stream=io.StringIO(answers))

        assert project.labels == ["A", "B", "C", "D"]
        assert [a.duration for a in project.activities] == [3, 2, 4, 1]
        assert [a.predecessors for a in project.activities] == [[], ["A"], ["A"], ["B", "C"]]

        out = console.file.getvalue()
        assert "already used" in out
        assert "Unknown label(s): Z" in out

        result = compute_pert(build_graph(project))
        assert result.critical_path == ["A", "C", "D"]

    def test_truncated_input_stops(self) -> None:
        console = Console(file=io.StringIO(), width=120, color_system=None)
        with pytest.raises(EOFError):
            collect_project(console, stream=io.StringIO("2\nA\n"))

    def test_blank_lines_then_end_of_input(self) -> None:
        console = Console(file=io.StringIO(), width=120, color_system=None)
        with pytest.raises(EOFError):
            collect_project(console, stream=io.StringIO("1\nA\n0\n\n\n"))
