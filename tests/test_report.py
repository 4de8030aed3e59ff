"""Tests for goreview.report."""

from __future__ import annotations

from pathlib import Path

import yaml

from goreview.models import Issue, Result
from goreview.report import missed_target, render_results, sort_results, write_report


def _results() -> list[Result]:
    child_a = Issue("widget", "a.go", 3, "todo", "// TODO one")
    child_b = Issue("widget", "a.go", 8, "todo", "// TODO two")
    parent = Issue("widget", "a.go", 3, "todo", "2 todo issues", weight=2, children=[child_a, child_b])
    return [
        Result(name="go_project_hygiene", score=1, issues=[parent]),
        Result(name="go_code_structure", score=0),
        Result(name="go_documentation", score=4),
    ]


def test_sort_results_orders_by_score() -> None:
    ordered = sort_results(_results())

    assert [result.name for result in ordered] == [
        "go_code_structure",
        "go_project_hygiene",
        "go_documentation",
    ]


def test_missed_target_reports_categories_over_the_target() -> None:
    failures = missed_target(_results(), target_score=1)

    assert [result.name for result in failures] == ["go_documentation"]
    assert missed_target(_results(), target_score=4) == []


def test_render_results_indents_children() -> None:
    lines = render_results(_results()[:1])

    assert lines == [
        "go_project_hygiene: 1",
        "  - a.go[3]: todo 2 todo issues",
        "    - a.go[3]: todo // TODO one",
        "    - a.go[8]: todo // TODO two",
    ]


def test_write_report_serializes_name_score_and_top_issues(tmp_path: Path) -> None:
    target = tmp_path / "out" / "review.yaml"

    write_report(target, _results())

    document = yaml.safe_load(target.read_text(encoding="utf-8"))
    assert [entry["name"] for entry in document] == [
        "go_project_hygiene",
        "go_code_structure",
        "go_documentation",
    ]
    first = document[0]
    assert set(first) == {"name", "score", "top_issues"}
    assert first["score"] == 1
    top = first["top_issues"][0]
    assert top["weight"] == 2
    assert [child["line"] for child in top["children"]] == [3, 8]
    assert "children" not in top["children"][0]
    assert document[1]["top_issues"] == []


def test_lower_score_passes_and_target_is_inclusive() -> None:
    assert Result(name="clean", score=0).passed(target_score=0)
    assert Result(name="at_target", score=5).passed(target_score=5)
    assert not Result(name="over_target", score=6).passed(target_score=5)
