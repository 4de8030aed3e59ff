"""Tests for the function size rule."""

from __future__ import annotations

from goreview.rules import check_function_size
from tests._fixtures.repo_builder import parse_snippet, record_for


def _function_spanning(span: int) -> str:
    body = "\n".join("\t_ = 1" for _ in range(span - 1))
    return f"package widget\n\nfunc Big() {{\n{body}\n}}\n"


def test_sixty_line_function_is_not_flagged() -> None:
    parsed = parse_snippet(_function_spanning(60))

    assert list(check_function_size(record_for(parsed), parsed)) == []


def test_sixty_one_line_function_is_flagged() -> None:
    parsed = parse_snippet(_function_spanning(61))

    issues = list(check_function_size(record_for(parsed), parsed))

    assert len(issues) == 1
    assert issues[0].type == "size"
    assert issues[0].line == 3
    assert "61" in issues[0].message


def test_methods_are_measured_too() -> None:
    body = "\n".join("\t_ = 1" for _ in range(70))
    parsed = parse_snippet(f"package widget\n\ntype T struct{{}}\n\nfunc (t T) Big() {{\n{body}\n}}\n")

    issues = list(check_function_size(record_for(parsed), parsed))

    assert [issue.message for issue in issues] == ["Function 'Big' is too large (71 lines)"]
