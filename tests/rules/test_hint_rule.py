"""Tests for the TODO/not-implemented hint rule."""

from __future__ import annotations

from goreview.rules import check_hints
from tests._fixtures.repo_builder import parse_snippet, record_for


def test_hints_flag_comments_identifiers_and_strings() -> None:
    parsed = parse_snippet(
        """
        package widget

        // TODO: finish this
        func notImplementedYet() string {
        	return "not implemented"
        }
        """
    )

    issues = list(check_hints(record_for(parsed), parsed))

    assert [issue.line for issue in issues] == [3, 4, 5]
    assert {issue.type for issue in issues} == {"todo"}
    assert issues[0].message == "// TODO: finish this"
    assert issues[1].message == "notImplementedYet"
    assert issues[2].message == '"not implemented"'


def test_hints_report_every_occurrence() -> None:
    parsed = parse_snippet(
        """
        package widget

        var errNotImplemented = "todo"

        func use() string { return errNotImplemented }
        """
    )

    issues = list(check_hints(record_for(parsed), parsed))

    assert [issue.line for issue in issues] == [3, 3, 5]


def test_hints_ignore_clean_files() -> None:
    parsed = parse_snippet(
        """
        package widget

        // Done describes finished work.
        func Done() string { return "complete" }
        """
    )

    assert list(check_hints(record_for(parsed), parsed)) == []
