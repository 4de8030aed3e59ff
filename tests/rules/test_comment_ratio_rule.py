"""Tests for the comment ratio rule."""

from __future__ import annotations

from goreview.models import ModuleKind
from goreview.rules import check_comment_ratio
from tests._fixtures.repo_builder import parse_snippet, record_for


def _function(span: int, comment_lines: int) -> str:
    body = ["\t// explain the step" for _ in range(comment_lines)]
    body.extend("\t_ = 1" for _ in range(span - 1 - comment_lines))
    return "package widget\n\nfunc Work() {\n" + "\n".join(body) + "\n}\n"


def test_low_comment_ratio_is_flagged() -> None:
    parsed = parse_snippet(_function(25, 2))

    issues = list(check_comment_ratio(record_for(parsed), parsed))

    assert [issue.type for issue in issues] == ["comment-ratio"]
    assert issues[0].message.endswith("0.08")


def test_sufficient_comment_ratio_is_not_flagged() -> None:
    parsed = parse_snippet(_function(25, 3))

    assert list(check_comment_ratio(record_for(parsed), parsed)) == []


def test_short_functions_are_exempt() -> None:
    parsed = parse_snippet(_function(19, 0))

    assert list(check_comment_ratio(record_for(parsed), parsed)) == []


def test_non_library_packages_are_exempt() -> None:
    parsed = parse_snippet(_function(25, 0))

    issues = list(check_comment_ratio(record_for(parsed, ModuleKind.ENTRY_POINT), parsed))

    assert issues == []


def test_block_comments_count_each_line() -> None:
    body = ["\t/* first", "\tsecond", "\tthird */"]
    body.extend("\t_ = 1" for _ in range(21))
    parsed = parse_snippet("package widget\n\nfunc Work() {\n" + "\n".join(body) + "\n}\n")

    assert list(check_comment_ratio(record_for(parsed), parsed)) == []
