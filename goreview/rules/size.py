"""Function size limits."""

from __future__ import annotations

from typing import Iterator

from ..models import Issue, PackageRecord
from ..parsing import ParsedFile, node_text, start_line, top_level_functions
from .base import new_issue

MAX_FUNCTION_LINES = 60


def check_function_size(record: PackageRecord, parsed: ParsedFile) -> Iterator[Issue]:
    for function in top_level_functions(parsed.root):
        span = function.end_point[0] - function.start_point[0]
        if span <= MAX_FUNCTION_LINES:
            continue
        name = node_text(function.child_by_field_name("name"))
        yield new_issue(
            record,
            parsed,
            start_line(function),
            "size",
            f"Function '{name}' is too large ({span} lines)",
        )


__all__ = ["MAX_FUNCTION_LINES", "check_function_size"]
