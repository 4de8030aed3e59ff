"""Comment density inside long library functions."""

from __future__ import annotations

from typing import Iterator

from ..models import Issue, ModuleKind, PackageRecord
from ..parsing import ParsedFile, comments, node_text, start_line, top_level_functions
from .base import new_issue

MIN_FUNCTION_LINES = 20
MIN_COMMENT_RATIO = 0.10


def check_comment_ratio(record: PackageRecord, parsed: ParsedFile) -> Iterator[Issue]:
    """Flag library functions whose comment lines fall below the minimum ratio.

    Only comments starting inside the function's line range count; a block
    comment counts every line it covers.
    """
    if record.kind is not ModuleKind.LIBRARY:
        return

    comment_nodes = comments(parsed.root)
    for function in top_level_functions(parsed.root):
        if function.child_by_field_name("body") is None:
            continue

        start = function.start_point[0]
        end = function.end_point[0]
        total_lines = end - start
        if total_lines < MIN_FUNCTION_LINES:
            continue

        comment_lines = 0
        for comment in comment_nodes:
            row = comment.start_point[0]
            if start <= row <= end:
                comment_lines += comment.end_point[0] - row + 1

        ratio = comment_lines / total_lines
        if ratio < MIN_COMMENT_RATIO:
            name = node_text(function.child_by_field_name("name"))
            yield new_issue(
                record,
                parsed,
                start_line(function),
                "comment-ratio",
                f"Function '{name}' has low comment ratio: {ratio:.2f}",
            )


__all__ = ["MIN_COMMENT_RATIO", "MIN_FUNCTION_LINES", "check_comment_ratio"]
