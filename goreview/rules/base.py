"""Shared contract for diagnostic rules."""

from __future__ import annotations

from typing import Callable, Iterable

from ..models import Issue, PackageRecord
from ..parsing import ParsedFile

Rule = Callable[[PackageRecord, ParsedFile], Iterable[Issue]]
"""A rule inspects one parsed file of a package and returns its findings."""


def new_issue(
    record: PackageRecord, parsed: ParsedFile, line: int, issue_type: str, message: str
) -> Issue:
    return Issue(
        package=record.name,
        filename=str(parsed.path),
        line=line,
        type=issue_type,
        message=message,
    )


__all__ = ["Rule", "new_issue"]
