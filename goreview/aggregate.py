"""Grouping and ordering of category issues."""

from __future__ import annotations

from typing import Dict, List, Tuple

from .models import Issue, Result


def _sort_key(issue: Issue) -> Tuple[int, str, str, int]:
    return (-issue.weight, issue.filename, issue.type, issue.line)


def summarize(result: Result) -> Result:
    """Fold issues sharing a file and type into weighted parent issues.

    Groups with a single member stay as they are, so summarizing an already
    summarized result changes nothing. The returned score is the number of
    entries after grouping.
    """
    groups: Dict[Tuple[str, str], List[Issue]] = {}
    for issue in result.issues:
        groups.setdefault((issue.filename, issue.type), []).append(issue)

    issues: List[Issue] = []
    for (filename, issue_type), members in groups.items():
        if len(members) == 1:
            issues.append(members[0])
            continue
        children = sorted(members, key=lambda child: child.line)
        issues.append(
            Issue(
                package=children[0].package,
                filename=filename,
                line=children[0].line,
                type=issue_type,
                message=f"{len(children)} {issue_type} issues",
                weight=sum(child.weight for child in children),
                children=children,
            )
        )

    issues.sort(key=_sort_key)
    return Result(name=result.name, score=len(issues), issues=issues)


__all__ = ["summarize"]
