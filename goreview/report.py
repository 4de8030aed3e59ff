"""Result ordering, pass/fail evaluation and report serialization."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

import yaml

from .models import Issue, Result


def sort_results(results: Iterable[Result]) -> List[Result]:
    """Order results by score ascending, then by name."""
    return sorted(results, key=lambda result: (result.score, result.name))


def missed_target(results: Iterable[Result], target_score: int) -> List[Result]:
    return [result for result in results if not result.passed(target_score)]


def _render_issue(issue: Issue, depth: int) -> List[str]:
    indent = "  " * (depth + 1)
    lines = [f"{indent}- {issue.filename}[{issue.line}]: {issue.type} {issue.message}"]
    for child in issue.children:
        lines.extend(_render_issue(child, depth + 1))
    return lines


def render_results(results: Sequence[Result]) -> List[str]:
    lines: List[str] = []
    for result in results:
        lines.append(f"{result.name}: {result.score}")
        for issue in result.issues:
            lines.extend(_render_issue(issue, 0))
    return lines


def write_report(path: Path, results: Sequence[Result]) -> Path:
    """Serialize ``results`` as a YAML list of ``name``/``score``/``top_issues``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    document = [result.to_dict() for result in results]
    path.write_text(
        yaml.safe_dump(document, sort_keys=False, allow_unicode=True), encoding="utf-8"
    )
    return path


__all__ = ["missed_target", "render_results", "sort_results", "write_report"]
