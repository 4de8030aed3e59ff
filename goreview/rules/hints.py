"""Flags leftover TODO and not-implemented markers."""

from __future__ import annotations

from typing import Iterator, Optional

from ..models import Issue, PackageRecord
from ..parsing import IDENTIFIER_TYPES, STRING_TYPES, ParsedFile, node_text, start_line, walk
from .base import new_issue

HINTS = ("todo", "not implemented", "notimplemented")

_SCANNED_TYPES = IDENTIFIER_TYPES | STRING_TYPES | {"comment"}


def _find_hint(text: str) -> Optional[str]:
    lowered = text.lower()
    for hint in HINTS:
        if hint in lowered:
            return hint
    return None


def check_hints(record: PackageRecord, parsed: ParsedFile) -> Iterator[Issue]:
    """Emit one ``todo`` issue per comment, string literal or identifier carrying a hint."""
    for node in walk(parsed.root):
        if node.type not in _SCANNED_TYPES:
            continue
        text = node_text(node)
        if _find_hint(text) is None:
            continue
        yield new_issue(record, parsed, start_line(node), "todo", text.strip())


__all__ = ["HINTS", "check_hints"]
