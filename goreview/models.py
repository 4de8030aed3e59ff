"""Core data models shared across goreview components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


class ModuleKind(str, Enum):
    """Classification of a Go package discovered while walking a tree."""

    ENTRY_POINT = "entrypoint"
    LIBRARY = "library"
    TEST = "test"


@dataclass(frozen=True)
class PackageRecord:
    """One distinct Go package within a directory."""

    directory: str
    name: str
    kind: ModuleKind

    @property
    def key(self) -> Tuple[str, str]:
        return (self.directory, self.name)


@dataclass
class Issue:
    """A single finding emitted by a diagnostic rule.

    ``children`` stays empty until the aggregator folds several issues of the
    same file and type into one parent entry.
    """

    package: str
    filename: str
    line: int
    type: str
    message: str
    weight: int = 1
    children: List["Issue"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "package": self.package,
            "filename": self.filename,
            "line": self.line,
            "type": self.type,
            "message": self.message,
            "weight": self.weight,
        }
        if self.children:
            payload["children"] = [child.to_dict() for child in self.children]
        return payload


@dataclass
class Result:
    """Output of one review category."""

    name: str
    score: int
    issues: List[Issue] = field(default_factory=list)

    def passed(self, target_score: int) -> bool:
        """Return True when the grouped issue count stays within the target.

        Score counts issues, so lower is better: a score equal to the target
        passes and only a score above it misses.
        """
        return self.score <= target_score

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "score": self.score,
            "top_issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass(frozen=True)
class Scope:
    """Root paths (or glob patterns) to review."""

    root_paths: Tuple[str, ...] = (".",)


@dataclass(frozen=True)
class ReviewOptions:
    """Per-run settings supplied by the caller."""

    target_score: int = 100
    report: Optional[Path] = None
    exclude_paths: Tuple[str, ...] = ()


__all__ = [
    "Issue",
    "ModuleKind",
    "PackageRecord",
    "Result",
    "ReviewOptions",
    "Scope",
]
