"""Base classes for review categories."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..aggregate import summarize
from ..inventory import Inventory, build_inventory
from ..logging import get_logger
from ..models import Issue, Result, ReviewOptions, Scope
from ..parsing import GoParseError, GoParser
from ..rules import Rule

_LOGGER = get_logger("categories")


class ReviewCancelled(RuntimeError):
    """Raised when a review run is cancelled before a category starts."""


class RuleIOError(RuntimeError):
    """Raised when a category cannot re-read one of the files it reviews."""

    def __init__(self, category: str, path: Path, cause: OSError) -> None:
        super().__init__(f"{category}: cannot read {path}: {cause.strerror or cause}")
        self.category = category
        self.path = path


def check_cancelled(cancel: Optional[threading.Event]) -> None:
    if cancel is not None and cancel.is_set():
        raise ReviewCancelled("review cancelled")


class Category(ABC):
    """Contract for named review units that turn an inventory into results."""

    name: str = ""
    description: str = ""

    @abstractmethod
    def run(
        self,
        scope: Scope,
        options: ReviewOptions,
        *,
        inventory: Optional[Inventory] = None,
        cancel: Optional[threading.Event] = None,
    ) -> List[Result]:
        """Review the packages in ``scope`` and return this category's results."""


class RuleCategory(Category):
    """A category that applies a fixed set of rules to every Go file."""

    def __init__(
        self,
        name: str,
        rules: Union[Sequence[Rule], Mapping[str, Rule]],
        description: str = "",
    ) -> None:
        self.name = name
        self.description = description
        self.rules: List[Rule] = list(rules.values()) if isinstance(rules, Mapping) else list(rules)

    def run(
        self,
        scope: Scope,
        options: ReviewOptions,
        *,
        inventory: Optional[Inventory] = None,
        cancel: Optional[threading.Event] = None,
    ) -> List[Result]:
        check_cancelled(cancel)

        parser = GoParser()
        if inventory is None:
            inventory = build_inventory(
                scope.root_paths, exclude_paths=options.exclude_paths, parser=parser
            )
        _LOGGER.debug("Running %s over %d packages", self.name, len(inventory))

        issues: List[Issue] = []
        for record in inventory:
            for path in inventory.files_for(record):
                try:
                    parsed = parser.parse_path(path)
                except GoParseError as exc:
                    _LOGGER.debug("Skipping %s: %s", path, exc)
                    continue
                except OSError as exc:
                    raise RuleIOError(self.name, path, exc) from exc
                for rule in self.rules:
                    issues.extend(rule(record, parsed))

        raw = Result(name=self.name, score=len(issues), issues=issues)
        return [summarize(raw)]


__all__ = [
    "Category",
    "ReviewCancelled",
    "RuleCategory",
    "RuleIOError",
    "check_cancelled",
]
