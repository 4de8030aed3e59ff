"""Explicit registry that runs review categories."""

from __future__ import annotations

import threading
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .categories import Category, RuleIOError, check_cancelled, discover_categories
from .inventory import build_inventory
from .logging import get_logger
from .models import Result, ReviewOptions, Scope

_LOGGER = get_logger("registry")


class DuplicateCategoryError(RuntimeError):
    """Raised when two categories report results under the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"duplicate result found: {name}")
        self.name = name


class Registry:
    """Holds review categories and runs them in registration order."""

    def __init__(self, categories: Iterable[Category] = ()) -> None:
        self._categories: List[Category] = []
        for category in categories:
            self.register(category)

    @property
    def categories(self) -> Tuple[Category, ...]:
        return tuple(self._categories)

    def register(self, category: Category) -> None:
        self._categories.append(category)

    def find_by_name(self, name: str) -> Optional[Category]:
        for category in self._categories:
            if category.name == name:
                return category
        return None

    def run(
        self,
        scope: Scope,
        options: ReviewOptions,
        *,
        cancel: Optional[threading.Event] = None,
    ) -> List[Result]:
        """Run every category over one shared inventory.

        A category whose files cannot be re-read is logged and left out.
        Duplicate result names abort the whole run without partial output.
        """
        check_cancelled(cancel)
        inventory = build_inventory(scope.root_paths, exclude_paths=options.exclude_paths)
        _LOGGER.info("Reviewing %d packages with %d categories", len(inventory), len(self._categories))

        results: List[Result] = []
        seen: Set[str] = set()
        for category in self._categories:
            try:
                produced = category.run(scope, options, inventory=inventory, cancel=cancel)
            except RuleIOError as exc:
                _LOGGER.error("Category %s failed: %s", category.name, exc)
                continue
            for result in produced:
                if result.name in seen:
                    raise DuplicateCategoryError(result.name)
                seen.add(result.name)
                results.append(result)
        return results


def default_registry(enabled: Sequence[str] | None = None) -> Registry:
    """Build a registry holding the built-in and plugin categories."""
    return Registry(discover_categories(enabled))


__all__ = ["DuplicateCategoryError", "Registry", "default_registry"]
