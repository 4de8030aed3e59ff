"""Review category implementations and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Iterable, List, Sequence, Set

from ..rules import BUILTIN_RULES
from .base import Category, ReviewCancelled, RuleCategory, RuleIOError, check_cancelled

_ENTRY_POINT_GROUP = "goreview.categories"


def _rule_category(name: str, description: str, *rule_names: str) -> Callable[[], Category]:
    def _factory() -> Category:
        return RuleCategory(name, [BUILTIN_RULES[rule] for rule in rule_names], description)

    return _factory


_BUILTIN_FACTORIES: dict[str, Callable[[], Category]] = {
    "go_project_hygiene": _rule_category(
        "go_project_hygiene", "Leftover TODO and not-implemented markers.", "hints"
    ),
    "go_documentation": _rule_category(
        "go_documentation",
        "Doc comments, exported naming and comment density.",
        "exports",
        "comment-ratio",
    ),
    "go_code_structure": _rule_category(
        "go_code_structure", "Function size limits.", "size"
    ),
    "go_error_handling": _rule_category(
        "go_error_handling", "Must variants for fallible constructors.", "must-variant"
    ),
}


def discover_categories(enabled: Sequence[str] | None = None) -> List[Category]:
    """Return instantiated categories, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}

    categories: List[Category] = []
    seen: Set[str] = set()

    def _add(name: str, factory: Callable[[], Category]) -> None:
        key = name.lower()
        if enabled_set is not None and key not in enabled_set:
            return
        if key in seen:
            return
        instance = factory()
        if not isinstance(instance, Category):
            raise TypeError(f"Category factory for '{name}' did not return a Category instance")
        categories.append(instance)
        seen.add(key)
        if enabled_set is not None:
            enabled_set.discard(key)

    for name, factory in _BUILTIN_FACTORIES.items():
        _add(name, factory)

    for entry in _iter_entry_points():
        name = entry.name
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - defensive guard
            raise RuntimeError(f"Failed to load category entry point '{name}': {exc}") from exc

        def _factory(obj: object = loaded) -> Category:
            return _coerce_category(obj)

        _add(name, _factory)

    if enabled_set:
        missing = ", ".join(sorted(enabled_set))
        raise ValueError(f"Unknown categories requested: {missing}")

    return categories


def _coerce_category(obj: object) -> Category:
    if isinstance(obj, Category):
        return obj
    if isinstance(obj, type) and issubclass(obj, Category):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, Category):
            return instance
    raise TypeError("Category entry point must be a Category subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "Category",
    "ReviewCancelled",
    "RuleCategory",
    "RuleIOError",
    "check_cancelled",
    "discover_categories",
]
