"""Companion ``Must`` constructors for fallible ``New``/``Parse`` functions."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from tree_sitter import Node

from ..models import Issue, PackageRecord
from ..parsing import ParsedFile, is_exported, node_text, start_line
from .base import new_issue

CONSTRUCTOR_PREFIXES = ("New", "Parse")
MUST_PREFIX = "Must"


def _is_error_type(node: Optional[Node]) -> bool:
    return node is not None and node.type == "type_identifier" and node_text(node) == "error"


def returns_error(function: Node) -> bool:
    """Return True when ``error`` appears among the function's results."""
    result = function.child_by_field_name("result")
    if result is None:
        return False
    if result.type != "parameter_list":
        return _is_error_type(result)
    for parameter in result.named_children:
        if _is_error_type(parameter.child_by_field_name("type")):
            return True
    return False


def must_names(name: str) -> Tuple[str, ...]:
    """Return the accepted companion names for constructor ``name``.

    Both ``MustNewThing`` and ``MustThing`` satisfy ``NewThing``.
    """
    names = [MUST_PREFIX + name]
    for prefix in CONSTRUCTOR_PREFIXES:
        if name.startswith(prefix) and len(name) > len(prefix):
            names.append(MUST_PREFIX + name[len(prefix):])
            break
    return tuple(names)


def check_must_variants(record: PackageRecord, parsed: ParsedFile) -> Iterator[Issue]:
    functions = [
        child for child in parsed.root.named_children if child.type == "function_declaration"
    ]
    defined = {node_text(function.child_by_field_name("name")) for function in functions}

    for function in functions:
        name = node_text(function.child_by_field_name("name"))
        if not is_exported(name) or not name.startswith(CONSTRUCTOR_PREFIXES):
            continue
        if not returns_error(function):
            continue
        candidates = must_names(name)
        if defined.intersection(candidates):
            continue
        yield new_issue(
            record,
            parsed,
            start_line(function),
            "must-variant",
            f"Exported function '{name}' has no corresponding '{candidates[0]}'",
        )


__all__ = ["CONSTRUCTOR_PREFIXES", "check_must_variants", "must_names", "returns_error"]
