"""Documentation and naming of exported package-level declarations."""

from __future__ import annotations

from typing import Iterator, List

from tree_sitter import Node

from ..models import Issue, ModuleKind, PackageRecord
from ..parsing import (
    IDENTIFIER_TYPES,
    ParsedFile,
    doc_comment,
    is_exported,
    node_text,
    start_line,
)
from .base import new_issue

_DECLARATION_KINDS = {
    "type_declaration": "type",
    "const_declaration": "value",
    "var_declaration": "value",
}
_SPEC_TYPES = {"type_spec", "type_alias", "const_spec", "var_spec"}


def _iter_specs(declaration: Node) -> Iterator[Node]:
    # var groups are wrapped in a var_spec_list by newer grammars.
    for child in declaration.named_children:
        if child.type in _SPEC_TYPES:
            yield child
        elif child.type.endswith("_spec_list"):
            yield from _iter_specs(child)


def _spec_names(spec: Node) -> List[Node]:
    return [node for node in spec.children_by_field_name("name") if node.type in IDENTIFIER_TYPES]


def _check_exported(
    record: PackageRecord,
    parsed: ParsedFile,
    kind: str,
    name: str,
    line: int,
    documented: bool,
) -> Iterator[Issue]:
    if not documented:
        yield new_issue(
            record, parsed, line, "missing-doc", f"Exported {kind} '{name}' lacks a comment"
        )

    if record.kind is not ModuleKind.LIBRARY:
        return
    package = parsed.package_name.lower()
    if name.lower().startswith(package) and len(name) > len(package):
        yield new_issue(
            record,
            parsed,
            line,
            "naming",
            f"Exported {kind} '{name}' redundantly starts with package name",
        )


def check_exports(record: PackageRecord, parsed: ParsedFile) -> Iterator[Issue]:
    """Check exported types, functions, constants and variables.

    Methods are skipped. A spec inside a grouped declaration counts as
    documented when either the group or the spec itself has a doc comment.
    """
    for declaration in parsed.root.named_children:
        if declaration.type == "function_declaration":
            name = node_text(declaration.child_by_field_name("name"))
            if is_exported(name):
                yield from _check_exported(
                    record,
                    parsed,
                    "function",
                    name,
                    start_line(declaration),
                    doc_comment(declaration) is not None,
                )
            continue

        kind = _DECLARATION_KINDS.get(declaration.type)
        if kind is None:
            continue
        group_documented = doc_comment(declaration) is not None
        for spec in _iter_specs(declaration):
            documented = group_documented or doc_comment(spec) is not None
            for name_node in _spec_names(spec):
                name = node_text(name_node)
                if is_exported(name):
                    yield from _check_exported(
                        record, parsed, kind, name, start_line(name_node), documented
                    )


__all__ = ["check_exports"]
