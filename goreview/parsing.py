"""Tree-sitter powered parsing of Go source files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

GO_LANGUAGE = Language(tree_sitter_go.language())

SOURCE_SUFFIX = ".go"
TEST_SUFFIX = "_test.go"
ENTRY_POINT_PACKAGE = "main"

FUNCTION_TYPES = frozenset({"function_declaration", "method_declaration"})
STRING_TYPES = frozenset({"interpreted_string_literal", "raw_string_literal"})
IDENTIFIER_TYPES = frozenset(
    {"identifier", "field_identifier", "type_identifier", "package_identifier"}
)
# Statement terminators appear as anonymous siblings between declarations.
_TERMINATORS = frozenset({"\n", ";", "\0"})


class GoParseError(RuntimeError):
    """Raised when a Go file does not yield a usable syntax tree."""


@dataclass
class ParsedFile:
    """A Go source file together with its syntax tree."""

    path: Path
    source: bytes
    tree: Tree
    package_name: str

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def is_test(self) -> bool:
        return self.path.name.endswith(TEST_SUFFIX)


class GoParser:
    """Parses Go files into tree-sitter trees."""

    def __init__(self) -> None:
        self._parser: Optional[Parser] = None

    def parse_path(self, path: Path) -> ParsedFile:
        """Read and parse ``path``.

        ``OSError`` from reading propagates so callers can decide whether an
        unreadable file is fatal; syntax problems raise ``GoParseError``.
        """
        source = path.read_bytes()
        return self.parse_source(source, path)

    def parse_source(self, source: bytes, path: Path) -> ParsedFile:
        tree = self._get_parser().parse(source)
        root = tree.root_node
        if root.has_error:
            raise GoParseError(f"{path}: syntax error")
        package_name = _package_name(root)
        if not package_name:
            raise GoParseError(f"{path}: missing package clause")
        return ParsedFile(path=path, source=source, tree=tree, package_name=package_name)

    def _get_parser(self) -> Parser:
        if self._parser is None:
            self._parser = Parser(GO_LANGUAGE)
        return self._parser


def _package_name(root: Node) -> Optional[str]:
    for child in root.named_children:
        if child.type != "package_clause":
            continue
        for part in child.named_children:
            if part.type in {"package_identifier", "identifier"}:
                return node_text(part)
    return None


def node_text(node: Optional[Node]) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def start_line(node: Node) -> int:
    """Return the 1-based line on which ``node`` starts."""
    return node.start_point[0] + 1


def end_line(node: Node) -> int:
    return node.end_point[0] + 1


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants in source order."""
    stack: List[Node] = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def comments(root: Node) -> List[Node]:
    return [node for node in walk(root) if node.type == "comment"]


def top_level_functions(root: Node) -> Iterator[Node]:
    for child in root.named_children:
        if child.type in FUNCTION_TYPES:
            yield child


def is_exported(name: str) -> bool:
    return bool(name) and name[0].isupper()


def _previous(node: Node) -> Optional[Node]:
    prev = node.prev_sibling
    while prev is not None and prev.type in _TERMINATORS:
        prev = prev.prev_sibling
    return prev


def doc_comment(node: Node) -> Optional[Node]:
    """Return the comment directly above ``node`` with no blank line between.

    A comment trailing code on its own line belongs to that code and is not a
    doc comment.
    """
    prev = _previous(node)
    if prev is None or prev.type != "comment":
        return None
    if node.start_point[0] - prev.end_point[0] != 1:
        return None
    before = _previous(prev)
    if before is not None and before.type != "comment" and before.end_point[0] == prev.start_point[0]:
        return None
    return prev


__all__ = [
    "ENTRY_POINT_PACKAGE",
    "GO_LANGUAGE",
    "GoParseError",
    "GoParser",
    "ParsedFile",
    "SOURCE_SUFFIX",
    "TEST_SUFFIX",
    "comments",
    "doc_comment",
    "end_line",
    "is_exported",
    "node_text",
    "start_line",
    "top_level_functions",
    "walk",
]
