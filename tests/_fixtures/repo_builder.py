"""Helper utilities for constructing temporary Go trees in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from goreview.inventory import Inventory, build_inventory
from goreview.models import ModuleKind, PackageRecord
from goreview.parsing import GoParser, ParsedFile


def go_source(content: str) -> str:
    """Dedent an inline Go snippet the same way ``RepoBuilder.write`` does."""
    return textwrap.dedent(content).lstrip("\n")


def parse_snippet(content: str, filename: str = "widget.go") -> ParsedFile:
    """Parse an inline Go snippet without touching the filesystem."""
    source = go_source(content).encode("utf-8")
    return GoParser().parse_source(source, Path(filename))


def record_for(
    parsed: ParsedFile, kind: ModuleKind = ModuleKind.LIBRARY
) -> PackageRecord:
    return PackageRecord(directory=str(parsed.path.parent), name=parsed.package_name, kind=kind)


class RepoBuilder:
    """Utility for writing files into a throwaway Go tree and re-walking it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "repo"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the tree."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(go_source(content), encoding="utf-8")

    def inventory(self, **kwargs) -> Inventory:
        """Return a fresh inventory of the tree contents."""
        return build_inventory([str(self.root)], **kwargs)

    def path(self) -> Path:
        """Return the tree root path."""
        return self.root


__all__ = ["RepoBuilder", "go_source", "parse_snippet", "record_for"]
