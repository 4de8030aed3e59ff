"""Go source tree walking and package inventory building."""

from __future__ import annotations

import glob
import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .logging import get_logger
from .models import ModuleKind, PackageRecord
from .parsing import (
    ENTRY_POINT_PACKAGE,
    SOURCE_SUFFIX,
    TEST_SUFFIX,
    GoParseError,
    GoParser,
)

_LOGGER = get_logger("inventory")

# Directories the go tool ignores, besides those starting with "." or "_".
_EXCLUDED_DIRS = {
    "vendor",
    "testdata",
}
_IGNORED_DIR_PREFIXES = (".", "_")

_GLOB_CHARS = set("*?[")

PackageKey = Tuple[str, str]


class WalkError(RuntimeError):
    """Raised when a review root cannot be enumerated."""


@dataclass
class ExcludeRule:
    """A gitignore-style exclusion pattern relative to a review root."""

    pattern: str
    directory_only: bool
    anchored: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            if fnmatchcase(rel_path, self.pattern):
                return True
            return False

        for part in rel_path.split("/"):
            if fnmatchcase(part, self.pattern):
                return True
        return False


def _build_exclude_rule(pattern: str) -> ExcludeRule | None:
    pattern = pattern.strip()
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return ExcludeRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        has_slash="/" in pattern,
    )


def _build_exclude_rules(patterns: Iterable[str]) -> List[ExcludeRule]:
    rules: List[ExcludeRule] = []
    for pattern in patterns:
        rule = _build_exclude_rule(pattern)
        if rule is not None:
            rules.append(rule)
    return rules


def _should_exclude(rel_path: str, is_dir: bool, rules: Sequence[ExcludeRule]) -> bool:
    return any(rule.matches(rel_path, is_dir) for rule in rules)


def classify(path: Path, package_name: str) -> ModuleKind:
    """Return the kind of package a file contributes to."""
    if path.name.endswith(TEST_SUFFIX):
        return ModuleKind.TEST
    if package_name == ENTRY_POINT_PACKAGE:
        return ModuleKind.ENTRY_POINT
    return ModuleKind.LIBRARY


class Inventory:
    """Deduplicated packages discovered under the review roots.

    Records keep insertion order. Every parsed file is attached to its
    ``(directory, package)`` key, including files whose key was already
    recorded by an earlier file.
    """

    def __init__(self) -> None:
        self._records: Dict[PackageKey, PackageRecord] = {}
        self._files: Dict[PackageKey, List[Path]] = {}

    def add(self, record: PackageRecord, path: Path) -> bool:
        """Attach ``path`` to its package; return True when the record is new."""
        files = self._files.setdefault(record.key, [])
        if path not in files:
            files.append(path)
        if record.key in self._records:
            return False
        self._records[record.key] = record
        return True

    def keys(self) -> List[PackageKey]:
        return list(self._records)

    def files_for(self, record: PackageRecord) -> List[Path]:
        return list(self._files.get(record.key, []))

    def __iter__(self) -> Iterator[PackageRecord]:
        return iter(list(self._records.values()))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, PackageRecord):
            return item.key in self._records
        return item in self._records


def expand_roots(patterns: Iterable[Union[str, os.PathLike]]) -> List[Path]:
    """Expand glob patterns; literal roots must exist."""
    roots: List[Path] = []
    for pattern in patterns:
        text = os.fspath(pattern)
        if _GLOB_CHARS.intersection(text):
            roots.extend(Path(match) for match in sorted(glob.glob(text)))
            continue
        path = Path(text).expanduser()
        if not path.exists():
            raise WalkError(f"Review root not found: {text}")
        roots.append(path)
    return roots


def _is_candidate(name: str) -> bool:
    return name.endswith(SOURCE_SUFFIX) and not name.startswith(".")


def _raise_walk_error(exc: OSError) -> None:
    raise WalkError(f"Failed to walk {exc.filename}: {exc.strerror or exc}") from exc


def _iter_source_files(root: Path, rules: Sequence[ExcludeRule]) -> Iterator[Path]:
    if root.is_file():
        if _is_candidate(root.name):
            yield root
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        kept_dirs = []
        for name in sorted(dirnames):
            if name.startswith(_IGNORED_DIR_PREFIXES) or name in _EXCLUDED_DIRS:
                continue
            rel_path = f"{rel_dir}/{name}" if rel_dir else name
            if _should_exclude(rel_path, True, rules):
                continue
            kept_dirs.append(name)
        dirnames[:] = kept_dirs

        for filename in sorted(filenames):
            if not _is_candidate(filename):
                continue
            rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
            if _should_exclude(rel_path, False, rules):
                continue
            yield current_dir / filename


def build_inventory(
    roots: Iterable[Union[str, os.PathLike]],
    *,
    exclude_paths: Sequence[str] = (),
    parser: Optional[GoParser] = None,
) -> Inventory:
    """Walk ``roots`` and return the packages found there.

    Files that cannot be read or parsed are skipped. Failing to enumerate a
    root or one of its directories raises ``WalkError``.
    """
    parser = parser or GoParser()
    rules = _build_exclude_rules(exclude_paths)
    inventory = Inventory()

    for root in expand_roots(roots):
        for path in _iter_source_files(root, rules):
            try:
                parsed = parser.parse_path(path)
            except (OSError, GoParseError) as exc:
                _LOGGER.debug("Skipping %s: %s", path, exc)
                continue

            record = PackageRecord(
                directory=str(path.parent),
                name=parsed.package_name,
                kind=classify(path, parsed.package_name),
            )
            if inventory.add(record, path):
                _LOGGER.debug(
                    "Found %s package %s in %s", record.kind.value, record.name, record.directory
                )

    return inventory


__all__ = [
    "ExcludeRule",
    "Inventory",
    "WalkError",
    "build_inventory",
    "classify",
    "expand_roots",
]
