"""Built-in diagnostic rules for Go sources."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .base import Rule, new_issue
from .comments import check_comment_ratio
from .exports import check_exports
from .hints import check_hints
from .must import check_must_variants
from .size import check_function_size

BUILTIN_RULES: Mapping[str, Rule] = MappingProxyType(
    {
        "hints": check_hints,
        "exports": check_exports,
        "size": check_function_size,
        "comment-ratio": check_comment_ratio,
        "must-variant": check_must_variants,
    }
)


__all__ = [
    "BUILTIN_RULES",
    "Rule",
    "check_comment_ratio",
    "check_exports",
    "check_function_size",
    "check_hints",
    "check_must_variants",
    "new_issue",
]
