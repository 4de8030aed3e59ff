"""Rule-based review of Go source trees."""

from .aggregate import summarize
from .categories import Category, ReviewCancelled, RuleCategory, RuleIOError, discover_categories
from .config import ConfigError, ReviewConfig, load_config
from .inventory import Inventory, WalkError, build_inventory
from .models import Issue, ModuleKind, PackageRecord, Result, ReviewOptions, Scope
from .parsing import GoParseError, GoParser, ParsedFile
from .registry import DuplicateCategoryError, Registry, default_registry

__all__ = [
    "Category",
    "ConfigError",
    "DuplicateCategoryError",
    "GoParseError",
    "GoParser",
    "Inventory",
    "Issue",
    "ModuleKind",
    "PackageRecord",
    "ParsedFile",
    "Registry",
    "Result",
    "ReviewCancelled",
    "ReviewConfig",
    "ReviewOptions",
    "RuleCategory",
    "RuleIOError",
    "Scope",
    "WalkError",
    "build_inventory",
    "default_registry",
    "discover_categories",
    "load_config",
    "summarize",
]
