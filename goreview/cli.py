"""CLI entrypoints for goreview commands."""

from __future__ import annotations

import argparse
import glob
import sys
from pathlib import Path
from typing import List, Sequence

from .config import ConfigError, ReviewConfig, load_config
from .inventory import WalkError
from .logging import configure_logging
from .models import ReviewOptions, Scope
from .registry import DuplicateCategoryError, default_registry
from .report import missed_target, render_results, sort_results, write_report

DEFAULT_TARGET_SCORE = 100


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goreview",
        description="Review Go source trees for documentation, structure and error-handling issues.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    review_parser = subparsers.add_parser(
        "review",
        help="Review Go packages and optionally write a YAML report.",
    )
    _add_verbose_option(review_parser, suppress_default=True)
    review_parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Root directories or glob patterns to review (defaults to current directory).",
    )
    review_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to .goreview.yml or its directory (defaults to current directory).",
    )
    review_parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Path to save the YAML review report.",
    )
    review_parser.add_argument(
        "--target-score",
        type=int,
        default=None,
        help=f"Maximum grouped issue count per category (default {DEFAULT_TARGET_SCORE}).",
    )
    review_parser.add_argument(
        "--category",
        dest="categories",
        action="append",
        default=None,
        help="Only run the named category. Repeat to select several.",
    )
    review_parser.add_argument(
        "--exclude",
        dest="exclude_paths",
        action="append",
        default=None,
        help="Gitignore-style pattern to skip. Repeat to add more.",
    )
    review_parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )

    categories_parser = subparsers.add_parser(
        "categories",
        help="List the available review categories.",
    )
    _add_verbose_option(categories_parser, suppress_default=True)

    return parser


def _expand_paths(patterns: Sequence[str]) -> List[str]:
    roots: List[str] = []
    for pattern in patterns:
        matches = sorted(glob.glob(pattern))
        # Unmatched literals pass through so the walker reports them.
        roots.extend(matches or [pattern])
    return roots


def _build_options(args: argparse.Namespace, config: ReviewConfig) -> ReviewOptions:
    target_score = args.target_score
    if target_score is None:
        target_score = config.target_score if config.target_score is not None else DEFAULT_TARGET_SCORE
    exclude_paths = list(config.exclude_paths)
    exclude_paths.extend(args.exclude_paths or [])
    return ReviewOptions(
        target_score=target_score,
        report=args.report or config.report,
        exclude_paths=tuple(exclude_paths),
    )


def _run_review(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    try:
        config = load_config(args.config or Path.cwd())
    except ConfigError as exc:
        parser.exit(2, f"{exc}\n")

    options = _build_options(args, config)
    enabled = args.categories or config.categories.enabled or None
    scope = Scope(root_paths=tuple(_expand_paths(args.paths)))

    try:
        registry = default_registry(enabled)
    except ValueError as exc:
        parser.exit(2, f"goreview review failed: {exc}\n")

    try:
        results = registry.run(scope, options)
    except (WalkError, DuplicateCategoryError) as exc:
        parser.exit(2, f"goreview review failed: {exc}\n")

    results = sort_results(results)
    for line in render_results(results):
        print(line)
    total = sum(issue.weight for result in results for issue in result.issues)
    print(f"Total issues found: {total}")

    if options.report is not None:
        write_report(options.report, results)
        print(f"Generated {options.report}")

    failures = missed_target(results, options.target_score)
    if failures:
        print(f"The following missed the target of {options.target_score}:")
        for failure in failures:
            print(f"- {failure.name}: {failure.score}")
        parser.exit(1, f"review failed with {len(failures)} categories over target\n")


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for goreview commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose), log_file=getattr(args, "log_file", None)
    )

    if args.command == "review":
        _run_review(parser, args)
    elif args.command == "categories":
        for category in default_registry().categories:
            print(f"{category.name}: {category.description}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(2, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
