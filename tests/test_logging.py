"""Tests for goreview.logging."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from goreview.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _restore_goreview_logger():
    logger = logging.getLogger("goreview")
    saved = (logger.level, logger.propagate, list(logger.handlers))
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(saved[0])
    logger.propagate = saved[1]
    for handler in saved[2]:
        logger.addHandler(handler)


def test_get_logger_places_components_under_goreview() -> None:
    assert get_logger().name == "goreview"
    assert get_logger("inventory").name == "goreview.inventory"
    assert get_logger("goreview.registry").name == "goreview.registry"


def test_verbose_console_names_the_component() -> None:
    stream = io.StringIO()
    configure_logging(verbose=True, stream=stream)

    get_logger("inventory").debug("Skipping %s", "broken.go")
    get_logger("registry").error("Category %s failed", "go_documentation")

    lines = stream.getvalue().splitlines()
    assert lines == [
        "[goreview] DEBUG goreview.inventory: Skipping broken.go",
        "[goreview] ERROR goreview.registry: Category go_documentation failed",
    ]


def test_quiet_console_hides_debug_and_component() -> None:
    stream = io.StringIO()
    configure_logging(stream=stream)

    get_logger("inventory").debug("Skipping broken.go")
    get_logger("registry").info("Reviewing 2 packages")

    assert stream.getvalue().splitlines() == ["[goreview] INFO Reviewing 2 packages"]


def test_reconfiguring_replaces_previous_handlers() -> None:
    first = io.StringIO()
    second = io.StringIO()
    configure_logging(stream=first)
    logger = configure_logging(stream=second)

    get_logger("registry").info("once")

    assert len(logger.handlers) == 1
    assert first.getvalue() == ""
    assert second.getvalue().count("once") == 1


def test_log_file_keeps_debug_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "review.log"
    stream = io.StringIO()
    logger = configure_logging(log_file=log_file, stream=stream)

    get_logger("inventory").debug("Skipping broken.go")
    for handler in logger.handlers:
        handler.flush()

    assert "goreview.inventory: Skipping broken.go" in log_file.read_text(encoding="utf-8")
    assert stream.getvalue() == ""
