"""Logging for the review engine and its command line."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional

ROOT_LOGGER = "goreview"

CONSOLE_FORMAT = "[goreview] %(levelname)s %(message)s"
# Verbose output names the emitting component, e.g. goreview.inventory
# for skipped files or goreview.registry for failed categories.
VERBOSE_CONSOLE_FORMAT = "[goreview] %(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the logger for an engine component such as ``"inventory"``.

    Fully qualified names (``"goreview.inventory"``) are accepted unchanged.
    """
    if not component or component == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if component.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(component)
    return logging.getLogger(f"{ROOT_LOGGER}.{component}")


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Route goreview log records to the console and optionally to ``log_file``.

    Calling this again replaces the handlers of the previous call, so repeated
    CLI invocations in one process do not duplicate output. The log file's
    parent directory is created when missing.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    _drop_handlers(logger)

    console = logging.StreamHandler(stream)
    console.setLevel(level)
    console.setFormatter(
        logging.Formatter(VERBOSE_CONSOLE_FORMAT if verbose else CONSOLE_FORMAT)
    )
    logger.addHandler(console)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_path, encoding="utf-8")
        # The file keeps debug detail even when the console stays quiet.
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(sink)
        logger.setLevel(logging.DEBUG)

    return logger


__all__ = [
    "CONSOLE_FORMAT",
    "FILE_FORMAT",
    "ROOT_LOGGER",
    "VERBOSE_CONSOLE_FORMAT",
    "configure_logging",
    "get_logger",
]
