"""Diagnostic channel shared by every module of the package.

Failed operations are logged on the ``webgl_utilities`` logger and returned as
failed :class:`~webgl_utilities.result.LinearResult` values. No handlers are
installed at import time; applications opt in through :func:`setup_logging`.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, TypeVar, Union

from .config import UtilityConfig
from .result import LinearError, LinearResult

LOGGER = logging.getLogger("webgl_utilities")

T = TypeVar("T")


def report(operation: str, error: LinearError) -> LinearResult[T]:
    """Log ``error`` against ``operation`` and wrap it in a failed result."""

    LOGGER.error("%s(): %s", operation, error)
    return LinearResult.failure(error)


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[str] = None,
    config: Optional[UtilityConfig] = None,
) -> logging.Logger:
    """Attach a console handler (and optionally a file handler) to the package logger.

    An explicit ``level`` wins over ``config.log_level``; with neither the
    logger runs at INFO. Calling it again replaces the previous handlers
    instead of stacking them.
    """

    if level is None:
        level = config.logging_level if config is not None else logging.INFO
    logger = LOGGER
    logger.setLevel(level)
    if logger.handlers:
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger


def format_matrix(matrix) -> str:
    """Render each matrix row on its own line with space separated entries."""

    return "\n".join(" ".join(repr(value) for value in row) for row in matrix.rows)


def print_matrix(matrix, stream: Optional[TextIO] = None) -> None:
    target = stream if stream is not None else sys.stdout
    target.write(format_matrix(matrix) + "\n")


__all__ = ["LOGGER", "report", "setup_logging", "format_matrix", "print_matrix"]
