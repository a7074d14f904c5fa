"""Tests for the result type and the diagnostic channel."""
from __future__ import annotations

import io
import logging

import pytest

from webgl_utilities.config import UtilityConfig
from webgl_utilities.diagnostics import LOGGER, format_matrix, print_matrix, report, setup_logging
from webgl_utilities.matrix import mat2
from webgl_utilities.result import (
    DegenerateGeometryError,
    InvalidArgumentError,
    LinearError,
    LinearResult,
    ShapeMismatchError,
    SingularMatrixError,
)


@pytest.fixture
def restore_logger():
    level = LOGGER.level
    yield LOGGER
    for handler in list(LOGGER.handlers):
        handler.close()
        LOGGER.removeHandler(handler)
    LOGGER.setLevel(level)


def test_result_success_and_failure() -> None:
    success = LinearResult.success(3.0)
    assert success.ok
    assert success.unwrap() == 3.0
    failure: LinearResult[float] = LinearResult.failure(ShapeMismatchError("bad"))
    assert not failure.ok
    assert failure.value_or(-1.0) == -1.0
    with pytest.raises(ShapeMismatchError, match="bad"):
        failure.unwrap()


@pytest.mark.parametrize(
    "error_type",
    [ShapeMismatchError, InvalidArgumentError, SingularMatrixError, DegenerateGeometryError],
)
def test_error_taxonomy(error_type) -> None:
    assert issubclass(error_type, LinearError)
    assert issubclass(error_type, ValueError)


def test_report_logs_and_wraps(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="webgl_utilities"):
        result = report("demo", InvalidArgumentError("nope"))
    assert isinstance(result.error, InvalidArgumentError)
    assert caplog.records[-1].name == "webgl_utilities"
    assert caplog.records[-1].getMessage() == "demo(): nope"


def test_format_and_print_matrix() -> None:
    assert format_matrix(mat2(1, 2, 3, 4)) == "1.0 2.0\n3.0 4.0"
    stream = io.StringIO()
    print_matrix(mat2(), stream)
    assert stream.getvalue() == "1.0 0.0\n0.0 1.0\n"


def test_setup_logging_replaces_handlers(restore_logger, tmp_path) -> None:
    config = UtilityConfig(log_level="DEBUG")
    setup_logging(config.logging_level)
    logger = setup_logging(config.logging_level, log_file=str(tmp_path / "diagnostics.log"))
    assert logger is LOGGER
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    report("demo", ShapeMismatchError("sizes differ"))
    for handler in logger.handlers:
        handler.flush()
    assert "demo(): sizes differ" in (tmp_path / "diagnostics.log").read_text(encoding="utf-8")


def test_setup_logging_takes_level_from_config(restore_logger) -> None:
    logger = setup_logging(config=UtilityConfig(log_level="ERROR"))
    assert logger.level == logging.ERROR
    assert all(handler.level == logging.ERROR for handler in logger.handlers)
    assert setup_logging("DEBUG", config=UtilityConfig(log_level="ERROR")).level == logging.DEBUG
    assert setup_logging().level == logging.INFO
