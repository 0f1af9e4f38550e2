"""Tests for shared observability logging."""

import logging
import time

import pytest

from jobboard_engine.observability.logging import get_logger


def test_get_logger_formats_utc_timestamps(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    fixed = time.struct_time((2020, 1, 2, 3, 4, 5, 3, 2, 0))

    def fake_gmtime(_: float | None = None) -> time.struct_time:
        return fixed

    monkeypatch.setattr(time, "gmtime", fake_gmtime)

    name = "jobboard_engine.test.logging"
    logger = get_logger(name)
    logger.info("Hello")

    captured = capsys.readouterr()
    assert "2020-01-02T03:04:05+0000 INFO jobboard_engine.test.logging: Hello" in captured.err


def test_get_logger_is_singleton_per_name() -> None:
    name = "jobboard_engine.test.logging.singleton"
    logger = get_logger(name)
    logger_again = get_logger(name)

    assert logger is logger_again
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    assert logger.propagate is False


def test_get_logger_reads_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOBBOARD_LOG_LEVEL", "warning")

    logger = get_logger("jobboard_engine.test.logging.level")

    assert logger.level == logging.WARNING


def test_get_logger_ignores_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOBBOARD_LOG_LEVEL", "chatty")

    logger = get_logger("jobboard_engine.test.logging.unknown_level")

    assert logger.level == logging.INFO
