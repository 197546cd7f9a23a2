"""Tests for package logging configuration."""
from __future__ import annotations

import io
import logging

import pytest

import budget_blitz  # noqa: F401  (installs the package NullHandler)
from budget_blitz.logging_setup import configure_logging, resolve_level


@pytest.fixture
def pkg_logger():
    logger = logging.getLogger("budget_blitz")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def test_package_logger_is_silent_by_default(pkg_logger):
    assert any(isinstance(h, logging.NullHandler) for h in pkg_logger.handlers)


def test_configure_once(pkg_logger):
    stream = io.StringIO()
    configure_logging("DEBUG", stream=stream)
    configure_logging("ERROR", stream=io.StringIO())
    assert pkg_logger.level == logging.DEBUG
    assert pkg_logger.propagate is False
    stream_handlers = [
        h for h in pkg_logger.handlers
        if isinstance(h, logging.StreamHandler) and h.stream is stream
    ]
    assert len(stream_handlers) == 1
    logging.getLogger("budget_blitz.test").debug("hello %s", "there")
    assert "budget_blitz.test DEBUG hello there" in stream.getvalue()


def test_level_from_env(pkg_logger, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BUDGET_BLITZ_LOG_LEVEL", "warning")
    configure_logging(stream=io.StringIO())
    assert pkg_logger.level == logging.WARNING


def test_resolve_level():
    assert resolve_level(logging.ERROR) == logging.ERROR
    assert resolve_level("10") == 10
    assert resolve_level(" info ") == logging.INFO
    assert resolve_level("chatty") == logging.INFO


def test_resolve_level_unset_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("BUDGET_BLITZ_LOG_LEVEL", raising=False)
    assert resolve_level(None) == logging.INFO
