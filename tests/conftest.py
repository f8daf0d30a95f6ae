"""Pytest configuration and shared fixtures for stepanim tests."""

from __future__ import annotations

import logging

import pytest

from stepanim.animation.symbol import Symbol
from stepanim.utils.time import ManualClock


def pytest_configure(config):
    """Register all project markers to avoid warnings when ini isn't loaded."""
    markers = [
        ("unit", "marks tests as unit tests"),
        ("animation", "marks tests as animation engine tests"),
        ("config", "marks tests as configuration tests"),
        ("cli", "marks tests as CLI tests"),
        ("interface", "marks tests as rendering adapter tests"),
        ("property", "marks tests as property-based tests"),
    ]
    for name, desc in markers:
        config.addinivalue_line("markers", f"{name}: {desc}")


@pytest.fixture(autouse=True)
def _isolate_stepanim_env(monkeypatch):
    """Keep STEPANIM_* variables of the developer's shell out of the tests."""
    import os

    for name in list(os.environ):
        if name.startswith("STEPANIM_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Clean up logging handlers after each test to prevent closed file errors."""
    yield
    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        logger = logging.getLogger(logger_name)
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)


@pytest.fixture
def fake_clock() -> ManualClock:
    """Deterministic clock starting at t=0."""
    return ManualClock()


@pytest.fixture
def abc_symbols() -> dict[int, Symbol]:
    """Three unstyled positions: a, b, c."""
    return {0: Symbol("a"), 1: Symbol("b"), 2: Symbol("c")}
