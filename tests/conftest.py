"""Shared pytest fixtures."""

import logging

import pytest

from medquery.logging.context import clear_log_context

ENV_VARS = ("LOG_LEVEL", "LOG_FORMAT", "MEDQUERY_HISTORY_PATH", "ENVIRONMENT")


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler/level changes made by configure_logging() during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no medquery environment overrides and no config.yaml in cwd."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
