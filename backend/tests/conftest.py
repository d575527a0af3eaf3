# File: backend/tests/conftest.py
# Purpose: Shared pytest fixtures for the hook command runner tests.
import logging

import pytest
import structlog

from command_hooks.config import get_settings

SETTINGS_ENV_KEYS = (
    "APP_NAME",
    "LOG_LEVEL",
    "LOG_DIR",
    "OPENCODE_HOOKS_DEBUG",
    "HOOKS_TRUNCATE_LIMIT",
    "HOOKS_SHELL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Every test starts from default settings and a fresh settings cache."""
    for key in SETTINGS_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def settings_env(monkeypatch):
    """Set settings env vars and drop the cached Settings instance."""

    def apply(**values):
        for key, value in values.items():
            monkeypatch.setenv(key, str(value))
        get_settings.cache_clear()
        return get_settings()

    return apply


@pytest.fixture()
def restore_logging():
    """Undo setup_logging() side effects on the root logger and structlog."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
    structlog.reset_defaults()


class RecordingLogger:
    """Stand-in for a structlog logger that keeps (level, event, fields)."""

    def __init__(self):
        self.records = []

    def _record(self, level, event, **fields):
        self.records.append((level, event, fields))

    def debug(self, event, **fields):
        self._record("debug", event, **fields)

    def info(self, event, **fields):
        self._record("info", event, **fields)

    def error(self, event, **fields):
        self._record("error", event, **fields)

    def events(self, level=None):
        return [event for lvl, event, _ in self.records if level is None or lvl == level]


@pytest.fixture()
def recording_logger(monkeypatch):
    from command_hooks.core.execution import shell

    recorder = RecordingLogger()
    monkeypatch.setattr(shell, "logger", recorder)
    return recorder
