"""Shared pytest fixtures for the cashpoint tests."""

from __future__ import annotations

import logging
import os

import pytest
import structlog
from fastapi.testclient import TestClient

from cashpoint.settings import Settings, get_settings
from modules.cash_machine.core.withdraw import CashMachine, configure
from modules.cash_machine.tool.app import create_app

NOTE_FORMATS = [100.0, 50.0, 20.0, 10.0]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch):
    """Keep CASHPOINT_* variables from the developer shell out of tests."""
    for key in list(os.environ):
        if key.startswith("CASHPOINT_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def machine() -> CashMachine:
    return configure(NOTE_FORMATS)


def _settings(**overrides) -> Settings:
    values = {"note_formats": "100,50,20,10"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def make_settings():
    """Build settings that ignore any .env file."""
    return _settings


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(_settings()))


@pytest.fixture
def legacy_client() -> TestClient:
    return TestClient(create_app(_settings(legacy_error_status=True)))


@pytest.fixture
def restore_logging():
    """Undo ``setup_logger`` so handlers bound to captured streams do not leak."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
