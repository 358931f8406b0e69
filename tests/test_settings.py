"""Tests for environment-driven settings."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from cashpoint.settings import Settings, get_settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.formats() == [Decimal("100"), Decimal("50"), Decimal("20"), Decimal("10")]
    assert settings.port == 1337
    assert settings.host == "0.0.0.0"
    assert settings.module == "cash_machine"
    assert settings.max_notes == 10_000
    assert settings.legacy_error_status is False
    assert settings.log_level == "INFO"


def test_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CASHPOINT_NOTE_FORMATS", "20 50")
    monkeypatch.setenv("CASHPOINT_PORT", "8080")
    monkeypatch.setenv("CASHPOINT_MAX_NOTES", "")
    monkeypatch.setenv("CASHPOINT_LEGACY_ERROR_STATUS", "true")
    monkeypatch.setenv("CASHPOINT_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)
    assert settings.formats() == [Decimal("50"), Decimal("20")]
    assert settings.port == 8080
    assert settings.max_notes is None
    assert settings.legacy_error_status is True
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["0,10", "abc", "10,-20"])
def test_rejects_bad_note_formats(raw: str) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, note_formats=raw)


def test_rejects_non_positive_cap() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, max_notes=0)


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
