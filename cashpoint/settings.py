from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from modules.cash_machine.core.withdraw import DEFAULT_FORMATS, parse_formats


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CASHPOINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # cash machine
    note_formats: str = Field(default=DEFAULT_FORMATS)
    max_notes: int | None = Field(default=10_000)
    legacy_error_status: bool = False

    # server
    host: str = "0.0.0.0"
    port: int = 1337
    module: str = "cash_machine"

    # logging
    log_level: str = "INFO"
    log_json: bool = True

    @field_validator("note_formats", mode="before")
    @classmethod
    def _check_formats(cls, v):
        if v is None:
            return DEFAULT_FORMATS
        _, error = parse_formats(v)
        if error:
            raise ValueError(error)
        return str(v)

    @field_validator("max_notes", mode="before")
    @classmethod
    def _blank_means_unlimited(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("max_notes")
    @classmethod
    def _positive_cap(cls, v):
        if v is not None and v <= 0:
            raise ValueError("max_notes must be positive.")
        return v

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper()

    def formats(self) -> List[Decimal]:
        values, _ = parse_formats(self.note_formats)
        return values or []


@lru_cache()
def get_settings() -> Settings:
    return Settings()
