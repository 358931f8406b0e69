from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from cashpoint.errors import failure_response
from cashpoint.logger import get_logger
from cashpoint.settings import Settings, get_settings
from modules.cash_machine.core.withdraw import configure

logger = get_logger(__name__)


def _parse_amount(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    compact = value.strip().replace(" ", "")
    if not compact:
        return None

    if "," in compact and "." in compact:
        last_comma = compact.rfind(",")
        last_dot = compact.rfind(".")
        if last_comma > last_dot:
            compact = compact.replace(".", "")
            compact = compact.replace(",", ".")
        else:
            compact = compact.replace(",", "")
    elif "," in compact:
        compact = compact.replace(",", ".")
    return compact


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    machine = configure(settings.formats(), max_notes=settings.max_notes)

    app = FastAPI(title="Cash Machine")
    app.state.machine = machine

    def _respond(value: Optional[str]):
        notes, failure = machine.decompose(_parse_amount(value))
        if failure:
            logger.warning(
                "withdraw_failed",
                kind=failure.kind.value,
                value=value,
                reason=failure.message,
            )
            return failure_response(failure, legacy=settings.legacy_error_status)
        return notes

    @app.get("/")
    def withdraw_nothing():
        return _respond(None)

    @app.get("/{value}")
    def withdraw(value: str):
        return _respond(value)

    return app


app = create_app()
