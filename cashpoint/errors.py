from __future__ import annotations

from fastapi import status
from fastapi.responses import JSONResponse

from modules.cash_machine.core.withdraw import Failure, FailureKind


FAILURE_STATUS = {
    FailureKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    FailureKind.NOTE_UNAVAILABLE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def failure_status(kind: FailureKind, *, legacy: bool = False) -> int:
    """HTTP status for a failure kind.

    ``legacy`` reproduces the old service, which answered 500 for every
    failure regardless of its kind.
    """
    if legacy:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return FAILURE_STATUS.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def failure_response(failure: Failure, *, legacy: bool = False) -> JSONResponse:
    return JSONResponse(
        {"error": failure.message, "kind": failure.kind.value},
        status_code=failure_status(failure.kind, legacy=legacy),
    )


__all__ = ["FAILURE_STATUS", "failure_response", "failure_status"]
