"""
Error taxonomy shared by the store, the timer and the HTTP layer.

Services raise these; `register_error_handlers` maps them onto HTTP responses
so routers stay thin.
"""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# User-facing message for anything the database rejected
MSG_PERSISTENCE_FAILED = "The database request failed. Please try again."


class Vibe30Error(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(Vibe30Error):
    """Input rejected before any persistence call."""
    status_code = 422


class AuthenticationError(Vibe30Error):
    status_code = 401


class NotFoundError(Vibe30Error):
    status_code = 404


class PersistenceError(Vibe30Error):
    """
    The underlying query/insert/update/delete failed.
    `cause` keeps the original exception for logging; the message stays generic.
    """
    status_code = 503

    def __init__(self, message: str = MSG_PERSISTENCE_FAILED, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class TimerStateError(ValidationError):
    pass


async def _vibe30_error_handler(request: Request, exc: Vibe30Error) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(Vibe30Error, _vibe30_error_handler)
