"""Application errors and their JSON rendering.

Services and dependencies raise ``AppError`` subclasses; the handlers
registered by ``register_error_handlers`` turn them into
``{"error": <message>}`` bodies (plus ``details`` when present).
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, details: Any = None) -> None:
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)


class InvalidInput(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid input"


class AlreadyExists(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Resource already exists"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class DuplicateEmail(AppError):
    status_code = status.HTTP_409_CONFLICT
    message = "Email already registered"


class AuthError(AppError):
    """401 family. Rendered with a ``WWW-Authenticate: Bearer`` header."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authenticated"


class Unauthenticated(AuthError):
    message = "Token not provided"


class InvalidToken(AuthError):
    message = "Invalid token"


class TokenExpired(AuthError):
    message = "Token expired"


class InvalidCredentials(AuthError):
    message = "Invalid credentials"


class InternalAuthError(AppError):
    message = "Error authenticating token"


class FanOutFailed(AppError):
    message = "Panic alert could not be delivered"


class InternalStoreError(AppError):
    message = "Internal server error"


def error_response(status_code: int, message: str, details: Any = None, headers: dict | None = None) -> JSONResponse:
    """Build the JSON error body shared by every handler."""
    body: dict[str, Any] = {"error": message}
    if details is not None:
        body["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the FastAPI app."""

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
        return error_response(exc.status_code, exc.message, exc.details, headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        details = [
            {"field": ".".join(str(p) for p in err["loc"] if p != "body"), "message": err["msg"]}
            for err in exc.errors()
        ]
        return error_response(status.HTTP_400_BAD_REQUEST, "Missing or invalid fields", details)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(SQLAlchemyError)
    async def handle_store_error(request: Request, exc: SQLAlchemyError):
        logger.exception("Store error on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, InternalStoreError.message)
