"""Application-wide exception classes and handlers.

Services raise ``AppError`` subclasses. Every failure, rate limiting
included, reaches the client in the same envelope::

    {"success": false, "error": {"code": "...", "message": "...", "details": {...}}}
"""

from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

logger = structlog.get_logger(__name__)


def error_envelope(code: str, message: str, details: dict[str, Any] | None = None) -> dict:
    return {
        "success": False,
        "error": {"code": code, "message": message, "details": details or None},
    }


class AppError(Exception):
    """Base exception for application errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code,
            content=error_envelope(self.error_code, self.message, self.details),
        )


class NotFoundError(AppError):
    """Store, product or other resource does not exist (404)."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"

    def __init__(self, message: str = "Recurso não encontrado", resource: str | None = None):
        super().__init__(message, {"resource": resource} if resource else None)


class ValidationError(AppError):
    """Request is well-formed but breaks a business rule (400)."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str = "Erro de validação", field: str | None = None):
        super().__init__(message, {"field": field} if field else None)


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    error_code = "CONFLICT"

    def __init__(self, message: str = "Conflito de recursos", resource: str | None = None):
        super().__init__(message, {"resource": resource} if resource else None)


class ForbiddenError(AppError):
    """Admin mode is required (403)."""

    status_code = status.HTTP_403_FORBIDDEN
    error_code = "FORBIDDEN"

    def __init__(self, message: str = "Acesso negado"):
        super().__init__(message)


async def app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning(
        "app_error",
        code=exc.error_code,
        status=exc.status_code,
        message=exc.message,
        details=exc.details,
        path=request.url.path,
    )
    return exc.to_response()


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """429 in the common envelope, with slowapi's Retry-After and X-RateLimit headers."""
    logger.warning("rate_limit_exceeded", limit=str(exc.detail), path=request.url.path)
    response = JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content=error_envelope(
            "RATE_LIMIT_EXCEEDED",
            "Muitas tentativas, aguarde um instante",
            {"limit": str(exc.detail)},
        ),
    )
    return request.app.state.limiter._inject_headers(response, request.state.view_rate_limit)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_exception", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope("INTERNAL_ERROR", "Ocorreu um erro inesperado"),
    )


def register_exception_handlers(app: FastAPI, *, debug: bool = False) -> None:
    """Register exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
        debug: If True, unhandled exceptions propagate with stack traces.
    """
    app.add_exception_handler(AppError, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)  # type: ignore[arg-type]
    if not debug:
        app.add_exception_handler(Exception, unhandled_exception_handler)
