"""
Feed API Error Responses
API exceptions and the JSON error envelope
"""
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Any, Dict, Optional
from datetime import datetime, timezone

from .logging_config import api_logger


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


# ============================================================
# ERRORS
# ============================================================

class ApiException(HTTPException):
    """Custom API exception with error codes"""

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: str = None,
        details: Dict = None,
    ):
        self.error_code = error_code or f"ERR_{status_code}"
        self.details = details
        super().__init__(status_code=status_code, detail=message)

    @property
    def message(self) -> str:
        return self.detail


class InvalidInput(ApiException):
    """Client payload failed a validation rule."""

    def __init__(self, message: str, details: Dict = None):
        super().__init__(status.HTTP_400_BAD_REQUEST, message, "INVALID_INPUT", details)


class NotFound(ApiException):
    """Requested resource does not exist."""

    def __init__(self, message: str = "post not found"):
        super().__init__(status.HTTP_404_NOT_FOUND, message, "NOT_FOUND")


def error_body(message: str, error_code: str, details: Optional[Any] = None) -> Dict:
    return {
        "ok": False,
        "error": message,
        "error_code": error_code,
        "details": details,
        "timestamp": _timestamp(),
    }


# ============================================================
# EXCEPTION HANDLERS
# ============================================================

async def api_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handler for ApiException and plain HTTPException"""
    if isinstance(exc, ApiException):
        error_code, details = exc.error_code, exc.details
    else:
        error_code, details = f"HTTP_{exc.status_code}", None

    api_logger.warning(
        f"API Error: {exc.detail}",
        status_code=exc.status_code,
        error_code=error_code,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.detail, error_code, details),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and path parameters are client errors (400)"""
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    api_logger.warning(
        "Request validation failed",
        path=request.url.path,
        errors=details,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request data", "VALIDATION_ERROR", details),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all; never leaks internal details"""
    api_logger.error(
        f"Unexpected error: {exc}",
        error=exc,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("An unexpected error occurred", "INTERNAL_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(StarletteHTTPException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
