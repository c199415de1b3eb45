"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ProxyError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class UpstreamTransportError(ProxyError):
    """Upstream answered with a non-success status, or could not be reached."""

    def __init__(self, upstream_status: int | None, reason: str, url: str = ""):
        if upstream_status is None:
            message = f"Upstream request failed: {reason}"
        else:
            message = f"HTTP {upstream_status}: {reason}"
        super().__init__(message, status_code=500)
        self.upstream_status = upstream_status
        self.url = url


class UpstreamParseError(ProxyError):
    def __init__(self, detail: str, url: str = ""):
        super().__init__(f"Invalid upstream response: {detail}", status_code=500)
        self.url = url


class NotFoundError(ProxyError):
    def __init__(self, path: str):
        super().__init__("Not Found", status_code=404)
        self.path = path


def error_response(message: str, status_code: int = 500, headers: dict | None = None, **extra) -> JSONResponse:
    """Build the uniform error envelope."""
    return JSONResponse({"success": False, "error": message, **extra}, status_code=status_code, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(NotFoundError)
    async def handle_not_found(_request: Request, exc: NotFoundError):
        return error_response(str(exc), exc.status_code, path=exc.path)

    @app.exception_handler(ProxyError)
    async def handle_proxy_error(_request: Request, exc: ProxyError):
        logger.error("Request failed: %s", exc)
        return error_response(str(exc), exc.status_code)

    # Framework-level errors (e.g. 405 for HEAD or TRACE) use the same envelope
    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(_request: Request, exc: StarletteHTTPException):
        return error_response(str(exc.detail), exc.status_code, headers=exc.headers)
