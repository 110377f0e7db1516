"""
Error handlers mapping Mushaf error kinds to HTTP responses.

- FormatError → 400, RangeError → 422, NotFoundError → 404
- HTTP errors raised by routing (unknown path, wrong method) keep their status
- Anything else → 500 with a body that carries no internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mushaf.exceptions import (
    CorpusLoadError,
    FormatError,
    MushafError,
    NotFoundError,
    RangeError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[MushafError], int] = {
    FormatError: status.HTTP_400_BAD_REQUEST,
    RangeError: 422,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    CorpusLoadError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(error: MushafError) -> int:
    for error_type, code in STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_mushaf_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_mushaf_error_handler(app: FastAPI) -> None:

    @app.exception_handler(MushafError)
    async def mushaf_error_handler(request: Request, exc: MushafError):
        status_code = status_for(exc)
        logger.warning(
            "%s: %s",
            type(exc).__name__,
            exc.message,
            extra={"error_code": exc.code, "path": request.url.path, "status_code": status_code},
        )
        return JSONResponse(status_code=status_code, content=exc.to_response())


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = "Endpoint not found"
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": {"code": "HTTP_ERROR", "kind": "http", "message": message}},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            "Unhandled exception on %s: %s",
            request.url.path,
            exc,
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "kind": "internal",
                    "message": "Something went wrong on our side",
                },
            },
        )
