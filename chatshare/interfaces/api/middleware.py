"""
API Middleware - Request context and error envelopes.

Every response carries ``X-Request-ID`` and ``X-Response-Time-Ms``. Domain
errors are rendered by an exception handler as::

    {"error": {"code": ..., "message": ..., "details": {...}}, "request_id": ...}

Anything else escaping a route becomes a generic 500 in the same shape.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from starlette.middleware.base import BaseHTTPMiddleware

from chatshare.config.errors import ChatShareError, ErrorCode

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
LATENCY_HEADER = "X-Response-Time-Ms"

INTERNAL_ERROR_BODY = {
    "code": ErrorCode.INTERNAL_ERROR.value,
    "message": "Internal server error",
    "details": {},
}

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.TOKEN_INVALID_SIGNATURE: 401,
    ErrorCode.TOKEN_EXPIRED: 401,
    ErrorCode.TOKEN_MALFORMED: 401,
    ErrorCode.SECURITY_FORBIDDEN: 403,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.SECURITY_RATE_LIMITED: 429,
    ErrorCode.OAUTH_EXCHANGE_FAILED: 502,
    ErrorCode.OAUTH_PROFILE_FAILED: 502,
}


def error_code_to_status(code: ErrorCode) -> int:
    """Map error codes to HTTP status codes. Unknown codes are 500."""
    return STATUS_BY_CODE.get(code, 500)


def request_id_of(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def error_response(request: Request, status_code: int, error: dict[str, Any]) -> JSONResponse:
    """Build the JSON error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "request_id": request_id_of(request),
        },
    )


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Assign a request ID, time the request and write one access log line.

    The request ID is taken from the incoming header when present so a
    caller can correlate its own logs. Unhandled exceptions are logged with
    their traceback and answered with a generic 500.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled error on %s %s request_id=%s",
                request.method,
                request.url.path,
                request_id,
            )
            response = error_response(request, 500, INTERNAL_ERROR_BODY)

        duration_ms = (time.perf_counter() - start) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[LATENCY_HEADER] = f"{duration_ms:.2f}"

        logger.info(
            "%s %s status=%d latency_ms=%.2f request_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request_id,
        )
        return response


async def handle_chatshare_error(request: Request, exc: ChatShareError) -> JSONResponse:
    """Render a ChatShareError with the status for its code."""
    status_code = error_code_to_status(exc.code)

    # 4xx at INFO, 5xx at ERROR
    level = logging.ERROR if status_code >= 500 else logging.INFO
    logger.log(
        level,
        "%s %s -> %d %s: %s request_id=%s",
        request.method,
        request.url.path,
        status_code,
        exc.code.value,
        exc.message,
        request_id_of(request),
    )
    return error_response(request, status_code, exc.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    """Install the ChatShareError handler on an app."""
    app.add_exception_handler(ChatShareError, handle_chatshare_error)
