"""
Request logging and error envelopes for the PantryPlan API.

Every error response has the shape
``{"success": false, "error": {...}, "request_id": ..., "timestamp": ...}``
so clients can correlate a failure with the server log line carrying the
same request id.
"""

import time
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import ServiceError

logger = logging.getLogger("pantryplan.middleware")

REQUEST_ID_HEADER = "X-Request-ID"


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)


def error_response(
    request: Request, status_code: int, error: Dict[str, Any]
) -> JSONResponse:
    """Wrap an error payload in the API envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": jsonable_encoder(error, custom_encoder={Exception: str}),
            "request_id": _request_id(request),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an id and logs its outcome and duration.

    A caller-supplied X-Request-ID is reused, otherwise a new one is minted.
    The id is echoed back in the response headers.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s failed after %.1fms [%s]",
                request.method,
                request.url.path,
                (time.perf_counter() - started) * 1000,
                request_id,
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d in %.1fms [%s]",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed_ms / 1000:.4f}"
        return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid request body on %s: %s", request.url.path, exc.errors())
    return error_response(
        request,
        422,
        {
            "code": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": exc.errors(),
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning("HTTP %d on %s: %s", exc.status_code, request.url.path, exc.detail)
    return error_response(
        request,
        exc.status_code,
        {"code": f"HTTP_{exc.status_code}", "message": exc.detail},
    )


async def service_exception_handler(request: Request, exc: ServiceError):
    """Render a ServiceError using its own status and error code; `reason` carries the specific code."""
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(level, "%s on %s: %s", exc.error_code, request.url.path, exc)

    error: Dict[str, Any] = {"code": exc.error_code, "message": str(exc)}
    if exc.code:
        error["reason"] = exc.code
    if exc.details:
        error["details"] = dict(exc.details)
    return error_response(request, exc.http_status, error)


async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"code": "INTERNAL_SERVER_ERROR", "message": "An unexpected error occurred"},
    )
