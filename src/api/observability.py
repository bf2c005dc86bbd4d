"""
Observability utilities for API request tracking.

Provides request ID generation and a middleware that logs every request with
its duration, status and correlation id.
"""

from __future__ import annotations

import time
import uuid
from collections.abc import Callable
from contextvars import ContextVar
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from src.api.middleware import get_client_ip
from src.logging_config import LogContext, get_logger

_request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)

logger = get_logger(__name__)

_SENSITIVE_PARAMS = {"api_key", "token", "password", "secret", "auth"}


def generate_request_id() -> str:
    return str(uuid.uuid4())


def get_request_id() -> str | None:
    """Get the current request ID from context."""
    return _request_id_ctx.get()


def _sanitize_query_params(query: str) -> str:
    sanitized = []
    for part in query.split("&"):
        key = part.split("=", 1)[0]
        if "=" in part and key.lower() in _SENSITIVE_PARAMS:
            sanitized.append(f"{key}=***REDACTED***")
        else:
            sanitized.append(part)
    return "&".join(sanitized)


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """
    Adds request ID tracking, timing and structured request logs.

    - Uses the incoming X-Request-ID header or generates one
    - Echoes it back in the response X-Request-ID header
    - Logs request_completed (or request_completed_slow) with duration_ms
    """

    def __init__(self, app: ASGIApp, *, slow_request_threshold_ms: float = 1000.0) -> None:
        super().__init__(app)
        self.slow_request_threshold_ms = slow_request_threshold_ms

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("x-request-id") or generate_request_id()
        client_ip = get_client_ip(request)

        _request_id_ctx.set(request_id)
        LogContext.bind(request_id=request_id, client_ip=client_ip, endpoint=request.url.path)

        request_meta: dict[str, Any] = {"method": request.method, "path": request.url.path}
        if request.url.query:
            request_meta["query_params"] = _sanitize_query_params(str(request.url.query))
        logger.debug("request_started", extra=request_meta)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "request_failed",
                extra={
                    **request_meta,
                    "error_type": type(exc).__name__,
                    "duration_ms": round((time.perf_counter() - start) * 1000, 2),
                },
                exc_info=True,
            )
            raise
        finally:
            LogContext.clear()

        duration_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Request-ID"] = request_id

        response_meta = {
            **request_meta,
            "request_id": request_id,
            "status_code": response.status_code,
            "duration_ms": round(duration_ms, 2),
        }
        if duration_ms >= self.slow_request_threshold_ms:
            logger.warning("request_completed_slow", extra=response_meta)
        else:
            logger.info("request_completed", extra=response_meta)
        return response
