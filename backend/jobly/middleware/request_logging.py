from __future__ import annotations

import time
import uuid
import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from jobly.core.request_context import set_context, clear_context


logger = logging.getLogger("jobly.http")

# Probes hit these constantly; they only get logged when something is wrong.
QUIET_PATHS = frozenset({"/api/health"})


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with an x-request-id (upstream value or a fresh uuid4)
    and logs one line in, one line out. Log level follows the response status.
    """

    async def dispatch(self, request: Request, call_next):
        rid = request.headers.get("x-request-id") or str(uuid.uuid4())
        set_context(request_id=rid)
        quiet = request.url.path in QUIET_PATHS

        t0 = time.perf_counter()
        try:
            if not quiet:
                logger.info(
                    "http.request",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "query": str(request.url.query),
                    },
                )
            try:
                response: Response = await call_next(request)
            except Exception:
                logger.exception(
                    "http.failed",
                    extra={"method": request.method, "path": request.url.path},
                )
                raise

            level = _level_for(response.status_code)
            if not quiet or level > logging.INFO:
                logger.log(
                    level,
                    "http.response",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "status_code": response.status_code,
                        "duration_ms": int((time.perf_counter() - t0) * 1000),
                    },
                )

            response.headers["x-request-id"] = rid
            return response
        finally:
            clear_context()
