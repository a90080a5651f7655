"""Per-request access logging."""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from second_brain.lib.logger import log_fields

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
RESPONSE_TIME_HEADER = "X-Response-Time"


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency, and echo a request id header.

    A caller-supplied ``X-Request-ID`` is kept; otherwise one is generated.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or f"req-{uuid.uuid4().hex[:12]}"
        route = f"{request.method} {request.url.path}"
        started = time.perf_counter()

        client = request.client.host if request.client else "unknown"
        logger.debug(f"{route} [{request_id}] from {client}")

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"{route} [{request_id}] failed after {_elapsed_ms(started):.0f}ms: {e}",
                extra=log_fields(request_id=request_id, path=request.url.path),
            )
            raise

        latency_ms = _elapsed_ms(started)
        logger.info(
            f"{route} [{request_id}] {response.status_code} in {latency_ms:.0f}ms",
            extra=log_fields(
                request_id=request_id,
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                latency_ms=round(latency_ms, 2),
            ),
        )

        response.headers[RESPONSE_TIME_HEADER] = f"{latency_ms:.2f}ms"
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
