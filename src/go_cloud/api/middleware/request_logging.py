"""Request logging middleware."""

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def _log_request(request: Request, status_code: int, start_time: float) -> None:
    latency_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        "method=%s path=%s status=%d latency_ms=%.3f",
        request.method,
        request.url.path,
        status_code,
        latency_ms,
    )


def install_request_logging(app: FastAPI) -> None:
    """Log one line per completed request: method, path, status and latency."""

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Answered with 500 by the server error handler outside this middleware
            _log_request(request, 500, start_time)
            raise

        _log_request(request, response.status_code, start_time)
        return response
