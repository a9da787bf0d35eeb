"""Plain-text error responses and process-wide exception handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register the service's exception handlers on ``app``.

    Routing errors (404, 405) keep their status and headers but are
    rendered as plain text instead of FastAPI's JSON ``detail`` envelope.
    Anything unhandled is logged with its traceback and answered with 500.
    """

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(_: Request, exc: StarletteHTTPException):
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception for %s %s", request.method, request.url.path)
        return PlainTextResponse("Internal Server Error", status_code=500)
