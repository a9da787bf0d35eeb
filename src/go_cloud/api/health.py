"""Liveness and readiness endpoints."""

import asyncio

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from .config import Config

router = APIRouter()

READY_BODY = "ok"
NOT_READY_BODY = "not ready"


def get_config(request: Request) -> Config:
    """Return the configuration the application was created with."""
    return request.app.state.config


@router.get("/healthz", response_class=PlainTextResponse)
async def healthz() -> PlainTextResponse:
    """
    Liveness probe.

    Always answers 200 "ok" while the process is serving, regardless of
    configuration or readiness.
    """
    return PlainTextResponse(READY_BODY)


@router.get("/readyz", response_class=PlainTextResponse)
async def readyz(config: Config = Depends(get_config)) -> PlainTextResponse:
    """
    Readiness probe.

    Answers 200 "ok" when APP_READY is "true" (case-insensitive), otherwise
    503 "not ready". An optional configured delay is awaited first.
    """
    if config.readiness_delay_ms:
        await asyncio.sleep(config.readiness_delay_ms / 1000)

    if not config.ready:
        return PlainTextResponse(NOT_READY_BODY, status_code=503)
    return PlainTextResponse(READY_BODY)
