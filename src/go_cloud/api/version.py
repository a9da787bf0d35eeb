"""Service identity and the root endpoint."""

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from .. import __version__
from .models import RootResponse

SERVICE_NAME = "go-cloud"

# Follows semantic versioning
SERVICE_VERSION = __version__

router = APIRouter()


class UTF8JSONResponse(JSONResponse):
    """JSON response that states its charset explicitly."""

    media_type = "application/json; charset=utf-8"


@router.get("/{subpath:path}", response_model=RootResponse, response_class=UTF8JSONResponse)
async def root(subpath: str) -> RootResponse:
    """
    Report the service name and version.

    Registered as a catch-all so that every path not claimed by another
    router lands here: GET on anything but "/" is 404, and any other
    method is answered 405 by the router.
    """
    if subpath:
        raise HTTPException(status_code=404)

    return RootResponse(service=SERVICE_NAME, version=SERVICE_VERSION)
