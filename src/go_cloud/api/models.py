"""Pydantic response models for the go-cloud API."""

from pydantic import BaseModel, Field


class RootResponse(BaseModel):
    """Service identity returned by the root endpoint."""

    model_config = {"frozen": True}

    service: str = Field(..., description="Identifier of the running program")
    version: str = Field(..., description="Semantic version of the service")
