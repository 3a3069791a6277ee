"""Pydantic schemas for Joke Gateway responses."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check payload."""

    status: str = Field(..., description="Overall service status")
    version: str = Field(..., description="Application version")
    services: Dict[str, str] = Field(
        default_factory=dict, description="Configured upstream endpoints"
    )


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str = Field(..., description="Error message")
    type: str = Field(..., description="Error type")
