"""
Pydantic schemas for API response models.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error envelope returned when a workflow cannot be served."""

    success: bool = Field(default=False, description="Always false for errors")
    error: str = Field(description="Client-facing error message")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    app_name: str
    version: str
    upstream_url: str


class RootResponse(BaseModel):
    """Project information returned from the root endpoint."""

    project: str
    version: str
    docs: str
