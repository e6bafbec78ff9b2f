"""
Standardized API response models.
Documents the response envelopes produced by the routes and error handlers.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field
from datetime import datetime, timezone


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(
        default_factory=_utc_now, description="Error timestamp"
    )


class StatusResponse(BaseModel):
    """Acknowledgement for operations without a payload (deletes)"""

    status: str = Field("ok", description="Operation status")
    deleted: Optional[int] = Field(None, description="Id of the deleted record")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    timestamp: datetime = Field(
        default_factory=_utc_now, description="Check timestamp"
    )


# OpenAPI documentation for the errors each route can produce
UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Missing, invalid or expired token"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Resource not found"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid input"}}
CONFLICT = {409: {"model": ErrorResponse, "description": "Resource already exists"}}
