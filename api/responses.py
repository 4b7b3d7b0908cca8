"""
Standardized API response models.
Used for OpenAPI documentation of health and error payloads.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field
from datetime import datetime, timezone


class ErrorResponse(BaseModel):
    """Standardized error response"""

    error: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")
    details: Optional[Any] = Field(None, description="Additional error details")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Error timestamp",
    )


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")


def error_response(code: str, message: str, details: Any = None) -> dict:
    """Create a standardized, JSON-ready error body"""
    payload = {
        "error": message,
        "code": code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if details is not None:
        payload["details"] = details
    return payload
