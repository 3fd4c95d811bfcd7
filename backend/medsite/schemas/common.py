"""
Medsite Backend — Shared Schemas
=================================

What:  Response shapes shared by every router: the error envelope, the bare
       `{"message": ...}` acknowledgement, and the health check.
"""

from typing import Optional

from pydantic import BaseModel, Field


class RequestPayload(BaseModel):
    """
    Base for JSON request bodies.

    Every field is optional at the schema level; services decide what is
    required so a missing field is a 400 with a specific message rather than
    a generic schema error. Numbers sent for text fields are accepted as text.
    """

    model_config = {"coerce_numbers_to_str": True}


class MessageResponse(BaseModel):
    """Acknowledgement with no resource payload (deletes, root route)."""
    message: str = Field(description="Human-readable result")


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {
            "error": "conflict",
            "message": "Country with this name already exists",
            "request_id": "1f0c9a2b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check body: overall status plus database reachability."""
    status: str = Field(description="healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="connected or disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
