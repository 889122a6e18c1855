"""
Campus Library Backend — Shared Pydantic Schemas
==================================================

What:  Base model and envelope schemas used by every endpoint.
Why:   The public API speaks camelCase JSON (bookName, pdfPath, isSeen) while
       Python code uses snake_case. CamelModel generates the aliases once.

Design Decision:
    Schemas are separate from SQLAlchemy models because:
    1. We control exactly what is exposed (password hashes never leave the service)
    2. Input validation differs from DB constraints
    3. OpenAPI docs are generated from schemas, not from DB models

Inputs accept either spelling (populate_by_name); outputs are always camelCase.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessResponse(BaseModel):
    """Returned by every DELETE and by logout."""
    success: bool = Field(default=True)


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "forbidden")
        message: Human-readable description for display to users
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "forbidden",
            "message": "Admin access required",
            "request_id": "3f2a9c1e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
