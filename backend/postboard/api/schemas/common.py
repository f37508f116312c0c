"""
Common Pydantic schemas used across the Postboard API.

This module provides reusable schema classes for:
- Health check responses
- Error bodies (not-found, internal errors)
- Validation error bodies

All schemas use Pydantic v2 syntax.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HealthResponse(BaseModel):
    """
    Health check response schema.

    Attributes:
        status: Service status ('ok' or 'error').
        time: Current server timestamp (UTC).
        details: Optional component-specific health info (readiness only).

    Example:
        {
            "status": "ok",
            "time": "2026-10-19T10:30:00.000Z"
        }
    """

    model_config = ConfigDict(json_schema_extra={
        "examples": [
            {"status": "ok", "time": "2026-10-19T10:30:00Z"},
            {
                "status": "error",
                "time": "2026-10-19T10:30:00Z",
                "details": {"database": "error: connection refused"}
            }
        ]
    })

    status: str = Field(
        ...,
        description="Service health status",
        examples=["ok", "error"]
    )
    time: datetime = Field(
        default_factory=_utcnow,
        description="Current server timestamp"
    )
    details: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Additional health check details"
    )


class ErrorResponse(BaseModel):
    """
    Error body for not-found and internal errors.

    Example:
        {"error": "Post not found"}
    """

    model_config = ConfigDict(json_schema_extra={
        "examples": [
            {"error": "Post not found"},
            {"error": "Internal server error"}
        ]
    })

    error: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Post not found"]
    )


class FieldViolation(BaseModel):
    """
    A single field rule violation.

    Attributes:
        field: Name of the offending field ("body" for the payload as a whole).
        message: Human-readable reason.
    """

    field: str = Field(..., examples=["title"])
    message: str = Field(..., examples=["title is required"])


class ValidationErrorResponse(BaseModel):
    """
    Error body for rejected payloads (HTTP 400).

    Example:
        {
            "errors": [
                {"field": "title", "message": "title is required"},
                {"field": "tags", "message": "tags must be an array of strings"}
            ]
        }
    """

    errors: List[FieldViolation] = Field(
        ...,
        description="Every violated field rule"
    )
