"""
Pydantic schemas for Postboard API request/response validation.

This module exports all schema classes for easy importing throughout the API.
"""

from .common import (
    HealthResponse,
    ErrorResponse,
    FieldViolation,
    ValidationErrorResponse,
)
from .posts import (
    PostPayload,
    PostResponse,
)

__all__ = [
    # Common
    "HealthResponse",
    "ErrorResponse",
    "FieldViolation",
    "ValidationErrorResponse",
    # Posts
    "PostPayload",
    "PostResponse",
]
