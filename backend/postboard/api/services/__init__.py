"""
Service layer for the Postboard API.

This module exports the post service and its outcome types.
"""

from .outcomes import OutcomeKind, PostOutcome
from .post_service import PostService

__all__ = [
    "OutcomeKind",
    "PostOutcome",
    "PostService",
]
