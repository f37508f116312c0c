"""
FastAPI routers for Postboard API endpoints.

This module exports all router instances for registration in the main app.
"""

from .posts import router as posts_router
from .health import router as health_router

__all__ = [
    "posts_router",
    "health_router",
]
