"""Persistence layer for posts."""

from .store import PostStore

__all__ = ["PostStore"]
