"""
Postboard FastAPI REST API.

This package provides a REST API for posts including:
- Create, read, replace and delete
- Case-insensitive substring search
- Health monitoring

For more information, see the API documentation at /docs
"""

from backend.postboard import __version__

__all__ = ["__version__"]
