"""
Postboard CLI Module.

This module provides a command-line interface for serving the API and
maintaining the post collection.

Example:
    >>> from backend.postboard.cli import cli
    >>> cli()
"""

from backend.postboard.cli.main import cli

__all__ = ['cli']
