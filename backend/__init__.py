"""Postboard backend packages."""
