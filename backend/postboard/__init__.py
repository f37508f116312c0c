"""
Postboard: a small REST service for blog posts stored in MongoDB.

Subpackages:
- core: configuration, exceptions and the MongoDB post store
- api: FastAPI application, routers, schemas and services
- cli: command-line interface (serve, database maintenance)
"""

__version__ = "0.1.0"
