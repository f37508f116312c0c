"""
Tests for the Postboard FastAPI backend.

This package contains tests for:
- Post endpoints (CRUD, search, ordering)
- Validation and response schemas
- Post service outcomes and their HTTP rendering
- Error handlers, health checks and application lifespan
"""
