"""
Pytest fixtures for Postboard API tests.

This module provides shared fixtures for testing the FastAPI application
against an in-memory MongoDB.
"""

import pytest
from fastapi.testclient import TestClient

from backend.postboard.api.main import create_app


@pytest.fixture
def test_client(test_config, post_store):
    """
    Create a FastAPI TestClient bound to a mongomock-backed store.

    The client is used as a context manager so the lifespan runs (index
    creation on startup, store close on shutdown).

    Example:
        def test_health(test_client):
            response = test_client.get("/")
            assert response.status_code == 200
    """
    app = create_app(config=test_config, store=post_store)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_post(test_client):
    """
    Factory creating a post through the API and returning its JSON.

    Example:
        post = make_post(title="Hello", category="Tech")
    """
    def _make(**overrides):
        payload = {
            "title": "Hello MongoDB",
            "content": "First steps with documents.",
            "category": "Tech",
            "tags": ["mongodb"],
        }
        payload.update(overrides)
        response = test_client.post("/posts", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
