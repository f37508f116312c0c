"""
Tests for health endpoints and application startup/shutdown.
"""

from datetime import datetime
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from backend.postboard.api.main import create_app
from backend.postboard.core.data.store import PostStore
from backend.postboard.core.exceptions import StoreConnectionError, StoreError


class TestHealthEndpoints:
    """Test GET / and GET /health/ready."""

    def test_root_health_check(self, test_client):
        response = test_client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "details" not in data
        # ISO-8601 timestamp
        datetime.fromisoformat(data["time"].replace("Z", "+00:00"))

    def test_readiness_with_database(self, test_client):
        response = test_client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["details"] == {"database": "connected"}

    def test_readiness_without_database(self, test_client):
        store = test_client.app.state.store
        error = StoreError("ping failed", operation="ping", original_error=ServerSelectionTimeoutError("down"))

        with patch.object(store, "ping", side_effect=error):
            response = test_client.get("/health/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "error"
        assert data["details"]["database"].startswith("error:")


class TestLifespan:
    """Startup connects and indexes; shutdown closes."""

    def test_startup_creates_indexes(self, test_config, mongo_client):
        store = PostStore(mongo_client, "postboard_lifespan")
        app = create_app(config=test_config, store=store)

        with TestClient(app):
            index_names = set(store.collection.index_information())

        assert {"post_text_search", "post_created_at"} <= index_names

    def test_shutdown_closes_store(self, test_config, post_store):
        app = create_app(config=test_config, store=post_store)

        with patch.object(post_store, "close") as close:
            with TestClient(app):
                close.assert_not_called()

        close.assert_called_once()
        assert app.state.store is None

    def test_startup_connects_from_config_when_no_store_injected(self, test_config, post_store):
        app = create_app(config=test_config)

        with patch.object(PostStore, "from_config", return_value=post_store) as from_config:
            with TestClient(app) as client:
                assert client.get("/posts").status_code == 200

        from_config.assert_called_once_with(test_config)

    def test_unreachable_database_is_fatal(self, test_config):
        app = create_app(config=test_config)

        with patch.object(
            PostStore,
            "from_config",
            side_effect=StoreConnectionError("Failed to connect to MongoDB"),
        ):
            with pytest.raises(StoreConnectionError):
                with TestClient(app):
                    pass


class TestOpenAPI:
    """The schema documents every post route."""

    def test_openapi_lists_post_routes(self, test_client):
        paths = test_client.get("/openapi.json").json()["paths"]

        assert set(paths["/posts"]) == {"get", "post"}
        assert set(paths["/posts/{post_id}"]) == {"get", "put", "delete"}

    def test_api_version_matches_package_version(self, test_client):
        import backend.postboard
        import backend.postboard.api

        assert backend.postboard.api.__version__ == backend.postboard.__version__
        assert test_client.get("/openapi.json").json()["info"]["version"] == backend.postboard.__version__
