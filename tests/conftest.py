"""
Root-level pytest configuration for Postboard tests.

Provides an in-memory MongoDB (mongomock) so tests never need a running
database server.
"""

from pathlib import Path

import mongomock
import pytest

from backend.postboard.core.data.store import PostStore
from backend.postboard.core.utils.config import ConfigManager

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "config.toml"


@pytest.fixture
def mongo_client():
    """
    Create a fresh in-memory MongoDB client.

    Returns timezone-aware datetimes like the production client.
    """
    client = mongomock.MongoClient(tz_aware=True)
    yield client
    client.close()


@pytest.fixture
def post_store(mongo_client):
    """PostStore backed by mongomock, with indexes in place."""
    store = PostStore(mongo_client, "postboard_test")
    store.ensure_indexes()
    return store


@pytest.fixture
def test_config():
    """ConfigManager loaded from the repository config file."""
    return ConfigManager(CONFIG_PATH)
