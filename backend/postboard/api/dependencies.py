"""
FastAPI dependency injection functions for the Postboard API.

The PostStore is created once in the application lifespan and kept on
app.state; these dependencies hand it (and services built on it) to route
handlers.

Example:
    @router.get("/posts")
    def list_posts(service: PostService = Depends(get_post_service)):
        return service.list_posts()
"""

from fastapi import Depends, Request

from backend.postboard.api.services import PostService
from backend.postboard.core.data.store import PostStore
from backend.postboard.core.exceptions import StoreError


def get_store(request: Request) -> PostStore:
    """
    Get the shared PostStore opened at startup.

    Returns:
        PostStore: Store bound to the application's MongoDB client.

    Raises:
        StoreError: If the application has no open store (lifespan not run).
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreError("Post store is not initialized", operation="get_store")
    return store


def get_post_service(store: PostStore = Depends(get_store)) -> PostService:
    """
    Get a PostService bound to the shared store.

    Args:
        store: PostStore instance (injected dependency).

    Returns:
        PostService: Service for post operations.
    """
    return PostService(store)
