"""
FastAPI router for post endpoints.

This module provides HTTP endpoints to create, list/search, read, replace
and delete posts. Handlers are sync functions (run in the threadpool) since
the MongoDB driver is blocking; each one delegates to PostService and
renders the returned outcome.
"""

from typing import Any, List, Optional
from fastapi import APIRouter, Body, Depends, Query, Response, status

from backend.postboard.api.dependencies import get_post_service
from backend.postboard.api.errors import render_outcome
from backend.postboard.api.services import PostService
from backend.postboard.api.schemas import (
    ErrorResponse,
    PostResponse,
    ValidationErrorResponse,
)
from backend.postboard.api.schemas.posts import POST_EXAMPLE

PAYLOAD_DESCRIPTION = "Post fields: title, content, category and optional tags"

router = APIRouter(
    prefix="/posts",
    tags=["posts"],
    responses={
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a post",
    responses={400: {"model": ValidationErrorResponse, "description": "Invalid payload"}},
)
def create_post(
    payload: Any = Body(None, description=PAYLOAD_DESCRIPTION, examples=[POST_EXAMPLE]),
    service: PostService = Depends(get_post_service),
) -> Response:
    """
    Create a new post.

    Example:
        POST /posts
        {"title": "Hello", "content": "World", "category": "Tech", "tags": ["intro"]}

        Response (201):
        {"id": "...", "title": "Hello", ..., "createdAt": "...", "updatedAt": "..."}
    """
    return render_outcome(service.create_post(payload), status.HTTP_201_CREATED)


@router.get(
    "",
    response_model=List[PostResponse],
    summary="List or search posts",
    description="""
    List all posts, newest first.

    With `term`, only posts whose title, content or category contain the
    term (case-insensitive substring) are returned.
    """,
)
def list_posts(
    term: Optional[str] = Query(None, description="Case-insensitive substring to search for"),
    service: PostService = Depends(get_post_service),
) -> Response:
    """
    List posts, optionally filtered by term.

    Example:
        GET /posts?term=tech
    """
    return render_outcome(service.list_posts(term))


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get a post",
    responses={404: {"model": ErrorResponse, "description": "Post not found"}},
)
def get_post(
    post_id: str,
    service: PostService = Depends(get_post_service),
) -> Response:
    """Return a single post by id. Malformed ids are reported as not found."""
    return render_outcome(service.get_post(post_id))


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    summary="Replace a post",
    description="""
    Replace title, content, category and tags of a post.

    This is a full replace: omitting `tags` clears them.
    """,
    responses={
        400: {"model": ValidationErrorResponse, "description": "Invalid payload"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
def update_post(
    post_id: str,
    payload: Any = Body(None, description=PAYLOAD_DESCRIPTION, examples=[POST_EXAMPLE]),
    service: PostService = Depends(get_post_service),
) -> Response:
    """Replace a post's fields and return the updated post."""
    return render_outcome(service.update_post(post_id, payload))


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a post",
    responses={404: {"model": ErrorResponse, "description": "Post not found"}},
)
def delete_post(
    post_id: str,
    service: PostService = Depends(get_post_service),
) -> Response:
    """Delete a post. Returns 204 with an empty body."""
    return render_outcome(service.delete_post(post_id), status.HTTP_204_NO_CONTENT)
