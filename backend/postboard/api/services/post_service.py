"""
Core logic behind the post endpoints.

PostService validates input, talks to the PostStore and wraps every result
in a PostOutcome. It never raises for expected conditions: invalid payloads,
unknown or malformed ids and store failures all come back as outcomes.
"""

import logging
from typing import Any, Optional

from backend.postboard.api.schemas import PostResponse
from backend.postboard.api.services.outcomes import PostOutcome
from backend.postboard.api.validation import check_post_payload
from backend.postboard.core.data.store import PostStore
from backend.postboard.core.exceptions import StoreError

logger = logging.getLogger(__name__)


class PostService:
    """
    Post operations over a shared store.

    Holds no state besides the store handle, so one instance per request is
    cheap and safe.

    Example:
        service = PostService(store)
        outcome = service.create_post({"title": "Hi", "content": "...", "category": "News"})
        if outcome.is_ok:
            print(outcome.value.id)
    """

    def __init__(self, store: PostStore):
        self.store = store

    def create_post(self, payload: Any) -> PostOutcome:
        """
        Validate and insert a new post.

        Args:
            payload: Decoded request body.

        Returns:
            OK with PostResponse, INVALID, or STORE_ERROR.
        """
        post, violations = check_post_payload(payload)
        if violations:
            return PostOutcome.invalid(violations)

        try:
            document = self.store.insert_post(post.model_dump())
        except StoreError as e:
            return PostOutcome.store_error(e)

        logger.debug(f"Created post {document['_id']}")
        return PostOutcome.ok(PostResponse.from_document(document))

    def list_posts(self, term: Optional[str] = None) -> PostOutcome:
        """
        List posts newest first, optionally filtered by term.

        Returns:
            OK with a list of PostResponse, or STORE_ERROR.
        """
        try:
            documents = self.store.find_posts(term)
        except StoreError as e:
            return PostOutcome.store_error(e)
        return PostOutcome.ok([PostResponse.from_document(d) for d in documents])

    def get_post(self, post_id: str) -> PostOutcome:
        """
        Fetch one post.

        Returns:
            OK with PostResponse, NOT_FOUND, or STORE_ERROR.
        """
        try:
            document = self.store.get_post(post_id)
        except StoreError as e:
            return PostOutcome.store_error(e)

        if document is None:
            return PostOutcome.not_found()
        return PostOutcome.ok(PostResponse.from_document(document))

    def update_post(self, post_id: str, payload: Any) -> PostOutcome:
        """
        Replace title, content, category and tags of a post.

        Validation runs before the store is touched, so an invalid payload is
        reported even when the id does not exist.

        Returns:
            OK with PostResponse, INVALID, NOT_FOUND, or STORE_ERROR.
        """
        post, violations = check_post_payload(payload)
        if violations:
            return PostOutcome.invalid(violations)

        try:
            document = self.store.replace_post(post_id, post.model_dump())
        except StoreError as e:
            return PostOutcome.store_error(e)

        if document is None:
            return PostOutcome.not_found()
        logger.debug(f"Updated post {post_id}")
        return PostOutcome.ok(PostResponse.from_document(document))

    def delete_post(self, post_id: str) -> PostOutcome:
        """
        Delete a post.

        Returns:
            OK with no value, NOT_FOUND, or STORE_ERROR.
        """
        try:
            deleted = self.store.delete_post(post_id)
        except StoreError as e:
            return PostOutcome.store_error(e)

        if not deleted:
            return PostOutcome.not_found()
        logger.debug(f"Deleted post {post_id}")
        return PostOutcome.ok()
