"""
MongoDB storage for posts.

PostStore owns one pymongo client and the posts collection. It is created
once at application startup, shared by all request handlers, and closed at
shutdown. Every driver failure is re-raised as StoreError so callers never
handle pymongo exceptions directly.

Example:
    store = PostStore.connect("mongodb://localhost:27017/postboard")
    store.ensure_indexes()
    post = store.insert_post({"title": "Hello", "content": "...", "category": "News", "tags": []})
    store.get_post(str(post["_id"]))
"""

import logging
import re
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional, Tuple

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, TEXT, MongoClient, ReturnDocument
from pymongo.errors import PyMongoError

from backend.postboard.core.exceptions import StoreConnectionError, StoreError
from backend.postboard.core.utils.config import ConfigManager

logger = logging.getLogger(__name__)

DEFAULT_URI = "mongodb://localhost:27017/postboard"
DEFAULT_DATABASE = "postboard"
DEFAULT_COLLECTION = "posts"

# Fields covered by the text index and by term search
SEARCH_FIELDS = ("title", "content", "category")

# Newest first; ObjectIds grow with insertion and break createdAt ties
LIST_SORT = [("createdAt", DESCENDING), ("_id", DESCENDING)]


def utcnow() -> datetime:
    """Current UTC time truncated to the millisecond precision MongoDB stores."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def parse_object_id(post_id: Any) -> Optional[ObjectId]:
    """
    Convert a path identifier to an ObjectId.

    Returns None for anything that is not a 24-character hex string, so a
    malformed identifier reads the same as a missing record.
    """
    if not isinstance(post_id, str) or not ObjectId.is_valid(post_id):
        return None
    return ObjectId(post_id)


def build_search_filter(term: Optional[str]) -> Dict[str, Any]:
    """
    Build the query filter for listing posts.

    An empty or missing term matches everything. Otherwise the term is
    matched as a literal, case-insensitive substring of any search field.

    Example:
        >>> build_search_filter("tech")
        {'$or': [{'title': {'$regex': 'tech', '$options': 'i'}}, ...]}
    """
    if not term:
        return {}
    pattern = re.escape(term)
    return {
        "$or": [
            {field: {"$regex": pattern, "$options": "i"}}
            for field in SEARCH_FIELDS
        ]
    }


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except PyMongoError as e:
        raise StoreError(f"MongoDB {operation} failed: {e}", operation=operation, original_error=e)


class PostStore:
    """
    Post persistence on top of a MongoDB collection.

    Documents are stored as
    {_id, title, content, category, tags, createdAt, updatedAt}.

    Attributes:
        client: The pymongo (or compatible) client owning the connection pool.
        database_name: Name of the database holding the collection.
        collection: The posts collection.
    """

    def __init__(
        self,
        client: MongoClient,
        database_name: str = DEFAULT_DATABASE,
        collection_name: str = DEFAULT_COLLECTION,
    ):
        """
        Wrap an existing client.

        Args:
            client: Connected MongoClient. Tests pass a mongomock client here.
            database_name: Database to use.
            collection_name: Collection holding posts.
        """
        self.client = client
        self.database_name = database_name
        self.collection = client[database_name][collection_name]

    @classmethod
    def connect(
        cls,
        uri: str,
        database_name: Optional[str] = None,
        collection_name: str = DEFAULT_COLLECTION,
        server_selection_timeout_ms: int = 5000,
    ) -> "PostStore":
        """
        Open a client for the given URI and verify the server answers.

        Args:
            uri: MongoDB connection string.
            database_name: Database to use; defaults to the one named in the
                URI, then to "postboard".
            collection_name: Collection holding posts.
            server_selection_timeout_ms: How long to wait for a server.

        Returns:
            PostStore: Store bound to a live connection.

        Raises:
            StoreConnectionError: If the server cannot be reached.
        """
        try:
            client = MongoClient(
                uri,
                tz_aware=True,
                serverSelectionTimeoutMS=server_selection_timeout_ms,
            )
            if not database_name:
                database_name = client.get_default_database(default=DEFAULT_DATABASE).name
            store = cls(client, database_name, collection_name)
            store.ping()
        except (PyMongoError, StoreError) as e:
            raise StoreConnectionError(
                f"Failed to connect to MongoDB: {e}",
                original_error=e,
            )

        logger.info(f"Connected to MongoDB database '{database_name}'")
        return store

    @classmethod
    def from_config(cls, config: ConfigManager) -> "PostStore":
        """
        Connect using the [database] section of the configuration.

        Args:
            config: ConfigManager (MONGODB_URI / MONGODB_DB override the file).

        Returns:
            PostStore: Store bound to a live connection.

        Raises:
            StoreConnectionError: If MongoDB is unreachable.
        """
        return cls.connect(
            config.get("database.uri", DEFAULT_URI),
            database_name=config.get("database.name"),
            collection_name=config.get("database.collection", DEFAULT_COLLECTION),
            server_selection_timeout_ms=config.get("database.server_selection_timeout_ms", 5000),
        )

    def ping(self) -> None:
        """Round-trip a ping command; raises StoreError if the server is unreachable."""
        with _store_errors("ping"):
            self.client.admin.command("ping")

    def ensure_indexes(self) -> List[str]:
        """
        Create the text search index and the createdAt ordering index.

        Idempotent: creating an index that already exists is a no-op.

        Returns:
            List of index names.
        """
        with _store_errors("ensure_indexes"):
            names = [
                self.collection.create_index(
                    [(field, TEXT) for field in SEARCH_FIELDS],
                    name="post_text_search",
                ),
                self.collection.create_index(
                    [("createdAt", DESCENDING)],
                    name="post_created_at",
                ),
            ]
        logger.debug(f"Indexes ensured: {names}")
        return names

    def insert_post(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new post.

        Args:
            fields: title, content, category and tags.

        Returns:
            The stored document including _id, createdAt and updatedAt.
        """
        now = utcnow()
        document = {
            "title": fields["title"],
            "content": fields["content"],
            "category": fields["category"],
            "tags": list(fields.get("tags") or []),
            "createdAt": now,
            "updatedAt": now,
        }
        with _store_errors("insert_post"):
            result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    def get_post(self, post_id: str) -> Optional[Dict[str, Any]]:
        """Return the post document, or None if missing or the id is malformed."""
        oid = parse_object_id(post_id)
        if oid is None:
            return None
        with _store_errors("get_post"):
            return self.collection.find_one({"_id": oid})

    def find_posts(self, term: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List posts newest first, optionally filtered by a search term.

        Args:
            term: Case-insensitive substring matched against title, content
                and category. Empty or None lists everything.

        Returns:
            List of post documents.
        """
        with _store_errors("find_posts"):
            return list(self.collection.find(build_search_filter(term)).sort(LIST_SORT))

    def replace_post(self, post_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Overwrite title, content, category and tags of a post.

        Missing tags become an empty list. updatedAt is refreshed and
        createdAt is left untouched.

        Returns:
            The updated document, or None if missing or the id is malformed.
        """
        oid = parse_object_id(post_id)
        if oid is None:
            return None
        update = {
            "title": fields["title"],
            "content": fields["content"],
            "category": fields["category"],
            "tags": list(fields.get("tags") or []),
            "updatedAt": utcnow(),
        }
        with _store_errors("replace_post"):
            return self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": update},
                return_document=ReturnDocument.AFTER,
            )

    def delete_post(self, post_id: str) -> bool:
        """Delete a post. Returns False if missing or the id is malformed."""
        oid = parse_object_id(post_id)
        if oid is None:
            return False
        with _store_errors("delete_post"):
            return self.collection.find_one_and_delete({"_id": oid}) is not None

    def count_posts(self) -> int:
        """Total number of stored posts."""
        with _store_errors("count_posts"):
            return self.collection.count_documents({})

    def created_at_range(self) -> Optional[Tuple[datetime, datetime]]:
        """
        Creation time of the oldest and the newest post.

        Reads one document from each end of the createdAt index instead of
        scanning the collection.

        Returns:
            (oldest, newest) timestamps, or None when the collection is empty.
        """
        projection = {"createdAt": True}
        with _store_errors("created_at_range"):
            newest = self.collection.find_one({}, projection, sort=LIST_SORT)
            oldest = self.collection.find_one(
                {},
                projection,
                sort=[("createdAt", ASCENDING), ("_id", ASCENDING)],
            )
        if newest is None or oldest is None:
            return None
        return oldest["createdAt"], newest["createdAt"]

    def category_counts(self, limit: int = 10) -> List[Dict[str, Any]]:
        """
        Most used categories with their post counts.

        Returns:
            List of {"category": str, "count": int}, most frequent first.
        """
        pipeline = [
            {"$group": {"_id": "$category", "count": {"$sum": 1}}},
            {"$sort": {"count": DESCENDING, "_id": ASCENDING}},
            {"$limit": limit},
        ]
        with _store_errors("category_counts"):
            return [
                {"category": row["_id"], "count": row["count"]}
                for row in self.collection.aggregate(pipeline)
            ]

    def close(self) -> None:
        """Close the client and its connection pool."""
        self.client.close()
        logger.info("MongoDB connection closed")
