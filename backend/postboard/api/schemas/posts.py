"""
Pydantic schemas for post endpoints.

PostPayload is the validated request body for create and update.
PostResponse is the wire representation of a stored post.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

POST_EXAMPLE = {
    "title": "Hello MongoDB",
    "content": "First steps with documents.",
    "category": "Tech",
    "tags": ["mongodb", "intro"],
}


class PostPayload(BaseModel):
    """
    Request schema for creating or replacing a post.

    Attributes:
        title: Post title, trimmed, must not be empty.
        content: Post body, must not be empty (whitespace is kept as-is).
        category: Post category, trimmed, must not be empty.
        tags: Optional list of tags; null or absent means no tags.

    Example:
        {
            "title": "Hello MongoDB",
            "content": "First steps with documents.",
            "category": "Tech",
            "tags": ["mongodb", "intro"]
        }
    """

    model_config = ConfigDict(extra="ignore", json_schema_extra={"examples": [POST_EXAMPLE]})

    title: StrictStr = Field(..., description="Post title")
    content: StrictStr = Field(..., description="Post body")
    category: StrictStr = Field(..., description="Post category")
    tags: List[StrictStr] = Field(default_factory=list, description="Post tags")

    @field_validator("title", "category")
    @classmethod
    def strip_not_empty(cls, v: str) -> str:
        """Trim surrounding whitespace and reject empty values."""
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("content")
    @classmethod
    def content_not_empty(cls, v: str) -> str:
        """Reject empty content."""
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def tags_default(cls, v: Any) -> Any:
        """Treat an explicit null like an absent field."""
        return [] if v is None else v


class PostResponse(BaseModel):
    """
    Response schema for a single post.

    Serialize with ``model_dump(mode="json", by_alias=True)`` to get the
    camelCase timestamp keys.

    Example:
        {
            "id": "6530f1d2c9e77a3f1c2b4a10",
            "title": "Hello MongoDB",
            "content": "First steps with documents.",
            "category": "Tech",
            "tags": ["mongodb", "intro"],
            "createdAt": "2026-10-19T10:30:00.123000Z",
            "updatedAt": "2026-10-19T10:30:00.123000Z"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Post identifier")
    title: str
    content: str
    category: str
    tags: List[str] = Field(default_factory=list)
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """MongoDB stores UTC; attach the zone when the driver returns naive values."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "PostResponse":
        """Build the response from a stored MongoDB document."""
        return cls(
            id=str(document["_id"]),
            title=document["title"],
            content=document["content"],
            category=document["category"],
            tags=document.get("tags") or [],
            created_at=document["createdAt"],
            updated_at=document["updatedAt"],
        )

    def to_json(self) -> Dict[str, Any]:
        """JSON-ready dict using the wire field names."""
        return self.model_dump(mode="json", by_alias=True)
