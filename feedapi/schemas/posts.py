from pydantic import BaseModel, field_serializer
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime, timezone

from ..models.post import Post


class PostRequest(BaseModel):
    """Inbound payload for create and update. Checked by the service, not here."""
    author: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PostResponse(BaseModel):
    id: int
    author: str
    content: str
    image_url: Optional[str] = None
    created_date: datetime
    modified_date: Optional[datetime] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_serializer("created_date", "modified_date")
    def serialize_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        # SQLite hands back naive datetimes; everything is stored as UTC
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        """Project a Post onto the response shape."""
        return cls(
            id=post.id,
            author=post.author,
            content=post.content,
            image_url=post.image_url,
            created_date=post.created_date,
            modified_date=post.modified_date,
        )
