"""
Post model: the single feed entry persisted by the API.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import validates

from ..database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=False)
class Unsaved:
    """Identity of a post the store has not assigned an id to yet."""


@dataclass(frozen=True)
class Saved:
    """Identity of a persisted post."""
    id: int


PostIdentity = Union[Unsaved, Saved]


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    author = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    image_url = Column(String(2048), nullable=True)
    created_date = Column(DateTime(timezone=True), nullable=False)
    modified_date = Column(DateTime(timezone=True), nullable=True)

    def __init__(self, author: str, content: str, image_url: Optional[str] = None):
        self.author = author
        self.content = content
        self.image_url = image_url
        self.created_date = utcnow()
        self.modified_date = None

    @validates("created_date")
    def _guard_created_date(self, key, value):
        if self.created_date is not None:
            raise ValueError("created_date cannot be changed once set")
        return value

    @property
    def identity(self) -> PostIdentity:
        if self.id is None:
            return Unsaved()
        return Saved(self.id)

    def apply_update(self, author: str, content: str, image_url: Optional[str]) -> None:
        """Overwrite the editable fields and stamp the modification time."""
        self.author = author
        self.content = content
        self.image_url = image_url
        self.modified_date = utcnow()

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Post):
            return NotImplemented
        mine, theirs = self.identity, other.identity
        if isinstance(mine, Saved) and isinstance(theirs, Saved):
            return mine == theirs
        return False

    def __hash__(self):
        identity = self.identity
        if isinstance(identity, Saved):
            return hash(identity)
        return object.__hash__(self)

    def __repr__(self):
        return f"<Post id={self.id} author={self.author!r}>"
