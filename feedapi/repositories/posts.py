"""
Post persistence on top of a SQLAlchemy session.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from ..logging_config import db_logger, timed
from ..models.post import Post


class PostRepository:
    """Single-row reads and writes for posts. Each write commits on its own."""

    def __init__(self, db: Session):
        self.db = db

    @timed(db_logger)
    def find_all(self) -> List[Post]:
        return self.db.query(Post).order_by(Post.id).all()

    @timed(db_logger)
    def find_by_id(self, post_id: int) -> Optional[Post]:
        return self.db.get(Post, post_id)

    def exists_by_id(self, post_id: int) -> bool:
        return self.find_by_id(post_id) is not None

    @timed(db_logger)
    def save(self, post: Post) -> Post:
        self.db.add(post)
        self.db.commit()
        self.db.refresh(post)
        return post

    @timed(db_logger)
    def delete_by_id(self, post_id: int) -> None:
        post = self.db.get(Post, post_id)
        if post is not None:
            self.db.delete(post)
            self.db.commit()
