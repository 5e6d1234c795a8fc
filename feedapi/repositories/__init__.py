from .posts import PostRepository

__all__ = ["PostRepository"]
