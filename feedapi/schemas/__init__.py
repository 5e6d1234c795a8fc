from .posts import PostRequest, PostResponse

__all__ = [
    "PostRequest", "PostResponse",
]
