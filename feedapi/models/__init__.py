from .post import Post, PostIdentity, Saved, Unsaved

__all__ = [
    "Post",
    "PostIdentity",
    "Saved",
    "Unsaved",
]
