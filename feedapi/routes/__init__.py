from .health import router as health_router
from .posts import router as posts_router

__all__ = [
    "health_router",
    "posts_router",
]
