from .posts import PostService, collect_violations, normalize_image_url, validate_post_request

__all__ = [
    "PostService",
    "collect_violations",
    "normalize_image_url",
    "validate_post_request",
]
