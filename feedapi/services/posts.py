"""
Request handling for posts.

Validation is a pure function over the inbound ``PostRequest``; the rules run
in a fixed order and the first violation is the one reported to the client.
Validation always happens before the repository is touched, and the
existence check always happens before any mutation, so a failed request never
leaves a partial write behind.
"""
from typing import List, Optional, Tuple

from ..config import get_settings
from ..logging_config import api_logger
from ..models.post import Post
from ..repositories.posts import PostRepository
from ..responses import InvalidInput, NotFound
from ..schemas.posts import PostRequest, PostResponse

AUTHOR_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 5000
IMAGE_URL_MAX_LENGTH = 2048


def collect_violations(request: Optional[PostRequest]) -> List[str]:
    """Return every rule the request breaks, in rule order."""
    if request is None:
        return ["request body is required"]

    violations = []
    # Length limits apply to the raw value, before trimming
    if request.author is None or not request.author.strip():
        violations.append("author is required")
    elif len(request.author) > AUTHOR_MAX_LENGTH:
        violations.append(f"author must be at most {AUTHOR_MAX_LENGTH} characters")

    if request.content is None or not request.content.strip():
        violations.append("content is required")
    elif len(request.content) > CONTENT_MAX_LENGTH:
        violations.append(f"content must be at most {CONTENT_MAX_LENGTH} characters")

    if request.image_url is not None and len(request.image_url) > IMAGE_URL_MAX_LENGTH:
        violations.append(f"imageUrl must be at most {IMAGE_URL_MAX_LENGTH} characters")

    return violations


def validate_post_request(request: Optional[PostRequest]) -> PostRequest:
    """Raise InvalidInput with the first violation, or return the request."""
    violations = collect_violations(request)
    if violations:
        raise InvalidInput(violations[0], {"violations": violations})
    return request


def normalize_image_url(image_url: Optional[str]) -> Optional[str]:
    """Blank or missing image URLs are stored as absent."""
    if image_url is None or not image_url.strip():
        return None
    return image_url.strip()


class PostService:
    """The five post operations, independent of the HTTP layer."""

    def __init__(self, repository: PostRepository, location_prefix: Optional[str] = None):
        self.repository = repository
        if location_prefix is None:
            location_prefix = get_settings().posts_prefix
        self.location_prefix = location_prefix

    def create(self, request: Optional[PostRequest]) -> Tuple[PostResponse, str]:
        request = validate_post_request(request)
        post = Post(
            request.author.strip(),
            request.content.strip(),
            normalize_image_url(request.image_url),
        )
        saved = self.repository.save(post)
        api_logger.info("Post created", post_id=saved.id)
        return PostResponse.from_post(saved), f"{self.location_prefix}/{saved.id}"

    def list_posts(self) -> List[PostResponse]:
        return [PostResponse.from_post(p) for p in self.repository.find_all()]

    def get(self, post_id: int) -> PostResponse:
        post = self.repository.find_by_id(post_id)
        if post is None:
            raise NotFound()
        return PostResponse.from_post(post)

    def update(self, post_id: int, request: Optional[PostRequest]) -> PostResponse:
        request = validate_post_request(request)
        existing = self.repository.find_by_id(post_id)
        if existing is None:
            raise NotFound()

        existing.apply_update(
            request.author.strip(),
            request.content.strip(),
            normalize_image_url(request.image_url),
        )
        saved = self.repository.save(existing)
        api_logger.info("Post updated", post_id=saved.id)
        return PostResponse.from_post(saved)

    def delete(self, post_id: int) -> None:
        if not self.repository.exists_by_id(post_id):
            raise NotFound()
        self.repository.delete_by_id(post_id)
        api_logger.info("Post deleted", post_id=post_id)
