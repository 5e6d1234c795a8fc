"""
Posts routes for CRUD operations on feed posts.
"""
from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from ..config import get_settings
from ..database import get_db
from ..repositories.posts import PostRepository
from ..schemas.posts import PostRequest, PostResponse
from ..services.posts import PostService

settings = get_settings()

router = APIRouter(prefix=settings.posts_prefix, tags=["posts"])


def get_post_service(db: Session = Depends(get_db)) -> PostService:
    return PostService(PostRepository(db), settings.posts_prefix)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    response: Response,
    post_request: Optional[PostRequest] = Body(None),
    service: PostService = Depends(get_post_service),
):
    """Create a post and point the Location header at it."""
    created, location = service.create(post_request)
    response.headers["Location"] = location
    return created


@router.get("", response_model=List[PostResponse])
def list_posts(service: PostService = Depends(get_post_service)):
    """List every stored post."""
    return service.list_posts()


@router.get("/{post_id}", response_model=PostResponse)
def get_post(post_id: int, service: PostService = Depends(get_post_service)):
    """Get a single post by ID."""
    return service.get(post_id)


@router.put("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: int,
    post_request: Optional[PostRequest] = Body(None),
    service: PostService = Depends(get_post_service),
):
    """Replace author, content and image URL of a post."""
    return service.update(post_id, post_request)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: int, service: PostService = Depends(get_post_service)):
    """Delete a post."""
    service.delete(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
