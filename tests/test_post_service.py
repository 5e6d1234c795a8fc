"""
Tests for PostService against a real session.
"""
import pytest

from feedapi.models.post import Post
from feedapi.repositories.posts import PostRepository
from feedapi.responses import InvalidInput, NotFound
from feedapi.schemas.posts import PostRequest
from feedapi.services.posts import PostService


@pytest.fixture
def service(db):
    return PostService(PostRepository(db), "/feed")


class TestPostService:
    """Test the five operations without the HTTP layer."""

    def test_create_returns_location(self, service):
        response, location = service.create(PostRequest(author=" alice ", content=" hi "))
        assert location == f"/feed/{response.id}"
        assert response.author == "alice"
        assert response.content == "hi"
        assert response.modified_date is None

    def test_empty_location_prefix_is_kept(self, db):
        """Test an explicit empty prefix is not replaced by the configured one."""
        service = PostService(PostRepository(db), "")
        response, location = service.create(PostRequest(author="alice", content="hi"))
        assert location == f"/{response.id}"

    def test_default_location_prefix(self, db):
        service = PostService(PostRepository(db))
        response, location = service.create(PostRequest(author="alice", content="hi"))
        assert location == f"/api/posts/{response.id}"

    def test_create_invalid_touches_nothing(self, service, db):
        with pytest.raises(InvalidInput):
            service.create(PostRequest(author="alice", content=""))
        assert db.query(Post).count() == 0

    def test_update_validates_before_lookup(self, service):
        """Test an invalid payload on a missing id reports the payload problem."""
        with pytest.raises(InvalidInput):
            service.update(12345, PostRequest(author="", content="x"))

    def test_update_missing(self, service):
        with pytest.raises(NotFound) as exc_info:
            service.update(12345, PostRequest(author="alice", content="x"))
        assert exc_info.value.status_code == 404

    def test_update_stamps_modified_date(self, service, db):
        created, _ = service.create(PostRequest(author="alice", content="hello"))

        updated = service.update(created.id, PostRequest(author="bob", content=" again ", image_url=" "))

        assert updated.author == "bob"
        assert updated.content == "again"
        assert updated.image_url is None
        assert updated.created_date == created.created_date
        assert updated.modified_date is not None
        assert db.get(Post, created.id).modified_date is not None

    def test_list_and_delete(self, service):
        first, _ = service.create(PostRequest(author="a", content="one"))
        second, _ = service.create(PostRequest(author="b", content="two"))
        assert [p.id for p in service.list_posts()] == [first.id, second.id]

        service.delete(first.id)
        assert [p.id for p in service.list_posts()] == [second.id]

        with pytest.raises(NotFound):
            service.delete(first.id)
        with pytest.raises(NotFound):
            service.get(first.id)

    def test_response_serializes_camel_case(self, service):
        created, _ = service.create(PostRequest(author="alice", content="hello"))
        data = created.model_dump(by_alias=True, mode="json")
        assert set(data) == {"id", "author", "content", "imageUrl", "createdDate", "modifiedDate"}
        assert data["createdDate"].endswith("+00:00")
