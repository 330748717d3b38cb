"""End-to-end tests for the feed, comment and moderation endpoints."""

import asyncio
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from circle.config import Settings
from circle.domain.repository import GroupMembershipRepository, ProfileRepository
from circle.interface.api.app import create_app
from circle.util.di.container import setup_di
from circle.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container shared by the app and the test for seeding."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, container)
    return TestClient(app_instance)


def login(user_id=None, display_name="Ada", is_admin=False) -> dict:
    """Session cookie for a freshly signed-in user."""
    token = create_token(
        str(user_id or uuid4()), display_name, Settings().auth, is_admin=is_admin
    )
    return {"auth_token": token}


def resolve(container, dependency):
    """Fetch an app-scoped in-memory repository for seeding."""
    return asyncio.run(container.get(dependency))


class TestFeedFlow:
    """End-to-end tests for posting, replying and reading the feed.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_empty_feed_without_auth(self, client):
        # Act
        response = client.get("/feed")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["context_type"] == "feed"
        assert data["posts"] == []

    def test_post_without_auth_fails(self, client):
        response = client.post("/feed/posts", json={"body": "Hello"})

        assert response.status_code == 401

    def test_post_with_invalid_token_fails(self, client):
        response = client.post(
            "/feed/posts",
            json={"body": "Hello"},
            cookies={"auth_token": "invalid-token"},
        )

        assert response.status_code == 401

    def test_blank_post_is_rejected(self, client):
        response = client.post("/feed/posts", json={"body": "  "}, cookies=login())

        assert response.status_code == 400

    def test_post_reply_and_read(self, client, container):
        """A thread shows up with author names and ownership flags."""
        # Arrange
        author_id, replier_id = uuid4(), uuid4()
        resolve(container, ProfileRepository).add_profile(author_id, "Ada")
        author = login(author_id)

        # Act
        post = client.post(
            "/feed/posts",
            json={
                "body": "Talk recording",
                "attachment": {"kind": "video", "url": "https://youtu.be/abc123"},
            },
            cookies=author,
        )
        reply = client.post(
            f"/comments/{post.json()['comment_id']}/replies",
            json={"body": "Thanks!"},
            cookies=login(replier_id, "Grace"),
        )
        feed = client.get("/feed", cookies=author)

        # Assert
        assert post.status_code == 201
        assert post.json()["attachment"]["embed_url"] == (
            "https://www.youtube.com/embed/abc123"
        )
        assert reply.status_code == 201
        posts = feed.json()["posts"]
        assert len(posts) == 1
        assert posts[0]["author"]["display_name"] == "Ada"
        assert posts[0]["is_own"] is True
        assert posts[0]["replies"][0]["body"] == "Thanks!"
        assert posts[0]["replies"][0]["author"]["display_name"] == "Unknown"
        assert posts[0]["replies"][0]["is_own"] is False

    def test_edit_and_delete_are_author_only(self, client):
        author = login()
        post_id = client.post(
            "/feed/posts", json={"body": "Draft"}, cookies=author
        ).json()["comment_id"]

        forbidden_edit = client.patch(
            f"/comments/{post_id}", json={"body": "Mine now"}, cookies=login()
        )
        forbidden_delete = client.delete(f"/comments/{post_id}", cookies=login())
        edit = client.patch(f"/comments/{post_id}", json={"body": "Final"}, cookies=author)
        delete = client.delete(f"/comments/{post_id}", cookies=author)

        assert forbidden_edit.status_code == 403
        assert forbidden_delete.status_code == 403
        assert edit.status_code == 200
        assert edit.json()["body"] == "Final"
        assert delete.status_code == 204
        assert client.get("/feed").json()["posts"] == []

    def test_missing_comment_is_404(self, client):
        response = client.delete(f"/comments/{uuid4()}", cookies=login())

        assert response.status_code == 404

    def test_report_hides_comment_for_everyone(self, client):
        author = login()
        reporter = login()
        post_id = client.post(
            "/feed/posts", json={"body": "Buy cheap pills"}, cookies=author
        ).json()["comment_id"]

        first = client.post(
            f"/comments/{post_id}/report",
            json={"reason": "spam", "details": "Advertising"},
            cookies=reporter,
        )
        second = client.post(
            f"/comments/{post_id}/report", json={"reason": "spam"}, cookies=login()
        )

        assert first.status_code == 200
        assert first.json()["hidden"] is True
        assert second.status_code == 200
        assert second.json()["hidden"] is False
        assert client.get("/feed", cookies=author).json()["posts"] == []
        assert client.get("/feed", cookies=reporter).json()["posts"] == []

    def test_report_requires_reason(self, client):
        post_id = client.post(
            "/feed/posts", json={"body": "Hello"}, cookies=login()
        ).json()["comment_id"]

        response = client.post(
            f"/comments/{post_id}/report", json={"reason": " "}, cookies=login()
        )

        assert response.status_code == 400

    def test_overlong_report_details_are_rejected(self, client):
        author = login()
        post_id = client.post(
            "/feed/posts", json={"body": "Hello"}, cookies=author
        ).json()["comment_id"]

        response = client.post(
            f"/comments/{post_id}/report",
            json={"reason": "spam", "details": "x" * 2001},
            cookies=login(),
        )

        assert response.status_code == 400
        assert len(client.get("/feed", cookies=author).json()["posts"]) == 1

    def test_script_link_attachment_is_rejected(self, client):
        response = client.post(
            "/feed/posts",
            json={
                "body": "Click me",
                "attachment": {"kind": "link", "url": "javascript:alert(1)"},
            },
            cookies=login(),
        )

        assert response.status_code == 400
        assert client.get("/feed").json()["posts"] == []


class TestGroupFeed:
    """End-to-end tests for group feeds and the group library."""

    def test_non_member_cannot_post(self, client):
        response = client.post(
            f"/groups/{uuid4()}/posts", json={"body": "Hi all"}, cookies=login()
        )

        assert response.status_code == 403

    def test_member_posts_and_library(self, client, container):
        # Arrange
        user_id, group_id = uuid4(), uuid4()
        resolve(container, GroupMembershipRepository).add_member(group_id, user_id)
        member = login(user_id)

        # Act
        client.post(
            f"/groups/{group_id}/posts",
            json={
                "body": "Reading list",
                "attachment": {
                    "kind": "document",
                    "url": "https://example.org/papers/intro.pdf",
                },
            },
            cookies=member,
        )
        client.post(
            f"/groups/{group_id}/posts",
            json={"body": "Plain text"},
            cookies=member,
        )
        group_feed = client.get(f"/groups/{group_id}/feed")
        documents = client.get(
            f"/groups/{group_id}/media", params={"kind": ["document", "link"]}
        )
        videos = client.get(f"/groups/{group_id}/media", params={"kind": "video"})

        # Assert
        assert group_feed.status_code == 200
        assert group_feed.json()["context_id"] == str(group_id)
        assert group_feed.json()["total"] == 2
        assert client.get("/feed").json()["posts"] == []
        assert documents.json()["total"] == 1
        assert documents.json()["items"][0]["attachment"]["name"] == "intro.pdf"
        assert videos.json()["items"] == []


class TestGuidelines:
    """End-to-end tests for the guidelines endpoint."""

    def test_guidelines(self, client):
        response = client.get("/feed/guidelines")

        assert response.status_code == 200
        assert "respectful" in response.json()["guidelines"]
