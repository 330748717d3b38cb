"""Feed assembly domain service."""

from collections import defaultdict
from typing import Iterable

import logfire

from circle.domain.model.comment import Comment
from circle.domain.model.feed import FeedPost, FeedReply, FeedView
from circle.domain.repository import CommentRepository, ProfileRepository
from circle.domain.value import (
    VISIBLE_STATUSES,
    AttachmentKind,
    AuthorInfo,
    CommentId,
    ContextSelector,
    UserId,
)

from .base import Service


class FeedService(Service):
    """Builds the caller-visible view of a feed.

    Visibility depends on status alone: a reported comment is hidden from
    every caller, the reporter included. The viewer only drives the
    ``is_own`` highlight.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        profile_repository: ProfileRepository,
        unknown_author_name: str = "Unknown",
    ) -> None:
        """Initialize feed service.

        Args:
            comment_repository: Comment repository
            profile_repository: Profile lookup for author decoration
            unknown_author_name: Display name for authors without a profile
        """
        self.comment_repository = comment_repository
        self.profile_repository = profile_repository
        self.unknown_author_name = unknown_author_name

    async def assemble(
        self, context: ContextSelector, viewer_id: UserId | None = None
    ) -> FeedView:
        """Assemble the posts of a context with their replies.

        Posts are newest first; replies under each post are oldest first.

        Args:
            context: Feed or group selector
            viewer_id: Calling user, if signed in

        Returns:
            Assembled feed

        Raises:
            TransientError: If the store is unreachable. An unreachable store
                never yields an empty feed.
        """
        with logfire.span(
            "feed_service.assemble",
            context=str(context),
            viewer_id=str(viewer_id) if viewer_id else None,
        ):
            posts = [
                post
                for post in await self.comment_repository.find_posts(
                    context, VISIBLE_STATUSES
                )
                if post.is_visible
            ]
            replies = []
            if posts:
                replies = [
                    reply
                    for reply in await self.comment_repository.find_replies(
                        [post.id for post in posts], VISIBLE_STATUSES
                    )
                    if reply.is_visible
                ]

            replies_by_post: dict[CommentId, list[Comment]] = defaultdict(list)
            for reply in sorted(replies, key=lambda c: c.created_at):
                replies_by_post[reply.parent_id].append(reply)

            authors = await self._authors(c.author_id for c in [*posts, *replies])

            feed_posts = [
                self._to_feed_post(
                    post, replies_by_post.get(post.id, []), authors, viewer_id
                )
                for post in sorted(posts, key=lambda c: c.created_at, reverse=True)
            ]
            logfire.info(
                "Feed assembled",
                context=str(context),
                posts=len(feed_posts),
                replies=len(replies),
            )
            return FeedView(context=context, posts=feed_posts)

    async def list_media(
        self,
        context: ContextSelector,
        kinds: Iterable[AttachmentKind],
        viewer_id: UserId | None = None,
    ) -> list[FeedPost]:
        """List visible posts of a context carrying one of the attachment kinds.

        Backs the group library: videos, or documents, images and links.
        Replies are not included.

        Args:
            context: Feed or group selector
            kinds: Attachment kinds to include
            viewer_id: Calling user, if signed in

        Returns:
            Posts with attachments, newest first
        """
        kinds = list(kinds)
        with logfire.span(
            "feed_service.list_media",
            context=str(context),
            kinds=[k.value for k in kinds],
        ):
            posts = await self.comment_repository.find_with_attachments(
                context, kinds, VISIBLE_STATUSES
            )
            authors = await self._authors(post.author_id for post in posts)
            items = [
                self._to_feed_post(post, [], authors, viewer_id)
                for post in sorted(posts, key=lambda c: c.created_at, reverse=True)
            ]
            logfire.info("Media listed", context=str(context), count=len(items))
            return items

    async def _authors(self, user_ids: Iterable[UserId]) -> dict[UserId, AuthorInfo]:
        unique = set(user_ids)
        if not unique:
            return {}
        return await self.profile_repository.find_display_info(unique)

    def _author(self, authors: dict[UserId, AuthorInfo], user_id: UserId) -> AuthorInfo:
        info = authors.get(user_id)
        if info is None or not info.display_name:
            return AuthorInfo(
                display_name=self.unknown_author_name,
                avatar_ref=info.avatar_ref if info else None,
            )
        return info

    def _to_feed_post(
        self,
        post: Comment,
        replies: list[Comment],
        authors: dict[UserId, AuthorInfo],
        viewer_id: UserId | None,
    ) -> FeedPost:
        return FeedPost(
            id=post.id,
            author_id=post.author_id,
            author=self._author(authors, post.author_id),
            body=post.body,
            attachment=post.attachment,
            status=post.status,
            created_at=post.created_at,
            is_own=viewer_id is not None and post.author_id == viewer_id,
            replies=[
                FeedReply(
                    id=reply.id,
                    post_id=post.id,
                    author_id=reply.author_id,
                    author=self._author(authors, reply.author_id),
                    body=reply.body,
                    status=reply.status,
                    created_at=reply.created_at,
                    is_own=viewer_id is not None and reply.author_id == viewer_id,
                )
                for reply in replies
            ],
        )
