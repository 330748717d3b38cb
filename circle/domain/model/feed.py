"""Assembled feed read models.

These are not persisted; the feed service builds them from comments,
the visibility rule and the profile lookup.
"""

from datetime import datetime
from typing import List, Optional

from circle.domain.model.common import DomainModel
from circle.domain.value import (
    Attachment,
    AuthorInfo,
    CommentId,
    CommentStatus,
    ContextSelector,
    UserId,
)


class FeedReply(DomainModel):
    """A visible reply, decorated with its author."""

    id: CommentId
    post_id: CommentId
    author_id: UserId
    author: AuthorInfo
    body: str
    status: CommentStatus
    created_at: datetime
    is_own: bool = False


class FeedPost(DomainModel):
    """A visible post with its visible replies, oldest reply first."""

    id: CommentId
    author_id: UserId
    author: AuthorInfo
    body: str
    attachment: Optional[Attachment] = None
    status: CommentStatus
    created_at: datetime
    is_own: bool = False
    replies: List[FeedReply] = []


class FeedView(DomainModel):
    """Posts of one context, newest first."""

    context: ContextSelector
    posts: List[FeedPost]
