"""Domain model entities for Circle."""

from circle.domain.model.comment import Comment
from circle.domain.model.feed import FeedPost, FeedReply, FeedView
from circle.domain.model.toggle import Toggle

__all__ = [
    "Comment",
    "FeedPost",
    "FeedReply",
    "FeedView",
    "Toggle",
]
