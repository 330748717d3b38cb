"""Domain services."""

from .authorization_service import AuthorizationService
from .base import Service
from .comment_service import CommentService
from .feed_service import FeedService
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .toggle_service import ToggleService

__all__ = [
    "AuthorizationService",
    "CommentService",
    "FeedService",
    "JWTService",
    "ModerationService",
    "Service",
    "ToggleService",
]
