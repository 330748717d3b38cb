"""Domain layer DI providers."""

from dishka import Scope, provide

from circle.config import AuthSettings, FeedSettings
from circle.domain.repository import (
    CommentRepository,
    GroupMembershipRepository,
    ProfileRepository,
    ToggleRepository,
)
from circle.domain.service import (
    AuthorizationService,
    CommentService,
    FeedService,
    JWTService,
    ModerationService,
    ToggleService,
)
from circle.util.clock import MonotonicClock
from circle.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_authorization_service(
        self, membership_repository: GroupMembershipRepository
    ) -> AuthorizationService:
        """Provide authorization domain service."""
        return AuthorizationService(membership_repository=membership_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, clock: MonotonicClock
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository, clock=clock)

    @provide
    def get_moderation_service(
        self, comment_repository: CommentRepository, clock: MonotonicClock
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(comment_repository=comment_repository, clock=clock)

    @provide
    def get_feed_service(
        self,
        comment_repository: CommentRepository,
        profile_repository: ProfileRepository,
        feed_settings: FeedSettings,
    ) -> FeedService:
        """Provide feed assembly domain service."""
        return FeedService(
            comment_repository=comment_repository,
            profile_repository=profile_repository,
            unknown_author_name=feed_settings.unknown_author_name,
        )

    @provide
    def get_toggle_service(self, toggle_repository: ToggleRepository) -> ToggleService:
        """Provide toggle domain service."""
        return ToggleService(toggle_repository=toggle_repository)
