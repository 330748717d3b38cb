"""Application layer DI providers."""

from dishka import Scope, provide

from circle.application.usecase.comment import (
    CreatePostUseCase,
    CreateReplyUseCase,
    DeleteCommentUseCase,
    EditCommentUseCase,
    ReportCommentUseCase,
)
from circle.application.usecase.feed import AssembleFeedUseCase, ListMediaUseCase
from circle.application.usecase.toggle import GetTogglesUseCase, SetToggleUseCase
from circle.config import FeedSettings
from circle.domain.service import (
    AuthorizationService,
    CommentService,
    FeedService,
    ModerationService,
    ToggleService,
)
from circle.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Comment use cases
    @provide
    def get_create_post_use_case(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
        feed_settings: FeedSettings,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            comment_service=comment_service,
            authorization_service=authorization_service,
            feed_settings=feed_settings,
        )

    @provide
    def get_create_reply_use_case(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(
            comment_service=comment_service,
            authorization_service=authorization_service,
        )

    @provide
    def get_edit_comment_use_case(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(
            comment_service=comment_service,
            authorization_service=authorization_service,
        )

    @provide
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            authorization_service=authorization_service,
        )

    @provide
    def get_report_comment_use_case(
        self,
        comment_service: CommentService,
        moderation_service: ModerationService,
        authorization_service: AuthorizationService,
    ) -> ReportCommentUseCase:
        """Provide report comment use case."""
        return ReportCommentUseCase(
            comment_service=comment_service,
            moderation_service=moderation_service,
            authorization_service=authorization_service,
        )

    # Feed use cases
    @provide
    def get_assemble_feed_use_case(
        self, feed_service: FeedService
    ) -> AssembleFeedUseCase:
        """Provide assemble feed use case."""
        return AssembleFeedUseCase(feed_service=feed_service)

    @provide
    def get_list_media_use_case(self, feed_service: FeedService) -> ListMediaUseCase:
        """Provide list media use case."""
        return ListMediaUseCase(feed_service=feed_service)

    # Toggle use cases
    @provide
    def get_set_toggle_use_case(
        self,
        toggle_service: ToggleService,
        authorization_service: AuthorizationService,
    ) -> SetToggleUseCase:
        """Provide set toggle use case."""
        return SetToggleUseCase(
            toggle_service=toggle_service,
            authorization_service=authorization_service,
        )

    @provide
    def get_get_toggles_use_case(
        self,
        toggle_service: ToggleService,
        authorization_service: AuthorizationService,
    ) -> GetTogglesUseCase:
        """Provide get toggles use case."""
        return GetTogglesUseCase(
            toggle_service=toggle_service,
            authorization_service=authorization_service,
        )
