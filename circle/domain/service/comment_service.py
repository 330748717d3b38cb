"""Comment domain service."""

from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from circle.domain.error import NotFoundError, ValidationError
from circle.domain.model.comment import Comment
from circle.domain.repository import CommentRepository
from circle.domain.value import Attachment, CommentId, ContextSelector, UserId
from circle.util.clock import MonotonicClock

from .base import Service


class CommentService(Service):
    """Domain service for posts and replies."""

    def __init__(
        self, comment_repository: CommentRepository, clock: MonotonicClock
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            clock: Server clock assigning created_at
        """
        self.comment_repository = comment_repository
        self.clock = clock

    @staticmethod
    def _build(**fields) -> Comment:
        try:
            return Comment(**fields)
        except PydanticValidationError as e:
            raise ValidationError(_first_message(e)) from e

    async def create_post(
        self,
        author_id: UserId,
        context: ContextSelector,
        body: str,
        attachment: Attachment | None = None,
    ) -> Comment:
        """Create a top-level post.

        Args:
            author_id: Author user ID
            context: Feed or group the post belongs to
            body: Post text
            attachment: Optional normalized attachment

        Returns:
            Created post

        Raises:
            ValidationError: If the body is empty or too long
        """
        with logfire.span(
            "comment_service.create_post",
            author_id=str(author_id),
            context=str(context),
            attachment_kind=attachment.kind.value if attachment else None,
        ):
            post = self._build(
                id=CommentId(uuid4()),
                author_id=author_id,
                body=body,
                parent_id=None,
                context_type=context.context_type,
                context_id=context.context_id,
                attachment=attachment,
                created_at=self.clock.now(),
            )
            saved = await self.comment_repository.insert(post)
            logfire.info(
                "Post created",
                comment_id=str(saved.id),
                context=str(context),
            )
            return saved

    async def create_reply(
        self, author_id: UserId, post_id: CommentId, body: str
    ) -> Comment:
        """Reply to a post.

        The target must be a visible post. Replying to a reply is rejected
        rather than re-parented onto the post above it.

        Args:
            author_id: Author user ID
            post_id: Post being replied to
            body: Reply text

        Returns:
            Created reply, in the same context as its post

        Raises:
            NotFoundError: If the post does not exist or is hidden
            ValidationError: If the target is a reply or the body is empty
        """
        with logfire.span(
            "comment_service.create_reply",
            author_id=str(author_id),
            post_id=str(post_id),
        ):
            parent = await self.comment_repository.find_by_id(post_id)
            if parent is None or not parent.is_visible:
                logfire.warn("Reply target not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            if parent.is_reply:
                logfire.warn(
                    "Reply to a reply rejected",
                    post_id=str(post_id),
                    parent_id=str(parent.parent_id),
                )
                raise ValidationError("Replies can only be made to top-level posts")

            reply = self._build(
                id=CommentId(uuid4()),
                author_id=author_id,
                body=body,
                parent_id=parent.id,
                context_type=parent.context_type,
                context_id=parent.context_id,
                created_at=self.clock.now(),
            )
            saved = await self.comment_repository.insert(reply)
            logfire.info(
                "Reply created",
                comment_id=str(saved.id),
                post_id=str(post_id),
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID, whatever its status.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def edit_body(self, comment: Comment, body: str) -> Comment:
        """Replace the body of a comment.

        Only the body changes; status, context and attachment are untouched.

        Raises:
            ValidationError: If the new body is empty or too long
            NotFoundError: If the comment vanished in the meantime
        """
        with logfire.span(
            "comment_service.edit_body",
            comment_id=str(comment.id),
            body_length=len(body),
        ):
            try:
                edited = comment.evolve(body=body)
            except PydanticValidationError as e:
                raise ValidationError(_first_message(e)) from e
            updated = await self.comment_repository.update_body(comment.id, edited.body)
            if updated is None:
                logfire.warn("Comment deleted before edit", comment_id=str(comment.id))
                raise NotFoundError("Comment", str(comment.id))
            logfire.info("Comment edited", comment_id=str(comment.id))
            return updated

    async def delete(self, comment: Comment) -> None:
        """Hard delete a comment.

        Deleting a post deletes its replies with it.
        """
        with logfire.span(
            "comment_service.delete",
            comment_id=str(comment.id),
            is_post=comment.is_post,
        ):
            removed = await self.comment_repository.delete(comment.id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment.id),
                rows_removed=removed,
            )


def _first_message(error: PydanticValidationError) -> str:
    """Plain message of the first pydantic error, without the 'Value error,' prefix."""
    message = error.errors()[0]["msg"]
    return message.removeprefix("Value error, ")
