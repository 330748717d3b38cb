"""Authorization domain service."""

import logfire

from circle.domain.error import NotAuthenticatedError, NotAuthorizedError
from circle.domain.model.comment import Comment
from circle.domain.repository import GroupMembershipRepository
from circle.domain.value import ContextSelector, ContextType, Principal

from .base import Service


class AuthorizationService(Service):
    """Decides whether a principal may perform a mutation.

    Every mutating use case calls into this service on each request. Flags
    such as ``is_own`` in assembled feeds are display hints and are never
    consulted here.
    """

    def __init__(self, membership_repository: GroupMembershipRepository) -> None:
        """Initialize authorization service.

        Args:
            membership_repository: Group membership lookup
        """
        self.membership_repository = membership_repository

    def require_principal(self, principal: Principal | None, action: str) -> Principal:
        """Ensure the caller is signed in.

        Args:
            principal: Current principal, None when anonymous
            action: Human readable action for the error message

        Returns:
            The principal

        Raises:
            NotAuthenticatedError: If there is no principal
        """
        if principal is None:
            logfire.warn("Unauthenticated mutation attempt", action=action)
            raise NotAuthenticatedError(action)
        return principal

    async def ensure_can_post(
        self, principal: Principal | None, context: ContextSelector
    ) -> Principal:
        """Check a principal may create a post in a context.

        Group posts require current membership of that group.

        Raises:
            NotAuthenticatedError: If anonymous
            NotAuthorizedError: If posting to a group the principal is not in
        """
        principal = self.require_principal(principal, "create a post")
        if context.context_type != ContextType.GROUP:
            return principal

        with logfire.span(
            "authorization_service.ensure_can_post",
            group_id=str(context.context_id),
            user_id=str(principal.id),
        ):
            is_member = await self.membership_repository.is_member(
                context.context_id, principal.id
            )
            if not is_member:
                logfire.warn(
                    "Post to group rejected - not a member",
                    group_id=str(context.context_id),
                    user_id=str(principal.id),
                )
                raise NotAuthorizedError(
                    "group", str(context.context_id), str(principal.id), "post in"
                )
            return principal

    def ensure_can_reply(self, principal: Principal | None) -> Principal:
        """Any signed-in principal may reply."""
        return self.require_principal(principal, "reply")

    def ensure_author(
        self, principal: Principal | None, comment: Comment, action: str
    ) -> Principal:
        """Check the principal wrote the comment.

        Used for both edit and delete; the comment status is irrelevant.

        Raises:
            NotAuthenticatedError: If anonymous
            NotAuthorizedError: If the principal is not the author
        """
        principal = self.require_principal(principal, f"{action} a comment")
        if comment.author_id != principal.id:
            logfire.warn(
                "Comment ownership check failed",
                action=action,
                comment_id=str(comment.id),
                user_id=str(principal.id),
            )
            raise NotAuthorizedError(
                "comment", str(comment.id), str(principal.id), action
            )
        return principal

    def ensure_can_report(self, principal: Principal | None) -> Principal:
        """Any signed-in principal may report any comment, their own included."""
        return self.require_principal(principal, "report content")

    def ensure_admin(
        self, principal: Principal | None, resource: str, resource_id: str
    ) -> Principal:
        """Check the principal may read or change administrative toggles.

        Raises:
            NotAuthenticatedError: If anonymous
            NotAuthorizedError: If the principal is not an admin
        """
        principal = self.require_principal(principal, "change settings")
        if not principal.is_admin:
            logfire.warn(
                "Toggle access rejected - not an admin",
                resource=resource,
                resource_id=resource_id,
                user_id=str(principal.id),
            )
            raise NotAuthorizedError(resource, resource_id, str(principal.id), "manage")
        return principal
