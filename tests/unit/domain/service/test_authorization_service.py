"""Unit tests for AuthorizationService."""

from uuid import uuid4

import pytest

from circle.domain.error import NotAuthenticatedError, NotAuthorizedError
from circle.domain.repository import GroupMembershipRepository
from circle.domain.service import AuthorizationService
from circle.domain.value import ContextSelector, GroupId
from tests.conftest import make_comment, make_principal
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestEnsureCanPost:
    """Tests for ensure_can_post."""

    @pytest.mark.asyncio
    async def test_anonymous_cannot_post(self, unit_env):
        authorization_service = await unit_env.get(AuthorizationService)

        with pytest.raises(NotAuthenticatedError):
            await authorization_service.ensure_can_post(None, ContextSelector.feed())

    @pytest.mark.asyncio
    async def test_any_principal_can_post_to_feed(self, unit_env):
        authorization_service = await unit_env.get(AuthorizationService)
        principal = make_principal()

        result = await authorization_service.ensure_can_post(
            principal, ContextSelector.feed()
        )

        assert result == principal

    @pytest.mark.asyncio
    async def test_non_member_cannot_post_to_group(self, unit_env):
        """Missing membership is a rejection, not a silent drop."""
        authorization_service = await unit_env.get(AuthorizationService)

        with pytest.raises(NotAuthorizedError):
            await authorization_service.ensure_can_post(
                make_principal(), ContextSelector.group(GroupId(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_member_can_post_to_group(self, unit_env):
        authorization_service = await unit_env.get(AuthorizationService)
        membership_repo = await unit_env.get(GroupMembershipRepository)
        principal = make_principal()
        group_id = GroupId(uuid4())
        membership_repo.add_member(group_id, principal.id)

        result = await authorization_service.ensure_can_post(
            principal, ContextSelector.group(group_id)
        )

        assert result == principal

    @pytest.mark.asyncio
    async def test_former_member_cannot_post(self, unit_env):
        """Membership is checked on every request."""
        authorization_service = await unit_env.get(AuthorizationService)
        membership_repo = await unit_env.get(GroupMembershipRepository)
        principal = make_principal()
        group_id = GroupId(uuid4())
        membership_repo.add_member(group_id, principal.id)
        membership_repo.remove_member(group_id, principal.id)

        with pytest.raises(NotAuthorizedError):
            await authorization_service.ensure_can_post(
                principal, ContextSelector.group(group_id)
            )


class TestEnsureAuthor:
    """Tests for ensure_author and the other principal checks."""

    @pytest.mark.asyncio
    async def test_author_passes(self, unit_env):
        authorization_service = await unit_env.get(AuthorizationService)
        principal = make_principal()

        authorization_service.ensure_author(
            principal, make_comment(author_id=principal.id), "edit"
        )

    @pytest.mark.asyncio
    async def test_non_author_is_rejected(self, unit_env):
        authorization_service = await unit_env.get(AuthorizationService)

        with pytest.raises(NotAuthorizedError):
            authorization_service.ensure_author(make_principal(), make_comment(), "delete")

    @pytest.mark.asyncio
    async def test_admin_is_not_an_author(self, unit_env):
        """Admin role does not grant edit rights over other people's comments."""
        authorization_service = await unit_env.get(AuthorizationService)

        with pytest.raises(NotAuthorizedError):
            authorization_service.ensure_author(
                make_principal(is_admin=True), make_comment(), "edit"
            )

    @pytest.mark.asyncio
    async def test_anonymous_cannot_reply_or_report(self, unit_env):
        authorization_service = await unit_env.get(AuthorizationService)

        with pytest.raises(NotAuthenticatedError):
            authorization_service.ensure_can_reply(None)
        with pytest.raises(NotAuthenticatedError):
            authorization_service.ensure_can_report(None)

    @pytest.mark.asyncio
    async def test_only_admins_manage_toggles(self, unit_env):
        authorization_service = await unit_env.get(AuthorizationService)

        with pytest.raises(NotAuthorizedError):
            authorization_service.ensure_admin(make_principal(), "plan", "pro")
        admin = make_principal(is_admin=True)
        assert authorization_service.ensure_admin(admin, "plan", "pro") == admin
