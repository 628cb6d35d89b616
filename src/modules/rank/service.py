"""Rank workflow: validate, resolve the role, locate the membership, patch it."""

from typing import Any

from fastapi import status

from src.api.core.exceptions.base import RankRelayException
from src.api.core.messages import MessageCode
from src.modules.cloud.client import CloudClient
from src.modules.rank.memberships import MembershipLocator
from src.modules.rank.models import RoleAssignmentRequest, RoleAssignmentResult
from src.modules.rank.roles import RoleResolver
from src.utils.logger import get_logger
from src.utils.settings.cloud import CloudSettings

logger = get_logger(__name__)


def _bad_request(message: str | None = None) -> RankRelayException:
    return RankRelayException(
        MessageCode.BAD_REQUEST,
        status.HTTP_400_BAD_REQUEST,
        {"description": "Missing required fields"},
        message=message,
    )


class RankService:
    """Sets a user's role in a group and lists a group's roles."""

    def __init__(
        self,
        client: CloudClient,
        resolver: RoleResolver,
        locator: MembershipLocator,
    ):
        self.client = client
        self.resolver = resolver
        self.locator = locator

    @classmethod
    def from_settings(cls, settings: CloudSettings) -> "RankService":
        client = CloudClient(settings)
        return cls(
            client,
            RoleResolver(client, page_size=settings.ROLES_PAGE_SIZE),
            MembershipLocator(
                client,
                page_size=settings.MEMBERSHIPS_PAGE_SIZE,
                max_pages=settings.MEMBERSHIP_MAX_PAGES,
            ),
        )

    async def set_user_role(
        self, request: RoleAssignmentRequest
    ) -> RoleAssignmentResult:
        """Move the user to the requested role.

        Nothing is patched unless role resolution and membership lookup both
        succeed; any failure propagates unchanged.
        """
        if (
            not request.group_id
            or not request.user_id
            or (not request.role_id and not request.role_name)
        ):
            raise _bad_request()

        role_id = request.role_id or await self.resolver.resolve_role_id(
            request.group_id, request.role_name
        )
        membership_id = await self.locator.find_membership_id(
            request.group_id, request.user_id
        )
        result = await self.client.update_membership_role(
            request.group_id, membership_id, role_id
        )

        logger.info(
            "Role updated",
            group_id=str(request.group_id),
            user_id=str(request.user_id),
            role_id=str(role_id),
            membership_id=membership_id,
        )

        return RoleAssignmentResult(
            group_id=request.group_id,
            user_id=request.user_id,
            role_id=role_id,
            membership_id=membership_id,
            result=result,
        )

    async def list_roles(self, group_id: int | str | None) -> list[dict[str, Any]]:
        """First page of the group's roles."""
        if not group_id:
            raise _bad_request("Missing groupId.")
        return await self.resolver.fetch_roles(group_id)
