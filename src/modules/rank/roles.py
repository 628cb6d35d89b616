"""Role name to role id resolution."""

from typing import Any

from fastapi import status

from src.api.core.exceptions.base import RankRelayException
from src.api.core.messages import MessageCode
from src.modules.cloud.client import CloudClient
from src.utils.logger import get_logger

logger = get_logger(__name__)


def malformed_response(what: str, group_id: int | str) -> RankRelayException:
    return RankRelayException(
        MessageCode.MALFORMED_UPSTREAM_RESPONSE,
        status.HTTP_400_BAD_REQUEST,
        {"group_id": str(group_id)},
        message=f"Malformed {what} response for group {group_id}.",
    )


class RoleResolver:
    """Looks up a group's roles and matches them by display name.

    Only the first page of roles is read, so a role beyond `page_size`
    entries cannot be resolved by name.
    """

    def __init__(self, client: CloudClient, page_size: int = 100):
        self.client = client
        self.page_size = page_size

    async def fetch_roles(self, group_id: int | str) -> list[dict[str, Any]]:
        """Return the first page of roles for a group."""
        payload = await self.client.list_roles(group_id, self.page_size)
        roles = payload.get("groupRoles") if isinstance(payload, dict) else payload
        if not isinstance(roles, list):
            raise malformed_response("roles", group_id)
        return roles

    async def resolve_role_id(self, group_id: int | str, role_name: str) -> int:
        """Case-insensitive exact match on displayName; first match wins."""
        wanted = str(role_name).lower()

        for role in await self.fetch_roles(group_id):
            if not isinstance(role, dict):
                raise malformed_response("roles", group_id)
            if str(role.get("displayName") or "").lower() != wanted:
                continue
            try:
                role_id = int(role["id"])
            except (KeyError, TypeError, ValueError):
                raise malformed_response("roles", group_id)

            logger.info(
                "Role resolved",
                group_id=str(group_id),
                role_name=role_name,
                role_id=role_id,
            )
            return role_id

        raise RankRelayException(
            MessageCode.ROLE_NOT_FOUND,
            status.HTTP_400_BAD_REQUEST,
            {"group_id": str(group_id), "role_name": role_name},
            message=f'Role "{role_name}" not found in group {group_id}.',
        )
