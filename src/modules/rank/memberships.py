"""Membership lookup across the pages of a group's member list."""

from typing import Any

from fastapi import status

from src.api.core.exceptions.base import RankRelayException
from src.api.core.messages import MessageCode
from src.modules.cloud.client import CloudClient
from src.modules.rank.roles import malformed_response
from src.utils.logger import get_logger

logger = get_logger(__name__)


def _trailing_segment(resource: Any) -> str:
    return str(resource or "").split("/")[-1]


class MembershipLocator:
    """Finds the membership record id of one user within a group."""

    def __init__(
        self, client: CloudClient, page_size: int = 200, max_pages: int = 1000
    ):
        self.client = client
        self.page_size = page_size
        self.max_pages = max_pages

    @staticmethod
    def membership_id_from_path(path: Any, group_id: int | str) -> str:
        # groups/{groupId}/memberships/{membershipId}
        segments = str(path or "").split("/")
        if len(segments) < 4 or not segments[3]:
            raise malformed_response("memberships", group_id)
        return segments[3]

    async def find_membership_id(
        self, group_id: int | str, user_id: int | str
    ) -> str:
        """Scan pages until the user is found or a page has no nextPageToken."""
        target = str(user_id)
        page_token: str | None = None

        for page_number in range(1, self.max_pages + 1):
            payload = await self.client.list_memberships(
                group_id, self.page_size, page_token
            )
            if not isinstance(payload, dict):
                raise malformed_response("memberships", group_id)

            memberships = payload.get("groupMemberships")
            if memberships is None:
                memberships = []
            if not isinstance(memberships, list):
                raise malformed_response("memberships", group_id)

            for membership in memberships:
                if not isinstance(membership, dict):
                    raise malformed_response("memberships", group_id)
                if _trailing_segment(membership.get("user")) != target:
                    continue

                membership_id = self.membership_id_from_path(
                    membership.get("path"), group_id
                )
                logger.info(
                    "Membership located",
                    group_id=str(group_id),
                    user_id=target,
                    membership_id=membership_id,
                    page=page_number,
                )
                return membership_id

            page_token = payload.get("nextPageToken")
            if not page_token:
                raise RankRelayException(
                    MessageCode.USER_NOT_MEMBER_OF_GROUP,
                    status.HTTP_400_BAD_REQUEST,
                    {"group_id": str(group_id), "user_id": target},
                    message=f"User {user_id} is not a member of group {group_id}.",
                )

        logger.error(
            "Membership scan hit page limit",
            group_id=str(group_id),
            user_id=target,
            max_pages=self.max_pages,
        )
        raise RankRelayException(
            MessageCode.PAGINATION_LIMIT_EXCEEDED,
            status.HTTP_502_BAD_GATEWAY,
            {"group_id": str(group_id), "max_pages": self.max_pages},
            message=(
                f"Membership listing for group {group_id} exceeded "
                f"{self.max_pages} pages."
            ),
        )
