"""Tests for resolving role names to role ids."""

from unittest.mock import AsyncMock

import pytest

from src.api.core.exceptions.base import RankRelayException
from src.api.core.messages import MessageCode
from src.modules.cloud.client import CloudApiError, CloudClient
from src.modules.rank.roles import RoleResolver

ROLES = [
    {"id": 5, "displayName": "Member"},
    {"id": 9, "displayName": "Moderator"},
    {"id": "12", "displayName": "Officer"},
]


def make_resolver(payload) -> tuple[RoleResolver, AsyncMock]:
    client = AsyncMock(spec=CloudClient)
    client.list_roles.return_value = payload
    return RoleResolver(client, page_size=100), client


@pytest.mark.asyncio
@pytest.mark.parametrize("role_name", ["Moderator", "moderator", "MODERATOR"])
async def test_resolve_is_case_insensitive(role_name):
    resolver, client = make_resolver({"groupRoles": ROLES})

    assert await resolver.resolve_role_id(100, role_name) == 9
    client.list_roles.assert_awaited_once_with(100, 100)


@pytest.mark.asyncio
async def test_resolve_converts_string_ids_to_int():
    resolver, _ = make_resolver({"groupRoles": ROLES})

    assert await resolver.resolve_role_id(100, "officer") == 12


@pytest.mark.asyncio
async def test_resolve_requires_exact_match():
    resolver, _ = make_resolver({"groupRoles": ROLES})

    with pytest.raises(RankRelayException) as exc_info:
        await resolver.resolve_role_id(100, "Mod")

    assert exc_info.value.message_code == MessageCode.ROLE_NOT_FOUND
    assert exc_info.value.status_code == 400
    assert "Mod" in exc_info.value.message
    assert "100" in exc_info.value.message


@pytest.mark.asyncio
async def test_first_match_wins_for_duplicate_names():
    resolver, _ = make_resolver(
        {
            "groupRoles": [
                {"id": 3, "displayName": "Guard"},
                {"id": 4, "displayName": "GUARD"},
            ]
        }
    )

    assert await resolver.resolve_role_id(1, "guard") == 3


@pytest.mark.asyncio
async def test_bare_list_payload_is_accepted():
    resolver, _ = make_resolver(ROLES)

    assert await resolver.resolve_role_id(100, "member") == 5


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [{}, {"groupRoles": "nope"}, {"groupRoles": [{"id": "x", "displayName": "A"}]}],
)
async def test_malformed_roles_payload(payload):
    resolver, _ = make_resolver(payload)

    with pytest.raises(RankRelayException) as exc_info:
        await resolver.resolve_role_id(100, "A")

    assert exc_info.value.message_code == MessageCode.MALFORMED_UPSTREAM_RESPONSE


@pytest.mark.asyncio
async def test_upstream_error_propagates():
    client = AsyncMock(spec=CloudClient)
    client.list_roles.side_effect = CloudApiError(403, "PERMISSION_DENIED: no")
    resolver = RoleResolver(client)

    with pytest.raises(CloudApiError) as exc_info:
        await resolver.resolve_role_id(100, "Member")

    assert exc_info.value.status_code == 403
