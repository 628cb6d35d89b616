"""Rank domain router."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query

from src.api.core.dependencies import RankServiceDep, require_game_secret
from src.api.rank.schemas import RankRequest, RankResponse, RoleListResponse
from src.modules.rank.models import RoleAssignmentRequest

router = APIRouter(tags=["rank"])


@router.post(
    "/rank",
    response_model=RankResponse,
    dependencies=[Depends(require_game_secret)],
)
async def set_rank(
    rank_service: RankServiceDep,
    rank_data: Annotated[RankRequest | None, Body()] = None,
) -> RankResponse:
    """Set a player's role in a group by role id or role name."""
    rank_data = rank_data or RankRequest()
    result = await rank_service.set_user_role(
        RoleAssignmentRequest(
            group_id=rank_data.group_id,
            user_id=rank_data.user_id,
            role_id=rank_data.role_id,
            role_name=rank_data.role_name,
        )
    )

    return RankResponse(
        group_id=result.group_id,
        user_id=result.user_id,
        role_id=result.role_id,
        membership_id=result.membership_id,
        result=result.result,
    )


@router.get("/roles", response_model=RoleListResponse)
async def list_roles(
    rank_service: RankServiceDep,
    group_id: Annotated[str | None, Query(alias="groupId")] = None,
) -> RoleListResponse:
    """List the first page of a group's roles."""
    roles = await rank_service.list_roles(group_id)
    return RoleListResponse(group_id=group_id, roles=roles)
