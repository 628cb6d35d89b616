"""Rank API schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RankRequest(CamelModel):
    # Presence is checked by the service so missing fields map to BAD_REQUEST.
    # Ids are JSON integers or strings; booleans and floats are rejected
    group_id: StrictInt | StrictStr | None = None
    user_id: StrictInt | StrictStr | None = None
    role_id: StrictInt | StrictStr | None = None
    role_name: StrictStr | None = None


class RankResponse(CamelModel):
    ok: bool = True
    group_id: int | str
    user_id: int | str
    role_id: int | str
    membership_id: str
    result: Any = None


class RoleListResponse(CamelModel):
    ok: bool = True
    group_id: int | str
    roles: list[dict[str, Any]]
