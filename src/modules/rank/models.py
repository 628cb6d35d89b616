"""Request-scoped values for the rank workflow."""

from dataclasses import dataclass
from typing import Any


@dataclass
class RoleAssignmentRequest:
    """Set `user_id`'s role in `group_id`.

    A truthy `role_id` wins over `role_name`; the name is resolved only when
    no id was given.
    """

    group_id: int | str | None
    user_id: int | str | None
    role_id: int | str | None = None
    role_name: str | None = None


@dataclass
class RoleAssignmentResult:
    group_id: int | str
    user_id: int | str
    role_id: int | str
    membership_id: str
    result: Any
