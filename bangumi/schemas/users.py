"""User schemas."""

from __future__ import annotations

from bangumi.schemas import ApiModel
from bangumi.schemas.enums import UserGroup


class Avatar(ApiModel):
    large: str
    medium: str
    small: str


class User(ApiModel):
    id: int
    username: str
    nickname: str
    user_group: UserGroup
    avatar: Avatar
    sign: str = ""


class Me(User):
    """The authenticated user; only returned to the token owner."""

    email: str | None = None
    reg_time: str | None = None
    time_offset: int | None = None
