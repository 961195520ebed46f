"""User endpoints."""

from __future__ import annotations

from bangumi.schemas.enums import AvatarType
from bangumi.schemas.users import Me, User
from bangumi.services import BaseService, path_segment


class UserService(BaseService):
    async def get_user(self, username: str) -> User:
        return await self._http.request_model(User, "GET", f"/v0/users/{path_segment(username)}")

    async def get_user_avatar(self, username: str, type: AvatarType) -> bytes:
        return await self._http.request_bytes(
            "GET",
            f"/v0/users/{path_segment(username)}/avatar",
            params={"type": type},
        )

    async def get_me(self) -> Me:
        """Return the user owning the configured access token."""
        return await self._http.request_model(Me, "GET", "/v0/me")
