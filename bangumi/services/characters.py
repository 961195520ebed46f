"""Character endpoints."""

from __future__ import annotations

from bangumi.schemas.characters import Character, CharacterPerson, CharacterSearch, CharacterSubject
from bangumi.schemas.common import Paged
from bangumi.schemas.enums import SimpleImageType
from bangumi.services import BaseService


class CharacterService(BaseService):
    async def search_characters(
        self,
        payload: CharacterSearch,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paged[Character]:
        return await self._http.request_model(
            Paged[Character],
            "POST",
            "/v0/search/characters",
            params={"limit": limit, "offset": offset},
            json_body=payload,
        )

    async def get_character(self, character_id: int) -> Character:
        return await self._http.request_model(Character, "GET", f"/v0/characters/{int(character_id)}")

    async def get_character_image(self, character_id: int, type: SimpleImageType) -> bytes:
        return await self._http.request_bytes(
            "GET",
            f"/v0/characters/{int(character_id)}/image",
            params={"type": type},
        )

    async def get_character_subjects(self, character_id: int) -> list[CharacterSubject]:
        return await self._http.request_model(
            list[CharacterSubject], "GET", f"/v0/characters/{int(character_id)}/subjects"
        )

    async def get_character_persons(self, character_id: int) -> list[CharacterPerson]:
        return await self._http.request_model(
            list[CharacterPerson], "GET", f"/v0/characters/{int(character_id)}/persons"
        )

    async def collect_character(self, character_id: int) -> None:
        """Add the character to the authenticated user's collection."""
        await self._http.request_empty("POST", f"/v0/characters/{int(character_id)}/collect")

    async def uncollect_character(self, character_id: int) -> None:
        await self._http.request_empty("DELETE", f"/v0/characters/{int(character_id)}/collect")
