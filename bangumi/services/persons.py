"""Person endpoints."""

from __future__ import annotations

from bangumi.schemas.common import Paged
from bangumi.schemas.enums import SimpleImageType
from bangumi.schemas.persons import PersonCharacter, PersonDetail, PersonSearch, PersonSubject
from bangumi.services import BaseService


class PersonService(BaseService):
    async def search_persons(
        self,
        payload: PersonSearch,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paged[PersonDetail]:
        return await self._http.request_model(
            Paged[PersonDetail],
            "POST",
            "/v0/search/persons",
            params={"limit": limit, "offset": offset},
            json_body=payload,
        )

    async def get_person(self, person_id: int) -> PersonDetail:
        return await self._http.request_model(PersonDetail, "GET", f"/v0/persons/{int(person_id)}")

    async def get_person_image(self, person_id: int, type: SimpleImageType) -> bytes:
        return await self._http.request_bytes(
            "GET",
            f"/v0/persons/{int(person_id)}/image",
            params={"type": type},
        )

    async def get_person_subjects(self, person_id: int) -> list[PersonSubject]:
        return await self._http.request_model(
            list[PersonSubject], "GET", f"/v0/persons/{int(person_id)}/subjects"
        )

    async def get_person_characters(self, person_id: int) -> list[PersonCharacter]:
        return await self._http.request_model(
            list[PersonCharacter], "GET", f"/v0/persons/{int(person_id)}/characters"
        )

    async def collect_person(self, person_id: int) -> None:
        """Add the person to the authenticated user's collection."""
        await self._http.request_empty("POST", f"/v0/persons/{int(person_id)}/collect")

    async def uncollect_person(self, person_id: int) -> None:
        await self._http.request_empty("DELETE", f"/v0/persons/{int(person_id)}/collect")
