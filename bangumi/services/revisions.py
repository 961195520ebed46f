"""Wiki revision history endpoints."""

from __future__ import annotations

from bangumi.schemas.common import Paged
from bangumi.schemas.revisions import (
    CharacterRevision,
    DetailedRevision,
    PersonRevision,
    Revision,
    SubjectRevision,
)
from bangumi.services import BaseService


class RevisionService(BaseService):
    async def _list(
        self, kind: str, id_param: str, target_id: int, limit: int | None, offset: int | None
    ) -> Paged[Revision]:
        return await self._http.request_model(
            Paged[Revision],
            "GET",
            f"/v0/revisions/{kind}",
            params={id_param: int(target_id), "limit": limit, "offset": offset},
        )

    async def get_revision_persons(
        self, person_id: int, *, limit: int | None = None, offset: int | None = None
    ) -> Paged[Revision]:
        return await self._list("persons", "person_id", person_id, limit, offset)

    async def get_revision_person(self, revision_id: int) -> PersonRevision:
        return await self._http.request_model(
            PersonRevision, "GET", f"/v0/revisions/persons/{int(revision_id)}"
        )

    async def get_revision_characters(
        self, character_id: int, *, limit: int | None = None, offset: int | None = None
    ) -> Paged[Revision]:
        return await self._list("characters", "character_id", character_id, limit, offset)

    async def get_revision_character(self, revision_id: int) -> CharacterRevision:
        return await self._http.request_model(
            CharacterRevision, "GET", f"/v0/revisions/characters/{int(revision_id)}"
        )

    async def get_revision_subjects(
        self, subject_id: int, *, limit: int | None = None, offset: int | None = None
    ) -> Paged[Revision]:
        return await self._list("subjects", "subject_id", subject_id, limit, offset)

    async def get_revision_subject(self, revision_id: int) -> SubjectRevision:
        return await self._http.request_model(
            SubjectRevision, "GET", f"/v0/revisions/subjects/{int(revision_id)}"
        )

    async def get_revision_episodes(
        self, episode_id: int, *, limit: int | None = None, offset: int | None = None
    ) -> Paged[Revision]:
        return await self._list("episodes", "episode_id", episode_id, limit, offset)

    async def get_revision_episode(self, revision_id: int) -> DetailedRevision:
        return await self._http.request_model(
            DetailedRevision, "GET", f"/v0/revisions/episodes/{int(revision_id)}"
        )
