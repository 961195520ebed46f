"""User collection endpoints.

Endpoints addressed through `/v0/users/-/...` act on the user owning the
access token; the others take an explicit username and respect privacy
settings of that user.
"""

from __future__ import annotations

from bangumi.schemas.collections import (
    EpisodeCollectionUpdate,
    EpisodesCollectionUpdate,
    SubjectCollectionUpdate,
    UserCharacterCollection,
    UserEpisodeCollection,
    UserPersonCollection,
    UserSubjectCollection,
)
from bangumi.schemas.common import Paged
from bangumi.schemas.enums import CollectionType, EpisodeType, SubjectType
from bangumi.services import BaseService, path_segment

_ME = "/v0/users/-/collections"


class CollectionService(BaseService):
    async def get_collection_subjects(
        self,
        username: str,
        *,
        subject_type: SubjectType | None = None,
        type: CollectionType | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paged[UserSubjectCollection]:
        return await self._http.request_model(
            Paged[UserSubjectCollection],
            "GET",
            f"/v0/users/{path_segment(username)}/collections",
            params={"subject_type": subject_type, "type": type, "limit": limit, "offset": offset},
        )

    async def get_collection_subject(self, username: str, subject_id: int) -> UserSubjectCollection:
        return await self._http.request_model(
            UserSubjectCollection,
            "GET",
            f"/v0/users/{path_segment(username)}/collections/{int(subject_id)}",
        )

    async def post_collection_subject(self, subject_id: int, payload: SubjectCollectionUpdate) -> None:
        """Create or replace the caller's collection entry for a subject."""
        await self._http.request_empty("POST", f"{_ME}/{int(subject_id)}", json_body=payload)

    async def patch_collection_subject(self, subject_id: int, payload: SubjectCollectionUpdate) -> None:
        """Modify an existing collection entry; fails if the subject is not collected."""
        await self._http.request_empty("PATCH", f"{_ME}/{int(subject_id)}", json_body=payload)

    async def get_collection_episodes(
        self,
        subject_id: int,
        *,
        offset: int | None = None,
        limit: int | None = None,
        episode_type: EpisodeType | None = None,
    ) -> Paged[UserEpisodeCollection]:
        return await self._http.request_model(
            Paged[UserEpisodeCollection],
            "GET",
            f"{_ME}/{int(subject_id)}/episodes",
            params={"offset": offset, "limit": limit, "episode_type": episode_type},
        )

    async def patch_collection_episodes(self, subject_id: int, payload: EpisodesCollectionUpdate) -> None:
        await self._http.request_empty("PATCH", f"{_ME}/{int(subject_id)}/episodes", json_body=payload)

    async def get_collection_episode(self, episode_id: int) -> UserEpisodeCollection:
        return await self._http.request_model(
            UserEpisodeCollection, "GET", f"{_ME}/-/episodes/{int(episode_id)}"
        )

    async def put_collection_episode(self, episode_id: int, payload: EpisodeCollectionUpdate) -> None:
        await self._http.request_empty("PUT", f"{_ME}/-/episodes/{int(episode_id)}", json_body=payload)

    async def get_collection_characters(self, username: str) -> Paged[UserCharacterCollection]:
        return await self._http.request_model(
            Paged[UserCharacterCollection],
            "GET",
            f"/v0/users/{path_segment(username)}/collections/-/characters",
        )

    async def get_collection_character(self, username: str, character_id: int) -> UserCharacterCollection:
        return await self._http.request_model(
            UserCharacterCollection,
            "GET",
            f"/v0/users/{path_segment(username)}/collections/-/characters/{int(character_id)}",
        )

    async def get_collection_persons(self, username: str) -> Paged[UserPersonCollection]:
        return await self._http.request_model(
            Paged[UserPersonCollection],
            "GET",
            f"/v0/users/{path_segment(username)}/collections/-/persons",
        )

    async def get_collection_person(self, username: str, person_id: int) -> UserPersonCollection:
        return await self._http.request_model(
            UserPersonCollection,
            "GET",
            f"/v0/users/{path_segment(username)}/collections/-/persons/{int(person_id)}",
        )
