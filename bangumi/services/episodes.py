"""Episode endpoints."""

from __future__ import annotations

from bangumi.schemas.common import Paged
from bangumi.schemas.enums import EpisodeType
from bangumi.schemas.episodes import Episode, EpisodeDetail
from bangumi.services import BaseService


class EpisodeService(BaseService):
    async def get_episodes(
        self,
        subject_id: int,
        *,
        type: EpisodeType | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paged[Episode]:
        return await self._http.request_model(
            Paged[Episode],
            "GET",
            "/v0/episodes",
            params={"subject_id": int(subject_id), "type": type, "limit": limit, "offset": offset},
        )

    async def get_episode(self, episode_id: int) -> EpisodeDetail:
        return await self._http.request_model(EpisodeDetail, "GET", f"/v0/episodes/{int(episode_id)}")
