"""Index endpoints."""

from __future__ import annotations

from bangumi.schemas.common import Paged
from bangumi.schemas.enums import SubjectType
from bangumi.schemas.indices import (
    Index,
    IndexBasicInfo,
    IndexSubject,
    IndexSubjectAddInfo,
    IndexSubjectEditInfo,
)
from bangumi.services import BaseService


class IndexService(BaseService):
    async def add_index(self) -> Index:
        """Create an empty index owned by the authenticated user."""
        return await self._http.request_model(Index, "POST", "/v0/indices")

    async def get_index(self, index_id: int) -> Index:
        return await self._http.request_model(Index, "GET", f"/v0/indices/{int(index_id)}")

    async def edit_index(self, index_id: int, payload: IndexBasicInfo) -> Index:
        return await self._http.request_model(
            Index, "PUT", f"/v0/indices/{int(index_id)}", json_body=payload
        )

    async def get_index_subjects(
        self,
        index_id: int,
        *,
        type: SubjectType | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paged[IndexSubject]:
        return await self._http.request_model(
            Paged[IndexSubject],
            "GET",
            f"/v0/indices/{int(index_id)}/subjects",
            params={"type": type, "limit": limit, "offset": offset},
        )

    async def add_index_subject(self, index_id: int, payload: IndexSubjectAddInfo) -> None:
        await self._http.request_empty("POST", f"/v0/indices/{int(index_id)}/subjects", json_body=payload)

    async def edit_index_subject(self, index_id: int, subject_id: int, payload: IndexSubjectEditInfo) -> None:
        await self._http.request_empty(
            "PUT",
            f"/v0/indices/{int(index_id)}/subjects/{int(subject_id)}",
            json_body=payload,
        )

    async def delete_index_subject(self, index_id: int, subject_id: int) -> None:
        await self._http.request_empty("DELETE", f"/v0/indices/{int(index_id)}/subjects/{int(subject_id)}")

    async def collect_index(self, index_id: int) -> None:
        await self._http.request_empty("POST", f"/v0/indices/{int(index_id)}/collect")

    async def uncollect_index(self, index_id: int) -> None:
        await self._http.request_empty("DELETE", f"/v0/indices/{int(index_id)}/collect")
