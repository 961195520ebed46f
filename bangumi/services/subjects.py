"""Subject endpoints, plus the daily broadcast calendar."""

from __future__ import annotations

from bangumi.schemas.common import Paged
from bangumi.schemas.enums import ImageType, SubjectBrowseSort, SubjectCategory, SubjectType
from bangumi.schemas.subjects import (
    CalendarDay,
    RelatedCharacter,
    RelatedPerson,
    Subject,
    SubjectRelation,
    SubjectSearch,
)
from bangumi.services import BaseService


class SubjectService(BaseService):
    async def get_calendar(self) -> list[CalendarDay]:
        """Return this week's airing schedule grouped by weekday."""
        return await self._http.request_model(list[CalendarDay], "GET", "/calendar")

    async def search_subjects(
        self,
        payload: SubjectSearch,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paged[Subject]:
        return await self._http.request_model(
            Paged[Subject],
            "POST",
            "/v0/search/subjects",
            params={"limit": limit, "offset": offset},
            json_body=payload,
        )

    async def get_subjects(
        self,
        type: SubjectType,
        *,
        cat: SubjectCategory | int | None = None,
        series: bool | None = None,
        platform: str | None = None,
        sort: SubjectBrowseSort | None = None,
        year: int | None = None,
        month: int | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paged[Subject]:
        """Browse subjects of one type.

        `cat` is interpreted according to `type` (e.g. `SubjectAnimeCategory`
        for anime), and `series` only applies to books.
        """
        return await self._http.request_model(
            Paged[Subject],
            "GET",
            "/v0/subjects",
            params={
                "type": type,
                "cat": cat,
                "series": series,
                "platform": platform,
                "sort": sort,
                "year": year,
                "month": month,
                "limit": limit,
                "offset": offset,
            },
        )

    async def get_subject(self, subject_id: int) -> Subject:
        return await self._http.request_model(Subject, "GET", f"/v0/subjects/{int(subject_id)}")

    async def get_subject_image(self, subject_id: int, type: ImageType) -> bytes:
        return await self._http.request_bytes(
            "GET",
            f"/v0/subjects/{int(subject_id)}/image",
            params={"type": type},
        )

    async def get_subject_persons(self, subject_id: int) -> list[RelatedPerson]:
        return await self._http.request_model(
            list[RelatedPerson], "GET", f"/v0/subjects/{int(subject_id)}/persons"
        )

    async def get_subject_characters(self, subject_id: int) -> list[RelatedCharacter]:
        return await self._http.request_model(
            list[RelatedCharacter], "GET", f"/v0/subjects/{int(subject_id)}/characters"
        )

    async def get_subject_subjects(self, subject_id: int) -> list[SubjectRelation]:
        return await self._http.request_model(
            list[SubjectRelation], "GET", f"/v0/subjects/{int(subject_id)}/subjects"
        )
