"""Wiki revision history schemas."""

from __future__ import annotations

from typing import Any

from bangumi.schemas import ApiModel


class Creator(ApiModel):
    username: str
    nickname: str


class Revision(ApiModel):
    id: int
    type: int
    creator: Creator | None = None
    summary: str = ""
    created_at: str


class RevisionExtra(ApiModel):
    img: str | None = None


class PersonRevisionProfession(ApiModel):
    producer: str | None = None
    mangaka: str | None = None
    artist: str | None = None
    seiyu: str | None = None
    writer: str | None = None
    illustrator: str | None = None
    actor: str | None = None


class PersonRevisionDataItem(ApiModel):
    prsn_infobox: str
    prsn_summary: str
    profession: PersonRevisionProfession
    extra: RevisionExtra
    prsn_name: str


class PersonRevision(Revision):
    # Keyed by person id.
    data: dict[str, PersonRevisionDataItem] | None = None


class CharacterRevisionDataItem(ApiModel):
    infobox: str
    summary: str
    name: str
    extra: RevisionExtra


class CharacterRevision(Revision):
    # Keyed by character id.
    data: dict[str, CharacterRevisionDataItem] | None = None


class SubjectRevisionData(ApiModel):
    field_eps: int
    field_infobox: str
    field_summary: str
    name: str
    name_cn: str
    platform: int
    subject_id: int
    type: int
    type_id: int
    vote_field: str


class SubjectRevision(Revision):
    data: SubjectRevisionData | None = None


class DetailedRevision(Revision):
    """Episode revision; the payload layout is not fixed server-side."""

    data: dict[str, Any] | None = None
