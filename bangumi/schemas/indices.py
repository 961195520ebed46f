"""Index (user-curated subject list) schemas."""

from __future__ import annotations

from bangumi.schemas import ApiModel
from bangumi.schemas.common import Images, InfoboxItem, Stat
from bangumi.schemas.enums import SubjectType
from bangumi.schemas.revisions import Creator


class Index(ApiModel):
    id: int
    title: str
    desc: str = ""
    total: int | None = None
    stat: Stat
    created_at: str
    updated_at: str
    creator: Creator
    ban: bool = False
    nsfw: bool = False


class IndexBasicInfo(ApiModel):
    title: str | None = None
    description: str | None = None


class IndexSubjectAddInfo(ApiModel):
    subject_id: int
    sort: int | None = None
    comment: str | None = None


class IndexSubjectEditInfo(ApiModel):
    sort: int | None = None
    comment: str | None = None


class IndexSubject(ApiModel):
    id: int
    type: SubjectType
    name: str
    name_cn: str = ""
    date: str | None = None
    images: Images | None = None
    infobox: list[InfoboxItem] | None = None
    added_at: str | None = None
    comment: str = ""
