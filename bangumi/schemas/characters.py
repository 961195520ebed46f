"""Character schemas."""

from __future__ import annotations

from bangumi.schemas import ApiModel
from bangumi.schemas.common import InfoboxItem, SimpleImages, Stat
from bangumi.schemas.enums import BloodType, CharacterType, SubjectType


class Character(ApiModel):
    id: int
    name: str
    type: CharacterType
    images: SimpleImages | None = None
    summary: str = ""
    locked: bool = False
    infobox: list[InfoboxItem] | None = None
    gender: str | None = None
    blood_type: BloodType | None = None
    birth_year: int | None = None
    birth_mon: int | None = None
    birth_day: int | None = None
    stat: Stat
    nsfw: bool = False


class CharacterSearchFilter(ApiModel):
    nsfw: bool | None = None


class CharacterSearch(ApiModel):
    keyword: str
    filter: CharacterSearchFilter | None = None


class CharacterSubject(ApiModel):
    id: int
    type: SubjectType
    staff: str
    name: str = ""
    name_cn: str = ""
    image: str | None = None


class CharacterPerson(ApiModel):
    id: int
    name: str
    type: CharacterType
    images: SimpleImages | None = None
    subject_id: int
    subject_type: SubjectType
    subject_name: str = ""
    subject_name_cn: str = ""
    staff: str = ""
