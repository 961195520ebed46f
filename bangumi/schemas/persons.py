"""Person (staff, voice actor, company) schemas."""

from __future__ import annotations

from pydantic import Field

from bangumi.schemas import ApiModel
from bangumi.schemas.common import InfoboxItem, SimpleImages, Stat
from bangumi.schemas.enums import BloodType, CharacterType, PersonCareer, PersonType, SubjectType


class Person(ApiModel):
    id: int
    name: str
    type: PersonType
    career: list[PersonCareer] = Field(default_factory=list)
    images: SimpleImages | None = None
    short_summary: str = ""
    locked: bool = False


class PersonDetail(ApiModel):
    id: int
    name: str
    type: PersonType
    career: list[PersonCareer] = Field(default_factory=list)
    images: SimpleImages | None = None
    summary: str = ""
    locked: bool = False
    last_modified: str
    infobox: list[InfoboxItem] | None = None
    gender: str | None = None
    blood_type: BloodType | None = None
    birth_year: int | None = None
    birth_mon: int | None = None
    birth_day: int | None = None
    stat: Stat


class PersonSearchFilter(ApiModel):
    career: list[PersonCareer] | None = None


class PersonSearch(ApiModel):
    keyword: str
    filter: PersonSearchFilter | None = None


class PersonSubject(ApiModel):
    id: int
    type: SubjectType
    staff: str
    eps: str = ""
    name: str = ""
    name_cn: str = ""
    image: str | None = None


class PersonCharacter(ApiModel):
    id: int
    name: str
    type: CharacterType
    images: SimpleImages | None = None
    subject_id: int
    subject_type: SubjectType
    subject_name: str = ""
    subject_name_cn: str = ""
    staff: str = ""


__all__ = [
    "Person",
    "PersonCharacter",
    "PersonDetail",
    "PersonSearch",
    "PersonSearchFilter",
    "PersonSubject",
]
