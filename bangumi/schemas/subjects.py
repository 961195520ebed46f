"""Subject (anime, book, music, game, real) schemas."""

from __future__ import annotations

from pydantic import Field

from bangumi.schemas import ApiModel
from bangumi.schemas.common import Images, InfoboxItem, Tag
from bangumi.schemas.enums import CharacterType, PersonCareer, PersonType, SearchSort, SubjectType
from bangumi.schemas.persons import Person


class Rating(ApiModel):
    rank: int
    total: int
    # Keys are the score buckets "1".."10".
    count: dict[str, int] = Field(default_factory=dict)
    score: float


class CollectionStats(ApiModel):
    wish: int = 0
    collect: int = 0
    doing: int = 0
    on_hold: int = 0
    dropped: int = 0


class Subject(ApiModel):
    id: int
    type: SubjectType
    name: str
    name_cn: str = ""
    summary: str = ""
    series: bool = False
    nsfw: bool = False
    locked: bool = False
    date: str | None = None
    platform: str = ""
    images: Images | None = None
    infobox: list[InfoboxItem] | None = None
    volumes: int = 0
    eps: int = 0
    # Documented as required but missing from some live responses.
    total_episodes: int | None = None
    rating: Rating | None = None
    collection: CollectionStats | None = None
    meta_tags: list[str] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)


class SlimSubject(ApiModel):
    id: int
    type: SubjectType
    name: str
    name_cn: str
    short_summary: str = ""
    date: str | None = None
    images: Images
    volumes: int = 0
    eps: int = 0
    collection_total: int = 0
    score: float = 0.0
    rank: int = 0
    tags: list[Tag] = Field(default_factory=list)


class SubjectSearchFilter(ApiModel):
    type: list[SubjectType] | None = None
    meta_tags: list[str] | None = None
    tag: list[str] | None = None
    air_date: list[str] | None = None
    rating: list[str] | None = None
    rank: list[str] | None = None
    nsfw: bool | None = None


class SubjectSearch(ApiModel):
    keyword: str
    sort: SearchSort | None = None
    filter: SubjectSearchFilter | None = None


class RelatedPerson(ApiModel):
    id: int
    name: str
    type: PersonType
    career: list[PersonCareer] = Field(default_factory=list)
    images: Images | None = None
    relation: str
    eps: str = ""


class RelatedCharacter(ApiModel):
    id: int
    name: str
    summary: str = ""
    type: CharacterType
    images: Images | None = None
    relation: str
    actors: list[Person] = Field(default_factory=list)


class SubjectRelation(ApiModel):
    id: int
    type: SubjectType
    name: str
    name_cn: str
    images: Images | None = None
    relation: str


# Calendar records come from the legacy API and every field may be absent.


class Weekday(ApiModel):
    en: str | None = None
    cn: str | None = None
    ja: str | None = None
    id: int | None = None


class LegacyImages(ApiModel):
    large: str | None = None
    common: str | None = None
    medium: str | None = None
    small: str | None = None
    grid: str | None = None


class LegacyRating(ApiModel):
    total: int | None = None
    count: dict[str, int] | None = None
    score: float | None = None


class LegacyCollection(ApiModel):
    wish: int | None = None
    collect: int | None = None
    doing: int | None = None
    on_hold: int | None = None
    dropped: int | None = None


class LegacySubjectSmall(ApiModel):
    id: int | None = None
    url: str | None = None
    type: SubjectType | None = None
    name: str | None = None
    name_cn: str | None = None
    summary: str | None = None
    air_date: str | None = None
    air_weekday: int | None = None
    images: LegacyImages | None = None
    eps: int | None = None
    eps_count: int | None = None
    rating: LegacyRating | None = None
    rank: int | None = None
    collection: LegacyCollection | None = None


class CalendarDay(ApiModel):
    weekday: Weekday | None = None
    items: list[LegacySubjectSmall] = Field(default_factory=list)
