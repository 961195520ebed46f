"""User collection schemas (subjects, episodes, characters, persons)."""

from __future__ import annotations

from pydantic import Field

from bangumi.schemas import ApiModel
from bangumi.schemas.common import SimpleImages
from bangumi.schemas.enums import (
    CharacterType,
    CollectionType,
    EpisodeCollectionType,
    PersonCareer,
    PersonType,
    SubjectType,
)
from bangumi.schemas.episodes import Episode
from bangumi.schemas.subjects import SlimSubject


class UserSubjectCollection(ApiModel):
    subject_id: int
    subject_type: SubjectType
    rate: int = 0
    type: CollectionType
    comment: str | None = None
    tags: list[str] = Field(default_factory=list)
    ep_status: int = 0
    vol_status: int = 0
    # Not bumped by every kind of edit server-side; do not treat as the
    # collection time.
    updated_at: str
    private: bool = False
    subject: SlimSubject | None = None


class SubjectCollectionUpdate(ApiModel):
    """Partial update; fields left as `None` are not sent."""

    type: CollectionType | None = None
    rate: int | None = None
    ep_status: int | None = None
    vol_status: int | None = None
    comment: str | None = None
    private: bool | None = None
    tags: list[str] | None = None


class UserEpisodeCollection(ApiModel):
    episode: Episode
    type: EpisodeCollectionType
    # Unix timestamp (seconds); 0 when never marked.
    updated_at: int = 0


class EpisodesCollectionUpdate(ApiModel):
    episode_id: list[int]
    type: EpisodeCollectionType


class EpisodeCollectionUpdate(ApiModel):
    type: EpisodeCollectionType


class UserCharacterCollection(ApiModel):
    id: int
    name: str
    type: CharacterType
    images: SimpleImages | None = None
    created_at: str


class UserPersonCollection(ApiModel):
    id: int
    name: str
    type: PersonType
    career: list[PersonCareer] = Field(default_factory=list)
    images: SimpleImages | None = None
    created_at: str
