"""Episode schemas."""

from __future__ import annotations

from bangumi.schemas import ApiModel
from bangumi.schemas.enums import EpisodeType


class Episode(ApiModel):
    id: int
    type: EpisodeType
    name: str = ""
    name_cn: str = ""
    sort: float
    # Position within the main story; absent for non-main episodes.
    ep: float | None = None
    airdate: str = ""
    comment: int = 0
    duration: str = ""
    desc: str = ""
    disc: int = 0
    duration_seconds: int | None = None
    subject_id: int | None = None


class EpisodeDetail(Episode):
    subject_id: int
