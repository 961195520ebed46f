from __future__ import annotations

from typing import Any

import pytest
from pydantic import BaseModel, TypeAdapter

from bangumi.schemas.characters import Character, CharacterPerson, CharacterSearch, CharacterSubject
from bangumi.schemas.collections import (
    EpisodeCollectionUpdate,
    EpisodesCollectionUpdate,
    SubjectCollectionUpdate,
    UserCharacterCollection,
    UserEpisodeCollection,
    UserPersonCollection,
    UserSubjectCollection,
)
from bangumi.schemas.common import Paged
from bangumi.schemas.episodes import Episode, EpisodeDetail
from bangumi.schemas.error import ErrorBody
from bangumi.schemas.indices import Index, IndexBasicInfo, IndexSubject, IndexSubjectAddInfo
from bangumi.schemas.persons import PersonCharacter, PersonDetail, PersonSearch, PersonSubject
from bangumi.schemas.revisions import (
    CharacterRevision,
    DetailedRevision,
    PersonRevision,
    Revision,
    SubjectRevision,
)
from bangumi.schemas.subjects import (
    CalendarDay,
    RelatedCharacter,
    RelatedPerson,
    SlimSubject,
    Subject,
    SubjectRelation,
    SubjectSearch,
)
from bangumi.schemas.users import Me, User

IMAGES = {"large": "l", "common": "c", "medium": "m", "small": "s", "grid": "g"}
SIMPLE_IMAGES = {"large": "l", "medium": "m", "small": "s", "grid": "g"}
INFOBOX = [
    {"key": "中文名", "value": "团子大家族"},
    {"key": "别名", "value": [{"v": "CLANNAD"}, {"k": "romaji", "v": "Kuranado"}]},
]
TAGS = [{"name": "京阿尼", "count": 100, "total_cont": 120}]
STAT = {"comments": 3, "collects": 4}
CREATOR = {"username": "sai", "nickname": "Sai"}
AVATAR = {"large": "l", "medium": "m", "small": "s"}

SUBJECT = {
    "id": 51,
    "type": 2,
    "name": "CLANNAD",
    "name_cn": "团子大家族",
    "summary": "s",
    "series": False,
    "nsfw": False,
    "locked": False,
    "date": "2007-10-04",
    "platform": "TV",
    "images": IMAGES,
    "infobox": INFOBOX,
    "volumes": 0,
    "eps": 24,
    "total_episodes": 24,
    "rating": {"rank": 10, "total": 1000, "count": {"1": 1, "10": 500}, "score": 8.6},
    "collection": {"wish": 1, "collect": 2, "doing": 3, "on_hold": 4, "dropped": 5},
    "meta_tags": ["TV"],
    "tags": TAGS,
}
SLIM_SUBJECT = {
    "id": 51,
    "type": 2,
    "name": "CLANNAD",
    "name_cn": "团子大家族",
    "short_summary": "s",
    "date": "2007-10-04",
    "images": IMAGES,
    "volumes": 0,
    "eps": 24,
    "collection_total": 9,
    "score": 8.6,
    "rank": 10,
    "tags": TAGS,
}
PERSON = {
    "id": 3,
    "name": "中原麻衣",
    "type": 1,
    "career": ["seiyu"],
    "images": SIMPLE_IMAGES,
    "short_summary": "s",
    "locked": False,
}
EPISODE = {
    "id": 7,
    "type": 0,
    "name": "ep",
    "name_cn": "话",
    "sort": 1.0,
    "ep": 1.0,
    "airdate": "2007-10-04",
    "comment": 2,
    "duration": "00:24:00",
    "desc": "d",
    "disc": 0,
    "duration_seconds": 1440,
    "subject_id": 51,
}
USER = {"id": 1, "username": "sai", "nickname": "Sai", "user_group": 10, "avatar": AVATAR, "sign": "hi"}
REVISION = {"id": 9, "type": 1, "creator": CREATOR, "summary": "edit", "created_at": "2024-01-01T00:00:00Z"}

CASES: list[tuple[Any, dict[str, Any]]] = [
    (Subject, SUBJECT),
    (SlimSubject, SLIM_SUBJECT),
    (
        RelatedPerson,
        {"id": 3, "name": "P", "type": 1, "career": ["writer"], "images": IMAGES, "relation": "原作", "eps": "1"},
    ),
    (
        RelatedCharacter,
        {"id": 12, "name": "C", "summary": "s", "type": 1, "images": IMAGES, "relation": "主角", "actors": [PERSON]},
    ),
    (SubjectRelation, {"id": 52, "type": 2, "name": "S", "name_cn": "续", "images": IMAGES, "relation": "续集"}),
    (
        CalendarDay,
        {
            "weekday": {"en": "Mon", "cn": "星期一", "ja": "月耀日", "id": 1},
            "items": [
                {
                    "id": 51,
                    "url": "http://bgm.tv/subject/51",
                    "type": 2,
                    "name": "CLANNAD",
                    "name_cn": "团子大家族",
                    "summary": "",
                    "air_date": "2007-10-04",
                    "air_weekday": 4,
                    "images": IMAGES,
                    "eps": 24,
                    "eps_count": 24,
                    "rating": {"total": 10, "count": {"10": 10}, "score": 9.0},
                    "rank": 10,
                    "collection": {"wish": 1, "collect": 2, "doing": 3, "on_hold": 4, "dropped": 5},
                }
            ],
        },
    ),
    (
        Character,
        {
            "id": 12,
            "name": "古河渚",
            "type": 1,
            "images": SIMPLE_IMAGES,
            "summary": "s",
            "locked": False,
            "infobox": INFOBOX,
            "gender": "female",
            "blood_type": 1,
            "birth_year": 1990,
            "birth_mon": 12,
            "birth_day": 24,
            "stat": STAT,
            "nsfw": False,
        },
    ),
    (CharacterSubject, {"id": 51, "type": 2, "staff": "主角", "name": "CLANNAD", "name_cn": "团", "image": "i"}),
    (
        CharacterPerson,
        {
            "id": 3,
            "name": "中原麻衣",
            "type": 1,
            "images": SIMPLE_IMAGES,
            "subject_id": 51,
            "subject_type": 2,
            "subject_name": "CLANNAD",
            "subject_name_cn": "团",
            "staff": "主角",
        },
    ),
    (
        PersonDetail,
        {
            **PERSON,
            "summary": "s",
            "last_modified": "2024-01-01T00:00:00Z",
            "infobox": INFOBOX,
            "gender": "female",
            "blood_type": 2,
            "birth_year": 1981,
            "birth_mon": 3,
            "birth_day": 8,
            "stat": STAT,
        },
    ),
    (PersonSubject, {"id": 51, "type": 2, "staff": "主演", "eps": "1-24", "name": "C", "name_cn": "团", "image": "i"}),
    (
        PersonCharacter,
        {
            "id": 12,
            "name": "古河渚",
            "type": 1,
            "images": SIMPLE_IMAGES,
            "subject_id": 51,
            "subject_type": 2,
            "subject_name": "CLANNAD",
            "subject_name_cn": "团",
            "staff": "主角",
        },
    ),
    (Episode, EPISODE),
    (EpisodeDetail, EPISODE),
    (User, USER),
    (Me, {**USER, "email": "sai@example.com", "reg_time": "2020-01-01T00:00:00+08:00", "time_offset": 8}),
    (
        UserSubjectCollection,
        {
            "subject_id": 51,
            "subject_type": 2,
            "rate": 9,
            "type": 2,
            "comment": "good",
            "tags": ["key"],
            "ep_status": 24,
            "vol_status": 0,
            "updated_at": "2024-01-01T00:00:00+08:00",
            "private": True,
            "subject": SLIM_SUBJECT,
        },
    ),
    (UserEpisodeCollection, {"episode": EPISODE, "type": 2, "updated_at": 1700000000}),
    (
        UserCharacterCollection,
        {"id": 12, "name": "古河渚", "type": 1, "images": SIMPLE_IMAGES, "created_at": "2024-01-01T00:00:00Z"},
    ),
    (
        UserPersonCollection,
        {
            "id": 3,
            "name": "中原麻衣",
            "type": 1,
            "career": ["seiyu", "artist"],
            "images": SIMPLE_IMAGES,
            "created_at": "2024-01-01T00:00:00Z",
        },
    ),
    (
        Index,
        {
            "id": 15045,
            "title": "t",
            "desc": "d",
            "total": 1,
            "stat": STAT,
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-02T00:00:00Z",
            "creator": CREATOR,
            "ban": False,
            "nsfw": False,
        },
    ),
    (
        IndexSubject,
        {
            "id": 51,
            "type": 2,
            "name": "CLANNAD",
            "name_cn": "团",
            "date": "2007-10-04",
            "images": IMAGES,
            "infobox": INFOBOX,
            "added_at": "2024-01-01T00:00:00Z",
            "comment": "c",
        },
    ),
    (Revision, REVISION),
    (
        PersonRevision,
        {
            **REVISION,
            "data": {
                "3": {
                    "prsn_infobox": "{{Infobox}}",
                    "prsn_summary": "s",
                    "profession": {"seiyu": "1", "artist": "1"},
                    "extra": {"img": "x.jpg"},
                    "prsn_name": "中原麻衣",
                }
            },
        },
    ),
    (
        CharacterRevision,
        {**REVISION, "data": {"12": {"infobox": "i", "summary": "s", "name": "古河渚", "extra": {"img": "y.jpg"}}}},
    ),
    (
        SubjectRevision,
        {
            **REVISION,
            "data": {
                "field_eps": 24,
                "field_infobox": "i",
                "field_summary": "s",
                "name": "CLANNAD",
                "name_cn": "团",
                "platform": 1,
                "subject_id": 51,
                "type": 2,
                "type_id": 1,
                "vote_field": "",
            },
        },
    ),
    (DetailedRevision, {**REVISION, "data": {"ep_name": "x", "eps": [1, 2]}}),
    (
        ErrorBody,
        {
            "title": "Not Found",
            "description": "missing",
            "details": {"error": "e", "path": "/v0/subjects/1", "method": "GET"},
            "request_id": "req-1",
        },
    ),
    (Paged[Subject], {"total": 42, "limit": 3, "offset": 0, "data": [SUBJECT, SUBJECT, SUBJECT]}),
    (Paged[Episode], {"total": 1, "limit": 100, "offset": 0, "data": [EPISODE]}),
]


@pytest.mark.parametrize(
    ("model", "payload"),
    CASES,
    ids=[getattr(model, "__name__", str(model)) for model, _ in CASES],
)
def test_decoded_model_survives_json_dump_and_reload(model, payload: dict) -> None:
    adapter = TypeAdapter(model)
    original = adapter.validate_python(payload)

    dumped = original.model_dump(mode="json")
    assert adapter.validate_python(dumped) == original
    assert model.model_validate_json(original.model_dump_json()) == original


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        (SubjectCollectionUpdate(type=2, rate=8), {"type": 2, "rate": 8}),
        (
            SubjectCollectionUpdate(type=3, rate=0, ep_status=1, vol_status=0, comment="", private=False, tags=[]),
            {"type": 3, "rate": 0, "ep_status": 1, "vol_status": 0, "comment": "", "private": False, "tags": []},
        ),
        (EpisodesCollectionUpdate(episode_id=[7, 8], type=2), {"episode_id": [7, 8], "type": 2}),
        (EpisodeCollectionUpdate(type=1), {"type": 1}),
        (IndexBasicInfo(title="t"), {"title": "t"}),
        (IndexSubjectAddInfo(subject_id=51, sort=1, comment="c"), {"subject_id": 51, "sort": 1, "comment": "c"}),
        (
            SubjectSearch.model_validate({"keyword": "k", "sort": "rank", "filter": {"type": [2], "nsfw": True}}),
            {"keyword": "k", "sort": "rank", "filter": {"type": [2], "nsfw": True}},
        ),
        (CharacterSearch(keyword="k"), {"keyword": "k"}),
        (
            PersonSearch.model_validate({"keyword": "k", "filter": {"career": ["seiyu"]}}),
            {"keyword": "k", "filter": {"career": ["seiyu"]}},
        ),
    ],
    ids=lambda value: type(value).__name__ if isinstance(value, BaseModel) else None,
)
def test_request_body_dump_omits_unset_fields_and_reloads(body: BaseModel, expected: dict) -> None:
    dumped = body.model_dump(mode="json", exclude_none=True)

    assert dumped == expected
    assert type(body).model_validate(dumped) == body
