"""Closed enumerations used by the Bangumi API.

Numeric categories are sent and received as integers, so they are modeled as
`IntEnum`; string categories use `str` mixins so they serialize as their
value both in JSON bodies and query strings.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Union

__all__ = [
    "AvatarType",
    "BloodType",
    "CharacterType",
    "CollectionType",
    "EpisodeCollectionType",
    "EpisodeType",
    "ImageType",
    "PersonCareer",
    "PersonType",
    "SearchSort",
    "SimpleImageType",
    "SubjectAnimeCategory",
    "SubjectBookCategory",
    "SubjectBrowseSort",
    "SubjectCategory",
    "SubjectGameCategory",
    "SubjectRealCategory",
    "SubjectType",
    "UserGroup",
]


class SubjectType(IntEnum):
    BOOK = 1
    ANIME = 2
    MUSIC = 3
    GAME = 4
    REAL = 6


class SubjectBookCategory(IntEnum):
    OTHER = 0
    COMIC = 1001
    NOVEL = 1002
    ILLUSTRATION = 1003


class SubjectAnimeCategory(IntEnum):
    OTHER = 0
    TV = 1
    OVA = 2
    MOVIE = 3
    WEB = 5


class SubjectGameCategory(IntEnum):
    OTHER = 0
    GAMES = 4001
    SOFTWARE = 4002
    DLC = 4003
    TABLETOP = 4005


class SubjectRealCategory(IntEnum):
    OTHER = 0
    JP = 1
    EN = 2
    CN = 3
    TV = 6001
    MOVIE = 6002
    LIVE = 6003
    SHOW = 6004


# The `cat` filter meaning depends on the subject type being browsed.
SubjectCategory = Union[
    SubjectBookCategory,
    SubjectAnimeCategory,
    SubjectGameCategory,
    SubjectRealCategory,
]


class SubjectBrowseSort(str, Enum):
    DATE = "date"
    RANK = "rank"


class SearchSort(str, Enum):
    MATCH = "match"
    HEAT = "heat"
    RANK = "rank"
    SCORE = "score"


class ImageType(str, Enum):
    LARGE = "large"
    COMMON = "common"
    MEDIUM = "medium"
    SMALL = "small"
    GRID = "grid"


class SimpleImageType(str, Enum):
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"
    GRID = "grid"


class AvatarType(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class BloodType(IntEnum):
    A = 1
    B = 2
    AB = 3
    O = 4


class CharacterType(IntEnum):
    CHARACTER = 1
    MECHANIC = 2
    SHIP = 3
    ORGANIZATION = 4


class PersonType(IntEnum):
    INDIVIDUAL = 1
    CORPORATION = 2
    ASSOCIATION = 3


class PersonCareer(str, Enum):
    PRODUCER = "producer"
    MANGAKA = "mangaka"
    ARTIST = "artist"
    SEIYU = "seiyu"
    WRITER = "writer"
    ILLUSTRATOR = "illustrator"
    ACTOR = "actor"


class EpisodeType(IntEnum):
    NORMAL = 0
    SPECIAL = 1
    OPENING = 2
    ENDING = 3
    TRAILER = 4
    MAD = 5
    OTHER = 6


class CollectionType(IntEnum):
    WISH = 1
    DONE = 2
    DOING = 3
    ON_HOLD = 4
    DROPPED = 5


class EpisodeCollectionType(IntEnum):
    NOT_COLLECTED = 0
    WISH = 1
    DONE = 2
    DROPPED = 3


class UserGroup(IntEnum):
    ADMIN = 1
    BANGUMI_ADMIN = 2
    DOUJIN_ADMIN = 3
    MUTED_USER = 4
    BLOCKED_USER = 5
    PERSON_ADMIN = 8
    WIKI_ADMIN = 9
    USER = 10
    WIKI_USER = 11
