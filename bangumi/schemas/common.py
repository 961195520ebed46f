"""Shared records used across resources."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import Field, field_validator

from bangumi.schemas import ApiModel

__all__ = [
    "Images",
    "InfoboxItem",
    "Paged",
    "SimpleImages",
    "Stat",
    "Tag",
    "infobox_as_dict",
]

T = TypeVar("T")


class Paged(ApiModel, Generic[T]):
    """Pagination envelope wrapping every list endpoint.

    Some endpoints omit `data` (or send `null`) for empty pages; both collapse
    to an empty list so callers can always iterate.
    """

    total: int
    limit: int
    offset: int
    data: list[T] = Field(default_factory=list)

    @field_validator("data", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.data) < self.total


class Images(ApiModel):
    large: str
    common: str
    medium: str
    small: str
    grid: str


class SimpleImages(ApiModel):
    large: str
    medium: str
    small: str
    grid: str


class Stat(ApiModel):
    comments: int
    collects: int


class Tag(ApiModel):
    name: str
    count: int
    # Only present on subject records returned by the v0 endpoints.
    total_cont: int | None = None


class InfoboxItem(ApiModel):
    """One wiki infobox row; `value` is a string or a list of {k?, v} objects."""

    key: str
    value: Any


def infobox_as_dict(items: list[InfoboxItem] | None) -> dict[str, Any]:
    """Return the infobox as a key -> value mapping (last key wins)."""
    return {item.key: item.value for item in items or ()}
