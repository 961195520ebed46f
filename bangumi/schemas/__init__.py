"""Pydantic schemas for Bangumi API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

__all__ = ["ApiModel"]


class ApiModel(BaseModel):
    """Base model for records decoded from (or sent to) the Bangumi API.

    The live API regularly grows new fields; unknown keys are ignored so that
    older clients keep decoding newer responses.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
