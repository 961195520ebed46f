"""Error payload returned by the API on non-success responses."""

from __future__ import annotations

from bangumi.schemas import ApiModel


class ErrorDetails(ApiModel):
    error: str | None = None
    path: str
    method: str


class ErrorBody(ApiModel):
    title: str
    description: str
    details: ErrorDetails
    request_id: str | None = None
