"""Endpoint bindings grouped by API resource."""

from __future__ import annotations

from urllib.parse import quote

from bangumi.net.http import HttpClient

__all__ = ["BaseService", "path_segment"]


def path_segment(value: object) -> str:
    """Return `value` escaped for use as a single URL path segment."""
    return quote(str(value), safe="")


class BaseService:
    """Holds the shared transport handle; subclasses add one method per endpoint."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http
