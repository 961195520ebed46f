"""Entry point for calling the Bangumi API.

`BangumiClient` owns the shared `HttpClient` and exposes one service object
per API resource, e.g. `await client.subjects.get_subject(1027)`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bangumi.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, Settings, get_settings
from bangumi.net.http import HttpClient
from bangumi.services.characters import CharacterService
from bangumi.services.collections import CollectionService
from bangumi.services.episodes import EpisodeService
from bangumi.services.indices import IndexService
from bangumi.services.persons import PersonService
from bangumi.services.revisions import RevisionService
from bangumi.services.subjects import SubjectService
from bangumi.services.users import UserService

if TYPE_CHECKING:
    import httpx


class BangumiClient:
    """Typed async client for the Bangumi API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        user_agent: str | None = DEFAULT_USER_AGENT,
        access_token: str | None = None,
        timeout_seconds: float = 10.0,
        follow_redirects: bool = True,
        transport: "httpx.AsyncBaseTransport | None" = None,
    ) -> None:
        self.http = HttpClient(
            base_url=base_url,
            user_agent=user_agent,
            access_token=access_token,
            timeout_seconds=timeout_seconds,
            follow_redirects=follow_redirects,
            transport=transport,
        )
        self.subjects = SubjectService(self.http)
        self.episodes = EpisodeService(self.http)
        self.characters = CharacterService(self.http)
        self.persons = PersonService(self.http)
        self.users = UserService(self.http)
        self.collections = CollectionService(self.http)
        self.indices = IndexService(self.http)
        self.revisions = RevisionService(self.http)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        transport: "httpx.AsyncBaseTransport | None" = None,
    ) -> "BangumiClient":
        """Build a client from `Settings` (environment-backed by default)."""
        settings = settings or get_settings()
        return cls(
            settings.base_url,
            user_agent=settings.user_agent,
            access_token=settings.access_token,
            timeout_seconds=settings.timeout_seconds,
            follow_redirects=settings.follow_redirects,
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close any underlying persistent HTTP resources."""
        await self.http.aclose()

    async def __aenter__(self) -> "BangumiClient":
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()
