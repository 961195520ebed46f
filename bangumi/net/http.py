"""Shared async HTTP layer built on top of httpx.

This module owns the transport handle used by every endpoint: it builds
requests with authentication attached, sends each of them exactly once, and
maps failures into a small error taxonomy so callers can tell network
problems, server-reported errors and malformed payloads apart.
"""

from __future__ import annotations

import json
from enum import Enum
from functools import lru_cache
from typing import Any, Final, Mapping

import httpx
from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from bangumi.schemas.error import ErrorBody

__all__ = [
    "BangumiError",
    "DecodeError",
    "HttpClient",
    "ServerError",
    "TransportError",
    "compact_params",
]

log = logger.bind(module="net.http")

ALLOWED_METHODS: Final[frozenset[str]] = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

_MIN_TIMEOUT_SECONDS = 0.1
_MAX_ERROR_TEXT_CHARS = 2048


class BangumiError(RuntimeError):
    """Base class for every failure surfaced by the client."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = str(message)
        self.status_code = int(status_code) if status_code is not None else None

    def __str__(self) -> str:  # pragma: no cover - trivial
        if self.status_code is None:
            return self.message
        return f"{self.message} (status={self.status_code})"


class TransportError(BangumiError):
    """Raised when no response was received (connect, DNS, TLS, timeout)."""


class ServerError(BangumiError):
    """Raised when the server answers with a non-success status and a structured error body."""

    def __init__(self, error: ErrorBody, *, status_code: int) -> None:
        super().__init__(f"{error.title}: {error.description}", status_code=status_code)
        self.error = error

    @property
    def title(self) -> str:
        return self.error.title

    @property
    def description(self) -> str:
        return self.error.description

    @property
    def path(self) -> str:
        return self.error.details.path

    @property
    def method(self) -> str:
        return self.error.details.method

    @property
    def request_id(self) -> str | None:
        return self.error.request_id


class DecodeError(BangumiError):
    """Raised when a response body does not match the expected shape.

    `body` keeps a truncated copy of the raw payload for diagnostics.
    """

    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message, status_code=status_code)
        self.body = body


def _truncate(text: str, *, limit: int) -> str:
    """Return a truncated string with an ellipsis when needed."""
    if limit <= 0:
        return ""
    if len(text) <= limit:
        return text
    head = text[: max(0, limit - 3)].rstrip()
    return f"{head}..."


def _safe_response_text(response: httpx.Response) -> str:
    """Best-effort extraction of response text for error messages.

    The returned value is trimmed and truncated to keep logs readable.
    """
    try:
        text = (response.text or "").strip()
    except (UnicodeDecodeError, LookupError):
        text = response.content.decode("utf-8", errors="replace").strip()
    return _truncate(text, limit=_MAX_ERROR_TEXT_CHARS)


def _query_value(value: Any) -> Any:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def compact_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop unset (`None`) query parameters and convert values to their wire form."""
    if not params:
        return {}
    return {key: _query_value(value) for key, value in params.items() if value is not None}


def _encode_body(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return body


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


class HttpClient:
    """Async HTTP client shared by every endpoint call.

    Notes:
        - One `httpx.AsyncClient` is created lazily and reused for all calls, so
          connections are pooled. Call `aclose()` (or use `async with`) to
          release it.
        - Configuration is fixed at construction; no per-call state is kept on
          the instance, so concurrent calls may share it freely.
        - Every request is sent once; there is no retry.
        - Timeouts are clamped to at least `_MIN_TIMEOUT_SECONDS`.
    """

    def __init__(
        self,
        *,
        base_url: str,
        user_agent: str | None = None,
        access_token: str | None = None,
        timeout_seconds: float = 10.0,
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        base_url = (base_url or "").strip()
        if not base_url:
            raise ValueError("base_url must be non-empty.")
        self.base_url = base_url.rstrip("/") + "/"
        self.user_agent = (user_agent or "").strip() or None
        self.access_token = (access_token or "").strip() or None
        self.timeout_seconds = float(max(_MIN_TIMEOUT_SECONDS, timeout_seconds))
        self.follow_redirects = bool(follow_redirects)
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    def _build_client(self) -> httpx.AsyncClient:
        kwargs: dict[str, object] = {
            "base_url": self.base_url,
            "timeout": self.timeout_seconds,
            "follow_redirects": self.follow_redirects,
        }
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return httpx.AsyncClient(**kwargs)  # type: ignore[arg-type]

    @property
    def client(self) -> httpx.AsyncClient:
        """Return the shared `httpx.AsyncClient`, creating it on first use."""
        if self._client is None or self._client.is_closed:
            self._client = self._build_client()
        return self._client

    async def aclose(self) -> None:
        """Close the shared `httpx.AsyncClient`."""
        if self._client is None:
            return
        await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()

    def auth_headers(self) -> dict[str, str]:
        """Headers attached to every request: User-Agent and bearer token, when configured."""
        headers: dict[str, str] = {}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def build_request(
        self,
        method: str,
        url_or_path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> httpx.Request:
        """Build a request with authentication attached. Performs no I/O."""
        method = (method or "GET").strip().upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method!r}.")
        target = (url_or_path or "").strip()
        if not target:
            raise ValueError("url_or_path must be non-empty.")

        query = compact_params(params)
        return self.client.build_request(
            method,
            target,
            params=query or None,
            headers=self.auth_headers(),
            json=_encode_body(json_body) if json_body is not None else None,
        )

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send `request` once and classify the response by status code.

        Raises:
            TransportError: When no response was received.
            ServerError: On a non-2xx response with a structured error body.
            DecodeError: On a non-2xx response whose body is not an error body.
        """
        log.debug("{} {}", request.method, request.url)
        try:
            response = await self.client.send(request)
        except httpx.RequestError as exc:
            log.warning("{} {} failed before a response: {}", request.method, request.url, exc)
            raise TransportError(f"HTTP request failed: {exc}") from exc

        status = int(response.status_code)
        if 200 <= status < 300:
            return response

        log.warning("{} {} returned status {}", request.method, request.url, status)
        raw = _safe_response_text(response)
        try:
            error = ErrorBody.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(
                raw or "HTTP request failed",
                status_code=status,
                body=raw,
            ) from exc
        raise ServerError(error, status_code=status)

    async def request(
        self,
        method: str,
        url_or_path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> httpx.Response:
        """Build and send a request, returning the successful response."""
        request = self.build_request(method, url_or_path, params=params, json_body=json_body)
        return await self.send(request)

    async def request_json(
        self,
        method: str,
        url_or_path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> Any:
        """Return the parsed JSON payload (or None on an empty body).

        Raw-JSON escape hatch for endpoints that have no model yet; the
        services always go through `request_model`.
        """
        response = await self.request(method, url_or_path, params=params, json_body=json_body)
        if not response.content:
            return None
        try:
            text = response.content.decode("utf-8", errors="replace")
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DecodeError(
                f"Invalid JSON response: {exc}",
                status_code=int(response.status_code),
                body=_safe_response_text(response),
            ) from exc

    async def request_model(
        self,
        result_type: Any,
        method: str,
        url_or_path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> Any:
        """Decode the JSON payload into `result_type` (a model, `list[Model]`, `Paged[Model]`...)."""
        response = await self.request(method, url_or_path, params=params, json_body=json_body)
        status = int(response.status_code)
        if not response.content:
            raise DecodeError("Empty response body", status_code=status)
        try:
            return _adapter(result_type).validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(
                f"Invalid response payload: {exc}",
                status_code=status,
                body=_safe_response_text(response),
            ) from exc

    async def request_bytes(
        self,
        method: str,
        url_or_path: str,
        *,
        params: Mapping[str, Any] | None = None,
    ) -> bytes:
        """Return the raw response body (used for image downloads)."""
        response = await self.request(method, url_or_path, params=params)
        return response.content

    async def request_empty(
        self,
        method: str,
        url_or_path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> None:
        """Send a request whose successful body carries no data."""
        await self.request(method, url_or_path, params=params, json_body=json_body)
