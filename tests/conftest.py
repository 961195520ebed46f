from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Keep a developer's real credentials out of the test run.
os.environ.pop("BANGUMI_ACCESS_TOKEN", None)

from bangumi.client import BangumiClient

BASE_URL = "http://example.local"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def make_client() -> Callable[..., tuple[BangumiClient, list[httpx.Request]]]:
    """Build a client backed by `httpx.MockTransport`.

    Returns `(client, captured)` where `captured` collects every request the
    transport receives, in order.
    """

    def factory(handler: Handler, **kwargs: Any) -> tuple[BangumiClient, list[httpx.Request]]:
        captured: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return handler(request)

        kwargs.setdefault("user_agent", "test-agent")
        client = BangumiClient(BASE_URL, transport=httpx.MockTransport(recording), **kwargs)
        return client, captured

    return factory
