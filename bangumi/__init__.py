"""Typed async client for the Bangumi media-catalog API."""

from __future__ import annotations

from loguru import logger

__version__ = "0.1.0"

# Library logs are opt-in; see `bangumi.config.configure_logging`.
logger.disable("bangumi")

from bangumi.client import BangumiClient  # noqa: E402
from bangumi.net.http import BangumiError, DecodeError, ServerError, TransportError  # noqa: E402

__all__ = [
    "BangumiClient",
    "BangumiError",
    "DecodeError",
    "ServerError",
    "TransportError",
    "__version__",
]
