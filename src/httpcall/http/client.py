# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client abstraction and factories.

The request helpers never create clients themselves: callers pass a reusable,
thread-safe client in. `SharedClientFactory` is the default way to obtain one.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Protocol

import httpx

from ..config import CONNECTION_TIMEOUT, SOCKET_TIMEOUT, HttpSettings, load_http_settings

logger = logging.getLogger(__name__)


class HttpClient(Protocol):
    """The slice of `httpx.Client` the executor relies on."""

    def build_request(self, method: str, url: str, **kwargs: Any) -> httpx.Request: ...

    def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response: ...

    def close(self) -> None: ...


def default_timeout() -> httpx.Timeout:
    """Fixed timeouts applied to every request."""
    return httpx.Timeout(SOCKET_TIMEOUT, connect=CONNECTION_TIMEOUT, read=SOCKET_TIMEOUT)


def create_default_http_client(settings: HttpSettings | None = None) -> httpx.Client:
    """Factory for the default httpx-backed client."""
    settings = settings or load_http_settings()
    return httpx.Client(
        timeout=default_timeout(),
        headers={"User-Agent": settings.user_agent},
        limits=httpx.Limits(
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
        ),
    )


class SharedClientFactory:
    """
    Hands out one lazily created, thread-safe client to every caller.

    Use as a context manager (or call `close()`) to release the pooled connections.
    """

    def __init__(self, settings: HttpSettings | None = None, *, client: HttpClient | None = None):
        self.settings = settings
        self._client = client
        self._lock = threading.Lock()

    def get_client(self) -> HttpClient:
        client = self._client
        if client is not None:
            return client
        with self._lock:
            if self._client is None:
                logger.debug("Creating shared HTTP client")
                self._client = create_default_http_client(self.settings)
            return self._client

    def close(self) -> None:
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            client.close()

    def __enter__(self) -> SharedClientFactory:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()


__all__ = ["HttpClient", "SharedClientFactory", "create_default_http_client", "default_timeout"]
