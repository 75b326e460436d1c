# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for httpcall.

Request timeouts are fixed (see ``CONNECTION_TIMEOUT`` and ``SOCKET_TIMEOUT``); the
environment only tunes how the default shared client is provisioned.
"""

import os
from dataclasses import dataclass

from .version import __version__

# Seconds allowed to establish a connection.
CONNECTION_TIMEOUT = 30.0

# Seconds allowed between bytes read from the socket.
SOCKET_TIMEOUT = 30.0

DEFAULT_USER_AGENT = f"httpcall/{__version__}"


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


@dataclass
class HttpSettings:
    """Defaults for the shared client factory."""

    user_agent: str = DEFAULT_USER_AGENT
    max_connections: int = 20
    max_keepalive_connections: int = 10

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_connections = _int_env("HTTPCALL_MAX_CONNECTIONS", cls.max_connections)
        if max_connections <= 0:
            max_connections = cls.max_connections
        max_keepalive = _int_env("HTTPCALL_MAX_KEEPALIVE", cls.max_keepalive_connections)
        if max_keepalive < 0:
            max_keepalive = cls.max_keepalive_connections
        return cls(
            user_agent=os.getenv("HTTPCALL_USER_AGENT", cls.user_agent),
            max_connections=max_connections,
            max_keepalive_connections=min(max_keepalive, max_connections),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


__all__ = [
    "CONNECTION_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "SOCKET_TIMEOUT",
    "HttpSettings",
    "load_http_settings",
]
