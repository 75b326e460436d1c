# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Query string encoding."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import quote_plus


def encode_value(value: str) -> str:
    """Form-encode a single value: space becomes '+', '*' is left as-is, '~' becomes %7E."""
    return quote_plus(str(value), safe="*").replace("~", "%7E")


def encode_query_string(params: Mapping[str, str | None]) -> str:
    """
    Serialize `params` into a `?key=value&...` suffix.

    Only values are percent-encoded; keys are emitted verbatim. Entries whose
    value is None are skipped. An empty mapping (or one with only None values)
    still produces a bare "?", which existing callers rely on.
    """
    pairs = [f"{key}={encode_value(value)}" for key, value in params.items() if value is not None]
    return "?" + "&".join(pairs)


def append_query_string(url: str, params: Mapping[str, str | None] | None) -> str:
    """Return `url` with the encoded query string appended, or unchanged when params is None."""
    if params is None:
        return url
    return url + encode_query_string(params)


__all__ = ["append_query_string", "encode_query_string", "encode_value"]
