# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header helpers.

Outgoing headers are copied verbatim (names keep their casing, None values are
dropped). Incoming headers are kept as ordered name/value pairs so repeated
fields such as Set-Cookie survive; lookups on them are case-insensitive
(RFC 9110).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def outgoing_headers(headers: Mapping[str, str | None] | None) -> dict[str, str]:
    """
    Return a copy of `headers` without None-valued entries.

    Names are matched case-insensitively: a later entry replaces an earlier one
    and its casing is kept.
    """
    if not headers:
        return {}
    out: dict[str, str] = {}
    names: dict[str, str] = {}
    for key, value in headers.items():
        if value is None:
            continue
        name = str(key)
        previous = names.pop(name.lower(), None)
        if previous is not None:
            del out[previous]
        names[name.lower()] = name
        out[name] = str(value)
    return out


def _iter_pairs(headers: Mapping[str, str] | Iterable[tuple[str, str]]) -> Iterable[tuple[str, str]]:
    if isinstance(headers, Mapping):
        return headers.items()
    return headers


def header_value(
    headers: Mapping[str, str] | Iterable[tuple[str, str]] | None,
    name: str,
    default: str = "",
) -> str:
    """
    Return a header value using case-insensitive name matching.

    Accepts a mapping or a sequence of (name, value) pairs; for pairs the last
    matching entry wins.
    """
    if not headers or not name:
        return default

    lower = name.lower()
    found: str | None = None
    for key, value in _iter_pairs(headers):
        if key is None:
            continue
        if str(key).lower() == lower:
            found = "" if value is None else str(value).strip()
    return default if found is None else found


__all__ = ["header_value", "outgoing_headers"]
