# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Build immutable HttpRequest objects from a method token, URL, params, headers and body."""

from __future__ import annotations

from collections.abc import Mapping

from .headers import outgoing_headers
from .models import HttpRequest, Method, RequestKind
from .query import append_query_string


def build_request(
    method: str | Method,
    url: str,
    params: Mapping[str, str | None] | None = None,
    headers: Mapping[str, str | None] | None = None,
    body: str | None = None,
) -> HttpRequest:
    """
    Construct the request for `method`.

    Raises InvalidArgumentError for unsupported methods and for a body on a
    kind that cannot enclose one (GET). Performs no I/O.
    """
    kind = RequestKind.for_method(method)
    return HttpRequest(
        kind=kind,
        url=append_query_string(url, params),
        headers=outgoing_headers(headers),
        body=body,
    )


__all__ = ["build_request"]
