# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Public request helpers.

`send_*` return an HttpResponse whatever the status (passthrough policy).
`*_text` return the body string and raise HttpStatusError on non-2xx (strict policy).
Every helper takes the client explicitly; see `SharedClientFactory` for a default one.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from ..errors import InvalidArgumentError
from .adapters import to_body, to_response
from .builder import build_request
from .client import HttpClient
from .executor import execute
from .models import HttpResponse, Method

Params = Mapping[str, str | None]
HeaderMap = Mapping[str, str | None]


class ResponsePolicy(str, Enum):
    PASSTHROUGH = "passthrough"
    STRICT = "strict"


def send_request(
    client: HttpClient,
    method: str | Method,
    url: str,
    *,
    headers: HeaderMap | None = None,
    params: Params | None = None,
    body: str | None = None,
    policy: ResponsePolicy = ResponsePolicy.PASSTHROUGH,
) -> HttpResponse | str:
    """Build, execute and adapt a single request according to `policy`.

    Invalid methods and policies raise InvalidArgumentError before any I/O.
    """
    try:
        policy = ResponsePolicy(policy)
    except ValueError:
        raise InvalidArgumentError(f"Response policy not supported: {policy!r}") from None
    request = build_request(method, url, params=params, headers=headers, body=body)
    raw = execute(client, request)
    if policy is ResponsePolicy.STRICT:
        return to_body(raw, request.url)
    return to_response(raw, request.url)


def send_get(
    client: HttpClient,
    url: str,
    headers: HeaderMap | None = None,
    params: Params | None = None,
) -> HttpResponse:
    return send_request(client, Method.GET, url, headers=headers, params=params)


def send_post(
    client: HttpClient,
    url: str,
    headers: HeaderMap | None = None,
    params: Params | None = None,
    body: str | None = None,
) -> HttpResponse:
    return send_request(client, Method.POST, url, headers=headers, params=params, body=body)


def send_put(
    client: HttpClient,
    url: str,
    headers: HeaderMap | None = None,
    params: Params | None = None,
    body: str | None = None,
) -> HttpResponse:
    return send_request(client, Method.PUT, url, headers=headers, params=params, body=body)


def send_delete(
    client: HttpClient,
    url: str,
    headers: HeaderMap | None = None,
    params: Params | None = None,
    body: str | None = None,
) -> HttpResponse:
    """DELETE may carry a body; it is sent as a UTF-8 entity when given."""
    return send_request(client, Method.DELETE, url, headers=headers, params=params, body=body)


def get_text(
    client: HttpClient,
    url: str,
    headers: HeaderMap | None = None,
    params: Params | None = None,
) -> str:
    return send_request(client, Method.GET, url, headers=headers, params=params, policy=ResponsePolicy.STRICT)


def post_text(
    client: HttpClient,
    url: str,
    headers: HeaderMap | None = None,
    params: Params | None = None,
    body: str | None = None,
) -> str:
    return send_request(client, Method.POST, url, headers=headers, params=params, body=body, policy=ResponsePolicy.STRICT)


def put_text(
    client: HttpClient,
    url: str,
    headers: HeaderMap | None = None,
    params: Params | None = None,
    body: str | None = None,
) -> str:
    return send_request(client, Method.PUT, url, headers=headers, params=params, body=body, policy=ResponsePolicy.STRICT)


def delete_text(
    client: HttpClient,
    url: str,
    headers: HeaderMap | None = None,
    params: Params | None = None,
    body: str | None = None,
) -> str:
    return send_request(client, Method.DELETE, url, headers=headers, params=params, body=body, policy=ResponsePolicy.STRICT)


__all__ = [
    "ResponsePolicy",
    "delete_text",
    "get_text",
    "post_text",
    "put_text",
    "send_delete",
    "send_get",
    "send_post",
    "send_put",
    "send_request",
]
