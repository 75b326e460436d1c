# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request helpers."""

from .adapters import to_body, to_response
from .api import (
    ResponsePolicy,
    delete_text,
    get_text,
    post_text,
    put_text,
    send_delete,
    send_get,
    send_post,
    send_put,
    send_request,
)
from .builder import build_request
from .client import HttpClient, SharedClientFactory, create_default_http_client
from .executor import execute
from .headers import header_value
from .models import HttpRequest, HttpResponse, Method, RequestKind
from .query import append_query_string, encode_query_string

__all__ = [
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "Method",
    "RequestKind",
    "ResponsePolicy",
    "SharedClientFactory",
    "append_query_string",
    "build_request",
    "create_default_http_client",
    "delete_text",
    "encode_query_string",
    "execute",
    "get_text",
    "header_value",
    "post_text",
    "put_text",
    "send_delete",
    "send_get",
    "send_post",
    "send_put",
    "send_request",
    "to_body",
    "to_response",
]
