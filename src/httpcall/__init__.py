# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
httpcall package entrypoint.

Thin synchronous helpers for GET/POST/PUT/DELETE requests. Requests are built
into immutable typed dataclasses, executed through an injected httpx client and
returned either as an HttpResponse (status, headers, body) or as the bare body
text with non-2xx statuses raised as HttpStatusError.
"""

from .config import CONNECTION_TIMEOUT, SOCKET_TIMEOUT, HttpSettings, load_http_settings
from .errors import ErrorCategory, HttpCallError, HttpIOError, HttpStatusError, InvalidArgumentError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    Method,
    RequestKind,
    ResponsePolicy,
    SharedClientFactory,
    build_request,
    create_default_http_client,
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
from .log import setup_logging
from .version import __version__

__all__ = [
    "CONNECTION_TIMEOUT",
    "SOCKET_TIMEOUT",
    "ErrorCategory",
    "HttpCallError",
    "HttpClient",
    "HttpIOError",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpStatusError",
    "InvalidArgumentError",
    "Method",
    "RequestKind",
    "ResponsePolicy",
    "SharedClientFactory",
    "build_request",
    "create_default_http_client",
    "delete_text",
    "get_text",
    "load_http_settings",
    "post_text",
    "put_text",
    "send_delete",
    "send_get",
    "send_post",
    "send_put",
    "send_request",
    "setup_logging",
    "__version__",
]
