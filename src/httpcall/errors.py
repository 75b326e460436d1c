# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl
from enum import Enum
from typing import Any

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    READ_ERROR = "READ_ERROR"
    HTTP_STATUS = "HTTP_STATUS"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class HttpCallError(Exception):
    """Base class for all errors raised by httpcall."""


class InvalidArgumentError(HttpCallError, ValueError):
    """Raised for arguments the request builder cannot honour (e.g. an unsupported method)."""


class HttpIOError(HttpCallError, OSError):
    """
    Communication failure: connection refused, timeout, DNS, unreadable body.

    Never retried internally; `category` classifies the underlying cause.
    """

    def __init__(self, message: str, *, url: str | None = None, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR):
        super().__init__(message)
        self.message = message
        self.url = url
        self.category = category

    def __str__(self) -> str:
        return self.message


class HttpStatusError(HttpIOError):
    """Non-2xx response under the strict policy. The response is already closed when raised."""

    def __init__(self, status_code: int, reason: str, url: str, response: Any = None):
        super().__init__(f"{reason} URL: {url}", url=url, category=ErrorCategory.HTTP_STATUS)
        self.status_code = status_code
        self.reason = reason
        self.response = response


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, httpx.ReadError):
        return ErrorCategory.READ_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        cause = exc.__cause__ or exc.__context__
        if cause is not None and cause is not exc:
            nested = categorize_exception(cause)
            if nested in (ErrorCategory.SSL_ERROR, ErrorCategory.DNS_ERROR):
                return nested
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ssl.SSLError, ssl.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (httpx.StreamError, UnicodeDecodeError)):
        return ErrorCategory.READ_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.READ_ERROR: "Response body could not be read",
        ErrorCategory.HTTP_STATUS: "Server returned a non-success status",
        ErrorCategory.UNKNOWN_ERROR: "Network error",
        None: "",
    }
    return mapping.get(category, "Request failed due to network error")


__all__ = [
    "ErrorCategory",
    "HttpCallError",
    "HttpIOError",
    "HttpStatusError",
    "InvalidArgumentError",
    "categorize_exception",
    "error_category_to_reason",
]
