# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across httpcall."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from ..errors import InvalidArgumentError
from .headers import header_value

HeaderPairs = list[tuple[str, str]]


class Method(str, Enum):
    """Supported HTTP request methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, token: str | Method) -> Method:
        """Resolve a method token; tokens are matched exactly (``"get"`` is not ``GET``)."""
        if isinstance(token, Method):
            return token
        try:
            return cls(token)
        except ValueError:
            raise InvalidArgumentError(f"Method not supported: {token!r}") from None


class RequestKind(Enum):
    """Concrete request shape for each method. DELETE is modeled as entity-enclosing."""

    GET = (Method.GET, False)
    POST = (Method.POST, True)
    PUT = (Method.PUT, True)
    DELETE_WITH_BODY = (Method.DELETE, True)

    def __init__(self, method: Method, encloses_entity: bool):
        self.method = method
        self.encloses_entity = encloses_entity

    @classmethod
    def for_method(cls, method: str | Method) -> RequestKind:
        return _KIND_BY_METHOD[Method.parse(method)]


_KIND_BY_METHOD: dict[Method, RequestKind] = {kind.method: kind for kind in RequestKind}


@dataclass(frozen=True)
class HttpRequest:
    """Immutable request built by `build_request` and consumed by the executor."""

    kind: RequestKind
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))
        if self.body is not None and not self.kind.encloses_entity:
            raise InvalidArgumentError(f"{self.kind.method.value} requests cannot carry a body")

    @property
    def method(self) -> str:
        return self.kind.method.value

    @property
    def content(self) -> bytes | None:
        """Body encoded as UTF-8, or None when the request has no entity."""
        return None if self.body is None else self.body.encode("utf-8")


@dataclass
class HttpResponse:
    """Passthrough response: status, ordered header pairs and the decoded body.

    A `body` of None means the body could not be read or decoded; it is not
    necessarily empty.
    """

    status_code: int
    headers: HeaderPairs = field(default_factory=list)
    body: str | None = None
    reason: str = ""
    url: str | None = None
    raw: Any = field(default=None, repr=False, compare=False)

    @property
    def status_class(self) -> int:
        """Leading digit of the status code (2 for 2xx, 4 for 4xx, ...)."""
        return self.status_code // 100

    @property
    def is_success(self) -> bool:
        return self.status_class == 2

    def header(self, name: str, default: str = "") -> str:
        """Case-insensitive lookup; the last occurrence wins for repeated headers."""
        return header_value(self.headers, name, default)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status_code": self.status_code,
            "reason": self.reason,
            "url": self.url,
            "headers": [list(pair) for pair in self.headers],
            "body": self.body,
        }
