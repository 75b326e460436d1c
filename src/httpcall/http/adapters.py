# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Turn raw httpx responses into what callers get back.

Two policies, kept separate on purpose:

- passthrough (`to_response`): never raises, returns an HttpResponse even for
  4xx/5xx, reports an unreadable body as None.
- strict (`to_body`): raises HttpStatusError unless the status class is 2,
  otherwise returns the body text; read failures propagate as HttpIOError.

Both read the whole body into memory as UTF-8 and close the response.
"""

from __future__ import annotations

import logging

import httpx

from ..errors import HttpIOError, HttpStatusError, categorize_exception
from .models import HttpResponse

logger = logging.getLogger(__name__)


def _read_text(raw: httpx.Response) -> str:
    return raw.read().decode("utf-8")


def _reason(raw: httpx.Response) -> str:
    return raw.reason_phrase or ""


def to_response(raw: httpx.Response, url: str) -> HttpResponse:
    """Passthrough policy."""
    try:
        try:
            body: str | None = _read_text(raw)
        except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError) as exc:
            logger.debug("Discarding unreadable body from %s: %s", url, exc)
            body = None
    finally:
        raw.close()

    return HttpResponse(
        status_code=raw.status_code,
        headers=list(raw.headers.multi_items()),
        body=body,
        reason=_reason(raw),
        url=url,
        raw=raw,
    )


def to_body(raw: httpx.Response, url: str) -> str:
    """Strict policy."""
    try:
        if raw.status_code // 100 != 2:
            raise HttpStatusError(raw.status_code, _reason(raw), url, response=raw)
        try:
            return _read_text(raw)
        except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError) as exc:
            category = categorize_exception(exc)
            raise HttpIOError(f"Failed to read response body from {url}: {exc}", url=url, category=category) from exc
    finally:
        raw.close()


__all__ = ["to_body", "to_response"]
