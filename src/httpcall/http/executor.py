# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Send a built HttpRequest through an injected client."""

from __future__ import annotations

import logging

import httpx

from ..errors import HttpIOError, categorize_exception
from .client import HttpClient, default_timeout
from .models import HttpRequest

logger = logging.getLogger(__name__)


def execute(client: HttpClient, request: HttpRequest) -> httpx.Response:
    """
    Execute `request` synchronously and return the unread response.

    The caller owns the returned response and must close it. Transport failures
    are raised as HttpIOError; nothing is retried.
    """
    content = request.content if request.kind.encloses_entity else None
    wire_request = client.build_request(
        request.method,
        request.url,
        headers=dict(request.headers),
        content=content,
        timeout=default_timeout(),
    )

    logger.debug("%s %s", request.method, request.url)
    try:
        return client.send(wire_request, stream=True)
    except httpx.HTTPError as exc:
        category = categorize_exception(exc)
        logger.warning("%s %s failed (%s): %s", request.method, request.url, category.value, exc)
        raise HttpIOError(str(exc) or category.value, url=request.url, category=category) from exc


__all__ = ["execute"]
