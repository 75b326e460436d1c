# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from httpcall.config import CONNECTION_TIMEOUT, SOCKET_TIMEOUT
from httpcall.errors import ErrorCategory, HttpIOError, HttpStatusError, InvalidArgumentError
from httpcall.http.api import (
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
from httpcall.http.builder import build_request
from httpcall.http.executor import execute
from httpcall.http.models import HttpResponse


class RecordingHandler:
    def __init__(self, response=None, exc=None):
        self._response = response
        self._exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._exc is not None:
            raise self._exc
        if callable(self._response):
            return self._response(request)
        return self._response or httpx.Response(200, text="ok")


class FailingStream(httpx.SyncByteStream):
    def __iter__(self):
        yield b"partial"
        raise httpx.ReadError("connection reset")


def make_client(handler: RecordingHandler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_send_get_builds_plain_get():
    handler = RecordingHandler()
    with make_client(handler) as client:
        resp = send_get(client, "http://example.test/items")

    assert isinstance(resp, HttpResponse)
    assert resp.status_code == 200
    assert resp.body == "ok"
    sent = handler.requests[0]
    assert sent.method == "GET"
    assert sent.url.path == "/items"
    assert sent.url.query == b""
    assert sent.content == b""


def test_send_get_appends_query_params():
    handler = RecordingHandler()
    with make_client(handler) as client:
        resp = send_get(client, "http://example.test/search", params={"q": "a b", "page": "2", "skip": None})

    sent = handler.requests[0]
    assert sent.url.params["q"] == "a b"
    assert sent.url.params["page"] == "2"
    assert "skip" not in sent.url.params
    assert resp.url == "http://example.test/search?q=a+b&page=2"


def test_send_delete_carries_body():
    handler = RecordingHandler()
    with make_client(handler) as client:
        send_delete(client, "http://example.test/items/1", body="payload")

    sent = handler.requests[0]
    assert sent.method == "DELETE"
    assert sent.content == b"payload"


@pytest.mark.parametrize(
    ("sender", "method"),
    [(send_post, "POST"), (send_put, "PUT"), (send_delete, "DELETE")],
)
def test_entity_methods_send_utf8_body(sender, method):
    handler = RecordingHandler()
    with make_client(handler) as client:
        sender(client, "http://example.test/", body="héllo")

    sent = handler.requests[0]
    assert sent.method == method
    assert sent.content == "héllo".encode("utf-8")


def test_entity_methods_without_body_send_nothing():
    handler = RecordingHandler()
    with make_client(handler) as client:
        send_post(client, "http://example.test/")
    assert handler.requests[0].content == b""


@pytest.mark.parametrize("policy", list(ResponsePolicy))
def test_none_headers_are_omitted(policy):
    handler = RecordingHandler()
    with make_client(handler) as client:
        send_request(
            client,
            "GET",
            "http://example.test/",
            headers={"X-Keep": "yes", "X-Drop": None},
            policy=policy,
        )

    sent = handler.requests[0]
    assert sent.headers["X-Keep"] == "yes"
    assert "X-Drop" not in sent.headers


def test_fixed_timeouts_are_applied():
    handler = RecordingHandler()
    with make_client(handler) as client:
        send_get(client, "http://example.test/")

    timeout = handler.requests[0].extensions["timeout"]
    assert timeout["connect"] == CONNECTION_TIMEOUT
    assert timeout["read"] == SOCKET_TIMEOUT


def test_unsupported_method_performs_no_io():
    handler = RecordingHandler()
    with make_client(handler) as client:
        with pytest.raises(InvalidArgumentError):
            send_request(client, "PATCH", "http://example.test/")
    assert handler.requests == []


def test_passthrough_returns_error_status_without_raising():
    handler = RecordingHandler(httpx.Response(404, text="missing", headers={"X-Trace": "abc"}))
    with make_client(handler) as client:
        resp = send_get(client, "http://example.test/missing")

    assert resp.status_code == 404
    assert resp.reason == "Not Found"
    assert resp.body == "missing"
    assert resp.header("x-trace") == "abc"
    assert resp.raw.is_closed


def test_passthrough_keeps_repeated_headers_in_order():
    handler = RecordingHandler(httpx.Response(200, headers=[("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")]))
    with make_client(handler) as client:
        resp = send_get(client, "http://example.test/")

    cookies = [value for name, value in resp.headers if name.lower() == "set-cookie"]
    assert cookies == ["a=1", "b=2"]


def test_passthrough_unreadable_body_is_none():
    handler = RecordingHandler(lambda request: httpx.Response(200, stream=FailingStream()))
    with make_client(handler) as client:
        resp = send_get(client, "http://example.test/")

    assert resp.status_code == 200
    assert resp.body is None
    assert resp.raw.is_closed


def test_passthrough_undecodable_body_is_none():
    handler = RecordingHandler(httpx.Response(200, content=b"\xff\xfe\xfa"))
    with make_client(handler) as client:
        resp = send_get(client, "http://example.test/")
    assert resp.body is None


def test_strict_returns_body_on_success():
    handler = RecordingHandler(httpx.Response(201, text="created"))
    with make_client(handler) as client:
        assert post_text(client, "http://example.test/", body="{}") == "created"
        assert put_text(client, "http://example.test/", body="{}") == "created"
        assert delete_text(client, "http://example.test/", body="{}") == "created"
        assert get_text(client, "http://example.test/") == "created"


def test_strict_raises_on_not_found_and_closes_response():
    handler = RecordingHandler(httpx.Response(404, text="missing"))
    url = "http://example.test/missing"
    with make_client(handler) as client:
        with pytest.raises(HttpStatusError) as excinfo:
            get_text(client, url, params={"id": "7"})

    err = excinfo.value
    assert "Not Found" in str(err)
    assert f"{url}?id=7" in str(err)
    assert err.status_code == 404
    assert err.reason == "Not Found"
    assert err.category is ErrorCategory.HTTP_STATUS
    assert err.response.is_closed
    assert isinstance(err, OSError)


@pytest.mark.parametrize("status", [101, 302, 500, 503])
def test_strict_classifies_by_status_class(status):
    handler = RecordingHandler(httpx.Response(status))
    with make_client(handler) as client:
        with pytest.raises(HttpStatusError) as excinfo:
            get_text(client, "http://example.test/")
    assert excinfo.value.status_code == status


def test_strict_read_failure_propagates_as_io_error():
    handler = RecordingHandler(lambda request: httpx.Response(200, stream=FailingStream()))
    with make_client(handler) as client:
        with pytest.raises(HttpIOError) as excinfo:
            get_text(client, "http://example.test/")
    assert not isinstance(excinfo.value, HttpStatusError)
    assert excinfo.value.category is ErrorCategory.READ_ERROR


@pytest.mark.parametrize(
    ("exc", "category"),
    [
        (httpx.ConnectError("connection refused"), ErrorCategory.CONNECTION_ERROR),
        (httpx.ReadTimeout("timed out"), ErrorCategory.TIMEOUT),
        (httpx.ConnectTimeout("timed out"), ErrorCategory.TIMEOUT),
    ],
)
def test_transport_failures_raise_io_error(exc, category):
    handler = RecordingHandler(exc=exc)
    with make_client(handler) as client:
        with pytest.raises(HttpIOError) as excinfo:
            send_get(client, "http://example.test/")

    err = excinfo.value
    assert err.category is category
    assert err.url == "http://example.test/"
    assert err.__cause__ is exc
    assert len(handler.requests) == 1


def test_execute_returns_unread_streamed_response():
    handler = RecordingHandler(httpx.Response(200, text="body"))
    with make_client(handler) as client:
        raw = execute(client, build_request("GET", "http://example.test/"))
        try:
            assert raw.status_code == 200
            assert raw.is_closed is False
            assert raw.read() == b"body"
        finally:
            raw.close()


def test_send_request_accepts_policy_strings():
    handler = RecordingHandler(httpx.Response(200, text="plain"))
    with make_client(handler) as client:
        assert send_request(client, "GET", "http://example.test/", policy="strict") == "plain"


def test_headers_differing_only_in_case_keep_last_value():
    handler = RecordingHandler()
    with make_client(handler) as client:
        send_get(client, "http://example.test/", headers={"Accept": "a", "X-Skip": "1", "accept": "b", "x-skip": None})

    sent = handler.requests[0]
    assert sent.headers.get_list("accept") == ["b"]
    assert sent.headers.get_list("x-skip") == ["1"]
    assert (b"accept", b"b") in sent.headers.raw


def test_unknown_policy_is_rejected_before_io():
    handler = RecordingHandler()
    with make_client(handler) as client:
        with pytest.raises(InvalidArgumentError):
            send_request(client, "GET", "http://example.test/", policy="bogus")
    assert handler.requests == []
