from __future__ import annotations

import json

import pytest
import requests
import responses
from urllib3.exceptions import ProtocolError, ReadTimeoutError

from portkey_admin_sdk.config import ConfigError
from portkey_admin_sdk.error_mapper import map_error
from portkey_admin_sdk.exceptions import (
    ApiError,
    AuthError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ResponseReadError,
    SerializationError,
    ServerError,
    TransportError,
    ValidationError,
)
from portkey_admin_sdk.http_client import API_KEY_HEADER, HttpClient

from conftest import BASE_URL, _cfg


@responses.activate
def test_request_sends_api_key_and_json_headers(http: HttpClient) -> None:
    responses.add(responses.POST, f"{BASE_URL}/admin/workspaces", status=200, json={"id": "ws-1"})

    body = http.request("POST", "/admin/workspaces", json_body={"name": "Prod"})

    assert json.loads(body) == {"id": "ws-1"}
    sent = responses.calls[0].request
    assert sent.headers[API_KEY_HEADER] == "pk-admin-test"
    assert sent.headers["Content-Type"] == "application/json"
    assert json.loads(sent.body) == {"name": "Prod"}


@responses.activate
def test_request_without_body_sends_no_payload(http: HttpClient) -> None:
    responses.add(responses.DELETE, f"{BASE_URL}/configs/pc-1", status=200)

    assert http.request("DELETE", "/configs/pc-1") == b""
    assert responses.calls[0].request.body is None


@responses.activate
def test_request_joins_base_url_with_single_slash() -> None:
    http = HttpClient(_cfg(api_base_url=f"{BASE_URL}/"))
    responses.add(responses.GET, f"{BASE_URL}/admin/users", status=200, json={"data": []})

    http.request("GET", "admin/users")

    assert responses.calls[0].request.url == f"{BASE_URL}/admin/users"


@responses.activate
def test_not_found_keeps_status_and_literal_body(http: HttpClient) -> None:
    responses.add(responses.GET, f"{BASE_URL}/admin/workspaces/missing", status=404, body='{"error":"not found"}')

    with pytest.raises(NotFoundError) as excinfo:
        http.request("GET", "/admin/workspaces/missing")

    assert isinstance(excinfo.value, ApiError)
    assert excinfo.value.status_code == 404
    assert excinfo.value.body == '{"error":"not found"}'
    assert excinfo.value.details == {"error": "not found"}
    assert '{"error":"not found"}' in str(excinfo.value)


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (400, ValidationError),
        (401, AuthError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, ConflictError),
        (422, ValidationError),
        (429, RateLimitError),
        (500, ServerError),
        (503, ServerError),
        (418, ApiError),
    ],
)
def test_map_error_picks_subclass_by_status(status: int, expected: type[ApiError]) -> None:
    err = map_error(status, "plain text")

    assert type(err) is expected
    assert err.status_code == status
    assert err.body == "plain text"
    assert err.details is None


def test_transport_failure_maps_to_transport_error(http: HttpClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _request(**_: object):
        raise requests.ConnectionError("connection refused")

    assert http.session is not None
    monkeypatch.setattr(http.session, "request", _request)

    with pytest.raises(TransportError) as excinfo:
        http.request("GET", "/admin/users")

    assert excinfo.value.status_code == 0
    assert excinfo.value.code == "TRANSPORT_ERROR"
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


class _FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


class _FakeSocket:
    def __init__(self) -> None:
        self.timeouts: list[float] = []

    def settimeout(self, value: float) -> None:
        self.timeouts.append(value)


class _FakeConnection:
    def __init__(self) -> None:
        self.sock = _FakeSocket()


class _DripRaw:
    """Hands out one byte per read, each read taking ``step`` seconds."""

    def __init__(self, clock: _FakeClock, body: bytes, step: float) -> None:
        self.clock = clock
        self.body = body
        self.step = step
        self.reads = 0
        self.connection = _FakeConnection()

    def read1(self, amt: int, decode_content: bool | None = None) -> bytes:
        self.clock.now += self.step
        chunk = self.body[self.reads : self.reads + 1]
        self.reads += 1
        return chunk


class _FailingRaw:
    connection = None

    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def read1(self, amt: int, decode_content: bool | None = None) -> bytes:
        raise self.exc


class _StreamedResponse:
    status_code = 200

    def __init__(self, raw: object) -> None:
        self.raw = raw

    def __enter__(self) -> "_StreamedResponse":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


def test_body_read_failure_maps_to_response_read_error(http: HttpClient, monkeypatch: pytest.MonkeyPatch) -> None:
    raw = _FailingRaw(ProtocolError("Connection broken: IncompleteRead"))
    assert http.session is not None
    monkeypatch.setattr(http.session, "request", lambda **_: _StreamedResponse(raw))

    with pytest.raises(ResponseReadError) as excinfo:
        http.request("GET", "/admin/users")

    assert excinfo.value.code == "RESPONSE_READ_ERROR"
    assert excinfo.value.status_code == 200


def test_slow_body_stops_at_overall_deadline(monkeypatch: pytest.MonkeyPatch) -> None:
    clock = _FakeClock()
    monkeypatch.setattr("portkey_admin_sdk.http_client.time.monotonic", clock)
    http = HttpClient(_cfg(timeout_seconds=1))
    raw = _DripRaw(clock, b'{"data":[]}', step=0.4)
    assert http.session is not None
    monkeypatch.setattr(http.session, "request", lambda **_: _StreamedResponse(raw))

    with pytest.raises(TransportError) as excinfo:
        http.request("GET", "/admin/users")

    assert excinfo.value.code == "DEADLINE_EXCEEDED"
    assert raw.reads == 3
    assert raw.connection.sock.timeouts == pytest.approx([1.0, 0.6, 0.2])


def test_body_within_deadline_is_returned_whole(monkeypatch: pytest.MonkeyPatch) -> None:
    clock = _FakeClock()
    monkeypatch.setattr("portkey_admin_sdk.http_client.time.monotonic", clock)
    http = HttpClient(_cfg(timeout_seconds=10))
    raw = _DripRaw(clock, b'{"data":[]}', step=0.1)
    assert http.session is not None
    monkeypatch.setattr(http.session, "request", lambda **_: _StreamedResponse(raw))

    assert http.request("GET", "/admin/users") == b'{"data":[]}'


def test_socket_read_timeout_maps_to_deadline_exceeded(http: HttpClient, monkeypatch: pytest.MonkeyPatch) -> None:
    raw = _FailingRaw(ReadTimeoutError(None, "/admin/users", "Read timed out."))
    assert http.session is not None
    monkeypatch.setattr(http.session, "request", lambda **_: _StreamedResponse(raw))

    with pytest.raises(TransportError) as excinfo:
        http.request("GET", "/admin/users")

    assert excinfo.value.code == "DEADLINE_EXCEEDED"


def test_unencodable_payload_fails_before_sending(http: HttpClient, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[object] = []
    assert http.session is not None
    monkeypatch.setattr(http.session, "request", lambda **kwargs: calls.append(kwargs))

    with pytest.raises(SerializationError):
        http.request("POST", "/configs", json_body={"limit": float("nan")})
    with pytest.raises(SerializationError):
        http.request("POST", "/configs", json_body={"when": object()})

    assert calls == []


@responses.activate
def test_with_timeout_only_tightens_the_deadline(monkeypatch: pytest.MonkeyPatch) -> None:
    http = HttpClient(_cfg(timeout_seconds=10))
    seen: list[float] = []
    assert http.session is not None
    original = http.session.request

    def _request(**kwargs: object):
        seen.append(kwargs["timeout"])  # type: ignore[arg-type]
        return original(**kwargs)

    monkeypatch.setattr(http.session, "request", _request)
    responses.add(responses.GET, f"{BASE_URL}/admin/users", status=200, json={"data": []})

    http.request("GET", "/admin/users")
    http.with_timeout(2).request("GET", "/admin/users")
    http.with_timeout(60).request("GET", "/admin/users")

    assert seen == [10, 2, 10]


def test_with_timeout_shares_session_and_rejects_non_positive(http: HttpClient) -> None:
    scoped = http.with_timeout(1.5)

    assert scoped.session is http.session
    assert http.timeout_seconds is None
    with pytest.raises(ConfigError):
        http.with_timeout(0)


@responses.activate
def test_timeout_surfaces_as_transport_error(http: HttpClient) -> None:
    responses.add(responses.GET, f"{BASE_URL}/admin/users", body=requests.Timeout("read timed out"))

    with pytest.raises(TransportError):
        http.request("GET", "/admin/users")
