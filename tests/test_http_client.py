from __future__ import annotations

import httpx
import pytest

from adapters.http_client import HttpResourceFetcher, build_async_client
from core.config import AppSettings
from core.errors import TransportFailure
from conftest import API_URL, RecordingTransport, json_response, network_error, request_json, status_response

URL = f"{API_URL}/teacher/me"
HEADERS = {"x-user-id": "u1", "x-user-type": "teacher"}


@pytest.mark.asyncio
async def test_fetch_returns_decoded_json(settings: AppSettings) -> None:
    transport = RecordingTransport(json_response({"userId": "u1"}))
    fetcher = HttpResourceFetcher(settings, transport=transport)

    assert await fetcher.fetch(URL, HEADERS) == {"userId": "u1"}
    (request,) = transport.requests
    assert request.method == "GET"
    assert request.headers["x-user-id"] == "u1"
    assert request.headers["x-user-type"] == "teacher"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [404, 500, 503])
async def test_non_2xx_is_a_transport_failure(settings: AppSettings, status_code: int) -> None:
    fetcher = HttpResourceFetcher(settings, transport=RecordingTransport(status_response(status_code, "nope")))

    with pytest.raises(TransportFailure) as info:
        await fetcher.fetch(URL, HEADERS)

    assert info.value.kind == TransportFailure.HTTP_STATUS
    assert info.value.status_code == status_code
    assert info.value.is_not_found is (status_code == 404)


@pytest.mark.asyncio
async def test_network_error_is_a_transport_failure(settings: AppSettings) -> None:
    fetcher = HttpResourceFetcher(settings, transport=RecordingTransport(network_error))

    with pytest.raises(TransportFailure) as info:
        await fetcher.fetch(URL, HEADERS)

    assert info.value.kind == TransportFailure.NETWORK


@pytest.mark.asyncio
async def test_non_json_body_is_a_parse_failure(settings: AppSettings) -> None:
    fetcher = HttpResourceFetcher(settings, transport=RecordingTransport(status_response(200, "<html>")))

    with pytest.raises(TransportFailure) as info:
        await fetcher.fetch(URL, HEADERS)

    assert info.value.kind == TransportFailure.PARSE


@pytest.mark.asyncio
async def test_empty_body_returns_none(settings: AppSettings) -> None:
    fetcher = HttpResourceFetcher(settings, transport=RecordingTransport(status_response(204)))

    assert await fetcher.fetch(URL, HEADERS, method="DELETE") is None


@pytest.mark.asyncio
async def test_single_attempt_and_session_cookie_forwarded(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BEBLOCKY_SESSION_COOKIE", raising=False)
    settings = AppSettings(api_url=API_URL, session_cookie="tok", _env_file=None)
    transport = RecordingTransport(status_response(502))

    async with build_async_client(settings, transport=transport) as client:
        fetcher = HttpResourceFetcher(settings, client=client)
        with pytest.raises(TransportFailure):
            await fetcher.fetch(URL, HEADERS)

    assert len(transport.requests) == 1
    assert "better-auth.session_token=tok" in transport.requests[0].headers["cookie"]


@pytest.mark.asyncio
async def test_post_sends_json_body(settings: AppSettings) -> None:
    transport = RecordingTransport(json_response({"ok": True}, status_code=201))
    fetcher = HttpResourceFetcher(settings, transport=transport)

    await fetcher.fetch(URL, HEADERS, method="POST", json_body={"userId": "u1"})

    assert transport.requests[0].method == "POST"
    assert request_json(transport.requests[0]) == {"userId": "u1"}


def test_builder_sets_user_agent(settings: AppSettings) -> None:
    client = build_async_client(settings, extra_headers={"X-Trace": "1"})

    assert client.headers["User-Agent"] == settings.user_agent
    assert client.headers["X-Trace"] == "1"
    assert isinstance(client, httpx.AsyncClient)
