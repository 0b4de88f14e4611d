from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings
from core.domain.models import UserRecord

API_URL = "https://api.example.test/api"


class RecordingTransport(httpx.MockTransport):
    """MockTransport que guarda cada request recibida."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def json_response(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return handler


def status_response(status_code: int, body: str = "") -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=body)

    return handler


def network_error(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content.decode("utf-8"))


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> AppSettings:
    monkeypatch.delenv("BEBLOCKY_API_URL", raising=False)
    monkeypatch.delenv("BEBLOCKY_SESSION_COOKIE", raising=False)
    return AppSettings(api_url=API_URL, _env_file=None)


@pytest.fixture
def unconfigured_settings(monkeypatch: pytest.MonkeyPatch) -> AppSettings:
    monkeypatch.delenv("BEBLOCKY_API_URL", raising=False)
    return AppSettings(_env_file=None)


@pytest.fixture
def teacher_user() -> UserRecord:
    return UserRecord(id="u1", email="a@b.com", name="Ada", role="teacher")


@pytest.fixture
def email_only_user() -> UserRecord:
    return UserRecord(email="t@x.com")
