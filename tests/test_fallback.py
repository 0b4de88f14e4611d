from __future__ import annotations

import logging
from typing import Any, Mapping

import pytest

from core.domain.models import Teacher
from core.errors import TransportFailure
from core.services.fallback import fetch_with_fallback


class StubFetcher:
    def __init__(self, result: Any = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def fetch(self, url: str, headers: Mapping[str, str], *, method: str = "GET", json_body: Any = None) -> Any:
        self.calls.append((method, url))
        if self.error is not None:
            raise self.error
        return self.result


def _default() -> Teacher:
    return Teacher(id="fallback", user_id="fallback")


@pytest.mark.asyncio
async def test_success_returns_parsed_model() -> None:
    fetcher = StubFetcher(result={"_id": "t1", "userId": "u1", "courses": ["c1"]})

    teacher = await fetch_with_fallback(
        fetcher, "https://x/teacher/me", {}, parse=Teacher.model_validate, default_factory=_default
    )

    assert teacher.id == "t1"
    assert teacher.courses == ["c1"]
    assert fetcher.calls == [("GET", "https://x/teacher/me")]


@pytest.mark.asyncio
async def test_shape_mismatch_falls_back() -> None:
    fetcher = StubFetcher(result={"unexpected": True})

    teacher = await fetch_with_fallback(
        fetcher, "https://x/teacher/me", {}, parse=Teacher.model_validate, default_factory=_default
    )

    assert teacher.id == "fallback"


@pytest.mark.asyncio
async def test_not_found_and_outage_are_logged_differently(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="core.services.fallback")

    for error in (
        TransportFailure("404", kind=TransportFailure.HTTP_STATUS, status_code=404),
        TransportFailure("down", kind=TransportFailure.NETWORK),
    ):
        result = await fetch_with_fallback(
            StubFetcher(error=error),
            "https://x/teacher/me",
            {},
            parse=Teacher.model_validate,
            default_factory=_default,
            label="teacher",
        )
        assert result.id == "fallback"

    messages = [record.getMessage() for record in caplog.records]
    assert any("teacher not found" in message for message in messages)
    assert any("backend unreachable" in message for message in messages)
    assert all(record.levelno == logging.WARNING for record in caplog.records)


@pytest.mark.asyncio
async def test_non_transport_errors_propagate() -> None:
    with pytest.raises(RuntimeError):
        await fetch_with_fallback(
            StubFetcher(error=RuntimeError("bug")),
            "https://x/teacher/me",
            {},
            parse=Teacher.model_validate,
            default_factory=_default,
        )
