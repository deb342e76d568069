from __future__ import annotations

from typing import Any

import httpx
import pytest

from lambdog.config import reset_config


class RecordingFetch:
    """Fetch stand-in that records every call and answers with a canned response."""

    def __init__(
        self,
        *,
        status: int = 200,
        json_result: Any = None,
        text_result: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status = status
        self.json_result = {"foo": "bar"} if json_result is None and text_result is None else json_result
        self.text_result = text_result
        self.headers = headers
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def _response(self) -> httpx.Response:
        if self.text_result is not None:
            return httpx.Response(self.status, text=self.text_result, headers=self.headers)
        return httpx.Response(self.status, json=self.json_result, headers=self.headers)

    async def __call__(self, url: str, options: dict[str, Any]) -> httpx.Response:
        self.calls.append((url, options))
        return self._response()


@pytest.fixture
def fetch() -> RecordingFetch:
    return RecordingFetch()


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch: pytest.MonkeyPatch):
    for var in (
        "LAMBDOG_CONFIG",
        "LAMBDOG_BASE_URL",
        "LAMBDOG_TIMEOUT",
        "LAMBDOG_FOLLOW_REDIRECTS",
        "LAMBDOG_LOG_LEVEL",
        "LAMBDOG_LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def make_fetch():
    return RecordingFetch
