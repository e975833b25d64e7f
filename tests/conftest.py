from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from video_import.config import ImportSettings


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class RecordingHTTP:
    """Stands in for requests.get/requests.request and replays queued responses."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def _next(self) -> FakeResponse:
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({'method': 'get', 'url': url, **kwargs})
        return self._next()

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({'method': method, 'url': url, **kwargs})
        return self._next()


@pytest.fixture
def settings() -> ImportSettings:
    return ImportSettings(
        youtube_api_key='yt-key',
        contentful_token='cf-token',
        contentful_space_id='space123',
    )


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")


@pytest.fixture
def fake_response() -> type[FakeResponse]:
    return FakeResponse


@pytest.fixture
def recording_http() -> type[RecordingHTTP]:
    return RecordingHTTP
