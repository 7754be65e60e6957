"""Shared fixtures: a Synthesia client wired to an in-process fake API.

Tests queue responses on ``fake_api`` and inspect ``fake_api.requests``
afterwards.  No network traffic leaves the process.
"""

from __future__ import annotations

import json
from typing import Any, Callable, List, Optional, Union

import httpx
import pytest

from synthesia import Synthesia

API_KEY = "test-api-key"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeAPI:
    """Records requests and replays queued responses in order."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._responses: List[Union[httpx.Response, Handler, Exception]] = []

    def respond(
        self,
        status_code: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
        headers: Optional[dict] = None,
    ) -> None:
        if json_body is not None:
            response = httpx.Response(status_code, json=json_body, headers=headers)
        elif text is not None:
            response = httpx.Response(status_code, text=text, headers=headers)
        else:
            response = httpx.Response(status_code, headers=headers)
        self._responses.append(response)

    def fail(self, exc: Exception) -> None:
        self._responses.append(exc)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        queued = self._responses.pop(0)
        if isinstance(queued, Exception):
            raise queued
        return queued

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def fake_api():
    return FakeAPI()


@pytest.fixture
def client(fake_api):
    with Synthesia(api_key=API_KEY, transport=httpx.MockTransport(fake_api.handler)) as c:
        yield c
