from __future__ import annotations

import json
from collections.abc import AsyncIterator, Iterator
from typing import Any

import httpx
import pytest

from hubspot_crm import AsyncHubspot, Hubspot


class Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def reply(self, status_code: int = 200, json_body: Any = None, *, text: str = "") -> None:
        if json_body is not None:
            self._responses.append(httpx.Response(status_code, json=json_body))
        else:
            self._responses.append(httpx.Response(status_code, text=text))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            pytest.fail(f"Unexpected network call: {request.method} {request.url!s}")
        return self._responses.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def hubspot(recorder: Recorder) -> Iterator[Hubspot]:
    client = Hubspot(
        domain="api.hubapi.com",
        token="pat-na1-test",
        portal_id="1888283",
        transport=httpx.MockTransport(recorder),
    )
    try:
        yield client
    finally:
        client.close()


@pytest.fixture
async def async_hubspot(recorder: Recorder) -> AsyncIterator[AsyncHubspot]:
    client = AsyncHubspot(
        domain="api.hubapi.com",
        token="pat-na1-test",
        portal_id="1888283",
        transport=httpx.MockTransport(recorder),
    )
    try:
        yield client
    finally:
        await client.close()
