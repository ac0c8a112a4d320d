"""
Pytest fixtures for txwatch tests. HTTP is served by httpx.MockTransport; no network.
"""

from __future__ import annotations

import json

import httpx
import pytest

from txwatch.application.parser import Parser
from txwatch.config import FetcherConfig

MOCK_URL = "http://rpc.test"


class RecordingHandler:
    """MockTransport handler that replays a canned reply and records requests."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: bytes = b""
        self.headers: dict[str, str] = {}
        self.exc: Exception | None = None

    def reply(self, payload=None, *, status_code: int = 200, raw: bytes | None = None,
              headers: dict[str, str] | None = None) -> None:
        self.status_code = status_code
        self.headers = headers or {}
        self.body = raw if raw is not None else json.dumps(payload).encode()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, headers=self.headers, content=self.body)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def rpc_handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def parser(rpc_handler):
    client = httpx.Client(transport=httpx.MockTransport(rpc_handler))
    p = Parser(FetcherConfig(rpc_url=MOCK_URL), client=client)
    yield p
    client.close()
