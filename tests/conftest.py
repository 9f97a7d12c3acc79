"""
Shared fixtures for the orchestrate test suite.

The remote API is replaced by `FakeOrchestrate`, an `httpx.MockTransport`
handler that replays queued replies in order and records every request it
receives.
"""

import json
from collections import deque

import httpx
import pytest

from orchestrate import Client, ClientConfig


TOKEN = "sample_token"

USERS = {
    "steve": {
        "name": "Steve Kaliski",
        "email": "sjkaliski@gmail.com",
        "location": "New York",
        "type": "paid",
        "gender": "male",
    },
    "david": {
        "name": "David Byrd",
        "email": "byrd@bowery.io",
        "location": "New York",
        "type": "paid",
        "gender": "male",
    },
}


class FakeOrchestrate:
    """Scripted stand-in for the remote API."""

    def __init__(self):
        self._replies = deque()
        self.requests = []

    def reply(self, status, body=None, text=None):
        """Queue the next reply; `body` is sent as JSON, `text` verbatim."""
        self._replies.append((status, body, text))
        return self

    def handle(self, request):
        self.requests.append(request)
        if not self._replies:
            raise AssertionError(f"unexpected request {request.method} {request.url}")
        status, body, text = self._replies.popleft()
        if body is not None:
            return httpx.Response(status, json=body)
        return httpx.Response(status, text=text or "")

    @property
    def last(self):
        return self.requests[-1]

    @staticmethod
    def target(request):
        """Return the raw (still percent-encoded) path plus query string."""
        return request.url.raw_path.decode("ascii")

    @staticmethod
    def json_body(request):
        return json.loads(request.content)


@pytest.fixture
def config():
    return ClientConfig(
        api_host="api.orchestrate.io",
        api_version="v0",
        timeout_seconds=5.0,
        user_agent="orchestrate-tests",
    )


@pytest.fixture
def fake():
    return FakeOrchestrate()


@pytest.fixture
def db(fake, config):
    return Client(TOKEN, config=config, transport=httpx.MockTransport(fake.handle))
