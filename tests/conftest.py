"""Shared fixtures: an app wired to a fake upstream instead of the network."""

from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from aqvision.config import Settings
from aqvision.main import create_app

TEST_KEYS = {
    "openweather_api_key": "test-openweather-key",
    "airnow_api_key": "test-airnow-key",
    "google_maps_api_key": "test maps/key",
    "gemini_api_key": "test-gemini-key",
}


class FakeUpstream:
    """Records every outbound request and answers with `handler`."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: (
            httpx.Response(200, json={})
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def respond(self, *args, **kwargs):
        self.handler = lambda request: httpx.Response(*args, **kwargs)

    def fail(self, message: str = "Name or service not known"):
        def _raise(request):
            raise httpx.ConnectError(message, request=request)

        self.handler = _raise

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def make_client(upstream):
    """Builds a started TestClient; keyword arguments override Settings fields."""
    opened = []

    def _make(raise_server_exceptions=True, **overrides):
        values = {**TEST_KEYS, **overrides}
        app_settings = Settings(_env_file=None, **values)
        app = create_app(app_settings, transport=httpx.MockTransport(upstream))
        test_client = TestClient(app, raise_server_exceptions=raise_server_exceptions)
        test_client.__enter__()
        opened.append(test_client)
        return test_client

    yield _make

    for test_client in opened:
        test_client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()
