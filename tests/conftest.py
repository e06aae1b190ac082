from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from sbg_api.config import settings as settings_module


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in list(os.environ):
        if key.startswith("SBG_"):
            monkeypatch.delenv(key, raising=False)
    settings_module.get_settings.cache_clear()
    try:
        yield
    finally:
        settings_module.get_settings.cache_clear()


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request it answers."""

    def __init__(self, status_code: int = 200, body: Any = None) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._body = body
        super().__init__(self._respond)

    def _respond(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._body is None:
            return httpx.Response(self._status_code)
        if isinstance(self._body, (bytes, str)):
            return httpx.Response(self._status_code, content=self._body)
        return httpx.Response(self._status_code, content=json.dumps(self._body).encode())


@pytest.fixture
def mock_client() -> Iterator[Callable[..., tuple[httpx.Client, RecordingTransport]]]:
    clients: list[httpx.Client] = []

    def factory(status_code: int = 200, body: Any = None) -> tuple[httpx.Client, RecordingTransport]:
        transport = RecordingTransport(status_code, body)
        client = httpx.Client(transport=transport)
        clients.append(client)
        return client, transport

    yield factory
    for client in clients:
        client.close()
