"""Shared pytest fixtures for redash_client tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import httpx
import pytest

from redash_client.client import RedashClient
from redash_client.repositories.transport import HttpTransport

FIXTURES_DIR = Path(__file__).parent / "fixtures"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeRedash:
    """In-process stand-in for a Redash server.

    Routes are keyed by ``(method, path)``. Each one replies with fixed JSON,
    a status code, or a handler callable. Unrouted requests get a 404.
    Every request is recorded in :attr:`requests`.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        json_body: Any = None,
        status: int = 200,
        handler: Handler | None = None,
    ) -> None:
        if handler is None:

            def handler(request: httpx.Request) -> httpx.Response:
                if json_body is None:
                    return httpx.Response(status)
                return httpx.Response(status, json=json_body)

        self.routes[(method, path)] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"message": "Couldn't find resource."})
        return handler(request)

    def sent_json(self, index: int = -1) -> Any:
        """Decoded JSON body of a recorded request."""
        return json.loads(self.requests[index].content)


@pytest.fixture()
def fake_redash() -> FakeRedash:
    return FakeRedash()


@pytest.fixture()
def client(fake_redash: FakeRedash) -> Iterator[RedashClient]:
    """RedashClient wired to the fake server through httpx.MockTransport."""
    http_client = httpx.Client(
        transport=httpx.MockTransport(fake_redash.handle),
        base_url="https://redash.test",
        headers={"Authorization": "Key test-key"},
    )
    redash = RedashClient(HttpTransport(http_client))
    yield redash
    redash.close()


@pytest.fixture()
def query_payload() -> dict[str, Any]:
    """Query 42 with a table (id 1) and a chart (id 2) visualization."""
    return json.loads((FIXTURES_DIR / "query_42.json").read_text())


@pytest.fixture()
def dashboard_payload() -> dict[str, Any]:
    """Dashboard ``sales`` (id 7) with a text widget (101) and a chart widget (102)."""
    return json.loads((FIXTURES_DIR / "dashboard_sales.json").read_text())
