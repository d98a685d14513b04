"""Shared test fixtures for tether."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from tether.http.client import _reset_default_client


@dataclass
class Recorder:
    """Records setup/cleanup calls, in order, on a shared side channel."""

    calls: list[tuple[str, Any, Any]] = field(default_factory=list)

    def setup(self, context: Any, value: Any) -> None:
        self.calls.append(("setup", context, value))

    def cleanup(self, context: Any, value: Any) -> None:
        self.calls.append(("cleanup", context, value))

    @property
    def phases(self) -> list[str]:
        return [phase for phase, _, _ in self.calls]

    def values(self, phase: str) -> list[Any]:
        return [value for p, _, value in self.calls if p == phase]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def mock_client(requests_seen: list[httpx.Request]) -> Iterator[httpx.Client]:
    """An httpx client that never touches the network.

    Every request is appended to ``requests_seen`` and answered with 200.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return httpx.Response(200, json={"ok": True})

    client = httpx.Client(transport=httpx.MockTransport(handler), base_url="https://api.test")
    yield client
    client.close()


@pytest.fixture(autouse=True)
def _fresh_default_client() -> Iterator[None]:
    """Keep the module-level default client from leaking between tests."""
    yield
    _reset_default_client()
