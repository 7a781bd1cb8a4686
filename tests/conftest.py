from __future__ import annotations

import os
from typing import Callable

import httpx
import pytest

from core.domain.models import RepositoryEndpoint


@pytest.fixture
def endpoints() -> tuple[RepositoryEndpoint, ...]:
    return tuple(
        RepositoryEndpoint(name=f"repo{i}", base_url=f"https://repo{i}.example/m2/")
        for i in range(4)
    )


@pytest.fixture
def mock_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]:
    """Build an `httpx.Client` whose requests are answered by `handler`."""

    clients: list[httpx.Client] = []

    def _build(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _build
    for client in clients:
        client.close()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop every ARTIFACT_AGE_* variable so settings fall back to their defaults."""

    for name in list(os.environ):
        if name.upper().startswith("ARTIFACT_AGE_"):
            monkeypatch.delenv(name)
