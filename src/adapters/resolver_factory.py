"""Wires settings, HTTP client and prober into a ready resolver."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator

import httpx

from adapters.http_client import build_client
from adapters.repository_prober import HttpRepositoryProber
from core.config import AppSettings
from core.domain.repositories import endpoints_from_urls
from core.services.timestamp_resolver import ArtifactTimestampResolver


@contextmanager
def open_resolver(
    settings: AppSettings | None = None,
    *,
    repositories: Iterable[str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> Iterator[ArtifactTimestampResolver]:
    """Yield a resolver backed by a fresh client; the client is closed on exit.

    `repositories` overrides `settings.repositories` (same ordering rules).
    """

    settings = settings or AppSettings()
    urls = list(repositories) if repositories else settings.repositories
    with build_client(settings, transport=transport) as client:
        yield ArtifactTimestampResolver(
            HttpRepositoryProber(client),
            endpoints_from_urls(urls),
            descriptor_extension=settings.descriptor_extension,
        )
