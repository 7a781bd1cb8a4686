"""httpx client builder.

Why a builder:
- Standardises timeouts, headers and redirects for every repository probe.
- Eases testing: a `httpx.MockTransport` can be injected instead of the network.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_timeout(settings: AppSettings) -> httpx.Timeout:
    """Bounded connect/read timeouts; write and pool follow the read timeout."""

    return httpx.Timeout(
        connect=settings.connect_timeout_seconds,
        read=settings.read_timeout_seconds,
        write=settings.read_timeout_seconds,
        pool=settings.read_timeout_seconds,
    )


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Create a blocking `httpx.Client` with safe defaults.

    The caller owns the client and must close it (use it as a context manager).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "*/*",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=build_timeout(settings),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
