"""Repository prober contract.

Why Protocol:
- Structural contract (duck typing), no inheritance required.
- The resolver can be tested with an in-memory fake instead of HTTP.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ProbeResult, RepositoryEndpoint


@runtime_checkable
class RepositoryProber(Protocol):
    """Checks one repository for one descriptor path.

    Rules:
    - `probe` is blocking and handles exactly one request.
    - Failures are returned as `ProbeResult.failed(...)`, never raised.
    """

    def probe(self, endpoint: RepositoryEndpoint, path: str) -> ProbeResult:
        """Return the Last-Modified timestamp of `path` at `endpoint`, or why not."""

        ...
