"""Prober: one HEAD request against one repository.

Implementation:
- `HEAD <base_url><path>`; no body is transferred.
- 200 + parseable `Last-Modified` => timestamp.
- Anything else => `ProbeResult.failed` with a cause describing what went wrong.

The response is opened with `client.stream(...)` so the connection goes back
to the pool on every exit path, including a header that fails to parse.
"""

from __future__ import annotations

import logging

import httpx

from core.dates import parse_http_date
from core.domain.errors import HttpDateError
from core.domain.models import ProbeResult, RepositoryEndpoint
from core.interfaces.prober import RepositoryProber

logger = logging.getLogger(__name__)


class HttpRepositoryProber(RepositoryProber):
    """Reads the Last-Modified header of a descriptor file over HTTP."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def probe(self, endpoint: RepositoryEndpoint, path: str) -> ProbeResult:
        url = endpoint.url_for(path)
        logger.debug("HEAD %s", url)

        try:
            with self._client.stream("HEAD", url) as response:
                return self._read_response(endpoint, response)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            return ProbeResult.failed(
                endpoint,
                f"Request to {endpoint.base_url} failed: {type(exc).__name__}: {exc}",
            )

    @staticmethod
    def _read_response(endpoint: RepositoryEndpoint, response: httpx.Response) -> ProbeResult:
        if response.status_code != httpx.codes.OK:
            return ProbeResult.failed(
                endpoint,
                f"Artifact not found at {endpoint.base_url}. HTTP response code: {response.status_code}",
            )

        last_modified = response.headers.get("Last-Modified")
        if last_modified is None:
            return ProbeResult.failed(endpoint, f"No Last-Modified header found at {endpoint.base_url}")

        try:
            timestamp_ms = parse_http_date(last_modified)
        except HttpDateError as exc:
            return ProbeResult.failed(
                endpoint,
                f"Malformed Last-Modified header at {endpoint.base_url}: {exc.reason} ({last_modified!r})",
            )
        return ProbeResult.found(endpoint, timestamp_ms)
