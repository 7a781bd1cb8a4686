"""Domain models (Pydantic v2).

Notes:
- All models are frozen: a coordinate or endpoint never changes once built.
- These models describe *what* is being resolved, not *how* it is fetched;
  httpx is only used to reject repository URLs it could never request.
"""

from __future__ import annotations

from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict


class ArtifactCoordinate(BaseModel):
    """A published package: `groupId:artifactId:version`."""

    model_config = ConfigDict(frozen=True)

    group_id: str = Field(
        ...,
        min_length=1,
        description="Dot-delimited namespace (e.g. 'org.springframework').",
    )
    artifact_id: str = Field(
        ...,
        min_length=1,
        description="Artifact name inside the group (e.g. 'spring-beans').",
    )
    version: str = Field(
        ...,
        min_length=1,
        description="Exact published version (e.g. '7.0.1').",
    )

    @classmethod
    def parse(cls, value: str) -> "ArtifactCoordinate":
        """Parse `group:artifact:version`."""

        parts = [part.strip() for part in value.split(":")]
        if len(parts) != 3 or not all(parts):
            raise ValueError(f"Expected 'groupId:artifactId:version', got {value!r}")
        group_id, artifact_id, version = parts
        return cls(group_id=group_id, artifact_id=artifact_id, version=version)

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


class RepositoryEndpoint(BaseModel):
    """One mirror hosting artifacts in the standard Maven layout."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Short label used in logs and reports.",
    )
    base_url: str = Field(
        ...,
        min_length=8,
        description="Repository root; always ends with '/'.",
    )

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        value = value.strip()
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as exc:
            raise ValueError(f"Invalid repository URL {value!r}: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"Repository URL must be absolute http(s), got {value!r}")
        return value if value.endswith("/") else value + "/"

    @classmethod
    def from_url(cls, url: str) -> "RepositoryEndpoint":
        """Endpoint named after the URL host."""

        host = urlsplit(url.strip()).netloc or url.strip()
        return cls(name=host, base_url=url)

    def url_for(self, path: str) -> str:
        return self.base_url + path.lstrip("/")


class ProbeResult(BaseModel):
    """Outcome of probing a single repository.

    Exactly one of `timestamp_ms` (found) or `cause` (failed) is set.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: RepositoryEndpoint
    timestamp_ms: int | None = Field(
        default=None,
        ge=0,
        description="Last-Modified as milliseconds since the epoch.",
    )
    cause: str | None = Field(
        default=None,
        description="Human-readable reason why this repository could not answer.",
    )

    @model_validator(mode="after")
    def _exactly_one(self) -> "ProbeResult":
        if (self.timestamp_ms is None) == (self.cause is None):
            raise ValueError("ProbeResult needs either a timestamp or a cause")
        return self

    @classmethod
    def found(cls, endpoint: RepositoryEndpoint, timestamp_ms: int) -> "ProbeResult":
        return cls(endpoint=endpoint, timestamp_ms=timestamp_ms)

    @classmethod
    def failed(cls, endpoint: RepositoryEndpoint, cause: str) -> "ProbeResult":
        return cls(endpoint=endpoint, cause=cause)

    @property
    def ok(self) -> bool:
        return self.timestamp_ms is not None


class ResolutionOutcome(BaseModel):
    """Everything that happened while resolving one coordinate.

    `attempts` is ordered like the probed repositories and stops at the
    first success.
    """

    coordinate: ArtifactCoordinate
    path: str
    attempts: list[ProbeResult] = Field(default_factory=list)

    @property
    def resolved(self) -> ProbeResult | None:
        for attempt in self.attempts:
            if attempt.ok:
                return attempt
        return None

    @property
    def timestamp_ms(self) -> int | None:
        hit = self.resolved
        return hit.timestamp_ms if hit else None

    @property
    def last_failure(self) -> ProbeResult | None:
        for attempt in reversed(self.attempts):
            if not attempt.ok:
                return attempt
        return None
