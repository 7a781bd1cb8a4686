"""Artifact timestamp resolution across an ordered chain of repositories.

The resolver holds no per-call state: the repository tuple is read-only and
each call builds its own `ResolutionOutcome`, so one instance can serve
concurrent callers as long as the injected prober can.
"""

from __future__ import annotations

import logging
from typing import Iterable

from core.domain.errors import ArtifactNotFoundError
from core.domain.layout import DEFAULT_DESCRIPTOR_EXTENSION, build_descriptor_path
from core.domain.models import ArtifactCoordinate, RepositoryEndpoint, ResolutionOutcome
from core.domain.repositories import DEFAULT_REPOSITORIES
from core.interfaces.prober import RepositoryProber

logger = logging.getLogger(__name__)


class ArtifactTimestampResolver:
    """Returns the Last-Modified time of the first repository that has the artifact."""

    def __init__(
        self,
        prober: RepositoryProber,
        repositories: Iterable[RepositoryEndpoint] = DEFAULT_REPOSITORIES,
        *,
        descriptor_extension: str = DEFAULT_DESCRIPTOR_EXTENSION,
    ) -> None:
        self._prober = prober
        self._repositories: tuple[RepositoryEndpoint, ...] = tuple(repositories)
        self._descriptor_extension = descriptor_extension
        if not self._repositories:
            raise ValueError("At least one repository is required")

    @property
    def repositories(self) -> tuple[RepositoryEndpoint, ...]:
        return self._repositories

    def resolve(self, group_id: str, artifact_id: str, version: str) -> int:
        """Last-Modified of `group_id:artifact_id:version` in epoch milliseconds.

        Raises `ArtifactNotFoundError` (an `OSError`) when no repository answers.
        """

        coordinate = ArtifactCoordinate(group_id=group_id, artifact_id=artifact_id, version=version)
        return self.resolve_coordinate(coordinate)

    def resolve_coordinate(self, coordinate: ArtifactCoordinate) -> int:
        outcome = self.resolve_outcome(coordinate)
        timestamp_ms = outcome.timestamp_ms
        if timestamp_ms is None:
            logger.warning(
                "%s not found in %d repositories; last error: %s",
                coordinate,
                len(outcome.attempts),
                outcome.attempts[-1].cause,
            )
            raise ArtifactNotFoundError(coordinate, outcome.attempts)
        return timestamp_ms

    def resolve_outcome(self, coordinate: ArtifactCoordinate) -> ResolutionOutcome:
        """Probe repositories in order, stopping at the first success.

        Never raises for repository failures; they are recorded as attempts.
        """

        path = build_descriptor_path(coordinate, self._descriptor_extension)
        outcome = ResolutionOutcome(coordinate=coordinate, path=path)

        for endpoint in self._repositories:
            result = self._prober.probe(endpoint, path)
            outcome.attempts.append(result)
            if result.ok:
                logger.info("%s resolved at %s (%d ms)", coordinate, endpoint.name, result.timestamp_ms)
                return outcome
            logger.debug("%s not available at %s: %s", coordinate, endpoint.name, result.cause)

        return outcome
