"""Domain errors.

Per-repository failures are not exceptions: they travel as
`ProbeResult.cause`. Only the final "nothing answered" is raised.
"""

from __future__ import annotations

from typing import Sequence

from core.domain.models import ArtifactCoordinate, ProbeResult


class HttpDateError(ValueError):
    """The value is not a `<Www>, <DD> <Mmm> <YYYY> <hh>:<mm>:<ss> GMT` date."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Unparseable HTTP date {value!r}: {reason}")
        self.value = value
        self.reason = reason


class ArtifactNotFoundError(OSError):
    """No repository returned a usable timestamp for the coordinate."""

    def __init__(self, coordinate: ArtifactCoordinate, attempts: Sequence[ProbeResult]) -> None:
        self.coordinate = coordinate
        self.attempts = list(attempts)
        self.last_cause = self.attempts[-1].cause if self.attempts else None
        super().__init__(
            f"Artifact not found in any repository. Last error: {self.last_cause}"
        )

    def describe_attempts(self) -> str:
        """One line per probed repository, in probing order."""

        return "\n".join(
            f"{attempt.endpoint.name}: {attempt.cause}" for attempt in self.attempts
        )
