"""Maven repository layout."""

from __future__ import annotations

from core.domain.models import ArtifactCoordinate

DEFAULT_DESCRIPTOR_EXTENSION = "pom"


def build_descriptor_path(
    coordinate: ArtifactCoordinate,
    extension: str = DEFAULT_DESCRIPTOR_EXTENSION,
) -> str:
    """Relative path of the descriptor file inside a repository.

    `org.springframework:spring-beans:7.0.1` ->
    `org/springframework/spring-beans/7.0.1/spring-beans-7.0.1.pom`
    """

    group_path = coordinate.group_id.replace(".", "/")
    artifact_id = coordinate.artifact_id
    version = coordinate.version
    return f"{group_path}/{artifact_id}/{version}/{artifact_id}-{version}.{extension}"
