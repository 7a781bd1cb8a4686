"""Known Maven-layout repositories, in probing order.

Order reflects observed coverage: Maven Central (85-90%), Google Maven
(+8%), Gradle Plugin Portal (+1-2%), JitPack (+1-2%).
"""

from __future__ import annotations

from typing import Iterable

from core.domain.models import RepositoryEndpoint

MAVEN_CENTRAL = "https://repo1.maven.org/maven2/"
GOOGLE_MAVEN = "https://dl.google.com/dl/android/maven2/"
GRADLE_PLUGIN_PORTAL = "https://plugins.gradle.org/m2/"
JITPACK = "https://jitpack.io/"

DEFAULT_REPOSITORY_URLS: tuple[str, ...] = (
    MAVEN_CENTRAL,
    GOOGLE_MAVEN,
    GRADLE_PLUGIN_PORTAL,
    JITPACK,
)

_KNOWN_NAMES: dict[str, str] = {
    MAVEN_CENTRAL: "maven-central",
    GOOGLE_MAVEN: "google-maven",
    GRADLE_PLUGIN_PORTAL: "gradle-plugin-portal",
    JITPACK: "jitpack",
}


def endpoints_from_urls(urls: Iterable[str]) -> tuple[RepositoryEndpoint, ...]:
    """Build endpoints from base URLs, keeping the caller's order."""

    endpoints: list[RepositoryEndpoint] = []
    for url in urls:
        endpoint = RepositoryEndpoint.from_url(url)
        name = _KNOWN_NAMES.get(endpoint.base_url)
        if name:
            endpoint = endpoint.model_copy(update={"name": name})
        endpoints.append(endpoint)
    return tuple(endpoints)


DEFAULT_REPOSITORIES: tuple[RepositoryEndpoint, ...] = endpoints_from_urls(DEFAULT_REPOSITORY_URLS)
