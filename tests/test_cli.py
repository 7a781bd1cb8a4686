import json
from contextlib import contextmanager

import httpx
import pytest
from typer.testing import CliRunner

from adapters import resolver_factory
from cli import main as cli_main

runner = CliRunner()


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("spring-beans-7.0.1.pom"):
        return httpx.Response(200, headers={"Last-Modified": "Thu, 20 Nov 2025 09:17:38 GMT"})
    return httpx.Response(404)


@pytest.fixture(autouse=True)
def offline_resolver(monkeypatch: pytest.MonkeyPatch) -> None:
    @contextmanager
    def _open(settings=None, *, repositories=None):
        with resolver_factory.open_resolver(
            settings, repositories=repositories, transport=httpx.MockTransport(_handler)
        ) as resolver:
            yield resolver

    monkeypatch.setattr(cli_main, "open_resolver", _open)


def test_resolve_prints_timestamp() -> None:
    result = runner.invoke(cli_main.app, ["resolve", "org.springframework", "spring-beans", "7.0.1"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "1763630258000"


def test_resolve_with_coordinate_json() -> None:
    result = runner.invoke(
        cli_main.app,
        ["resolve", "--coordinate", "org.springframework:spring-beans:7.0.1", "--json", "-r", "https://r.example/"],
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["timestamp_ms"] == 1763630258000
    assert payload["repository"] == "r.example"
    assert payload["path"] == "org/springframework/spring-beans/7.0.1/spring-beans-7.0.1.pom"


def test_resolve_not_found_exits_with_error() -> None:
    result = runner.invoke(
        cli_main.app,
        ["resolve", "org.invalid", "invalid-artifact", "99.99.99", "-r", "https://a.example/", "-r", "https://b.example/"],
    )

    assert result.exit_code == 1
    assert "Artifact not found in any repository" in result.output


def test_resolve_rejects_bad_coordinate() -> None:
    result = runner.invoke(cli_main.app, ["resolve", "--coordinate", "only:two"])

    assert result.exit_code == 2


def test_resolve_verbose_shows_every_attempt() -> None:
    result = runner.invoke(
        cli_main.app,
        ["resolve", "org.springframework", "spring-beans", "7.0.1", "-v", "-r", "https://a.example/"],
    )

    assert result.exit_code == 0
    assert "a.example" in result.stdout
    assert "2025-11-20 09:17:38 UTC" in result.stdout


def test_doctor_reports_each_repository(monkeypatch: pytest.MonkeyPatch) -> None:
    from cli import doctor

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "jitpack.io":
            raise httpx.ConnectError("unreachable", request=request)
        return httpx.Response(200)

    monkeypatch.setattr(
        doctor, "build_client", lambda settings: httpx.Client(transport=httpx.MockTransport(handler))
    )

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 0
    assert "maven-central" in result.stdout
    assert "FAIL" in result.stdout


def test_resolve_writes_output_file(tmp_path) -> None:
    output = tmp_path / "reports" / "outcome.json"

    result = runner.invoke(
        cli_main.app,
        ["resolve", "-c", "org.springframework:spring-beans:7.0.1", "-o", str(output), "-r", "https://a.example/"],
    )

    assert result.exit_code == 0
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["coordinate"] == {
        "group_id": "org.springframework",
        "artifact_id": "spring-beans",
        "version": "7.0.1",
    }
    assert payload["attempts"][0]["timestamp_ms"] == 1763630258000


def test_resolve_rejects_bad_repository_url() -> None:
    result = runner.invoke(cli_main.app, ["resolve", "g", "a", "1", "-r", "https://bad.example:abc/"])

    assert result.exit_code == 2


def test_resolve_reports_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARTIFACT_AGE_LOG_LEVEL", "verbose")

    result = runner.invoke(cli_main.app, ["resolve", "g", "a", "1"])

    assert result.exit_code == 2
    assert "Invalid configuration" in result.output
