"""artifact-age CLI.

Thin wrapper over `core.services.timestamp_resolver`: parses the coordinate,
wires the resolver from settings and renders the outcome.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.json_exporter import dump_outcome_json, export_outcome_json
from adapters.resolver_factory import open_resolver
from cli import doctor
from cli.ui_components import build_attempts_table, build_result_panel
from core.config import AppSettings
from core.domain.errors import ArtifactNotFoundError
from core.domain.models import ArtifactCoordinate
from core.domain.repositories import endpoints_from_urls

app = typer.Typer(
    no_args_is_help=True,
    help="Resolve when a Maven artifact version was published.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _coordinate_from_args(
    group_id: str | None,
    artifact_id: str | None,
    version: str | None,
    coordinate: str | None,
) -> ArtifactCoordinate:
    if coordinate:
        if group_id or artifact_id or version:
            raise typer.BadParameter("Use either --coordinate or GROUP ARTIFACT VERSION, not both")
        try:
            return ArtifactCoordinate.parse(coordinate)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--coordinate") from exc

    if not (group_id and artifact_id and version):
        raise typer.BadParameter("GROUP, ARTIFACT and VERSION are required")
    return ArtifactCoordinate(group_id=group_id, artifact_id=artifact_id, version=version)


@app.command()
def resolve(
    group_id: str | None = typer.Argument(None, help="groupId, e.g. org.springframework"),
    artifact_id: str | None = typer.Argument(None, help="artifactId, e.g. spring-beans"),
    version: str | None = typer.Argument(None, help="Version, e.g. 7.0.1"),
    coordinate: str | None = typer.Option(
        None, "--coordinate", "-c", help="Coordinate as groupId:artifactId:version."
    ),
    repository: list[str] | None = typer.Option(
        None,
        "--repository",
        "-r",
        help="Repository base URL (repeatable, probed in the given order).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the outcome as JSON."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the outcome as JSON to this file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show every probed repository."),
) -> None:
    """Print the Last-Modified timestamp (epoch ms) of an artifact's descriptor."""

    settings = _load_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    target = _coordinate_from_args(group_id, artifact_id, version, coordinate)
    if repository:
        try:
            endpoints_from_urls(repository)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--repository") from exc

    with open_resolver(settings, repositories=repository) as resolver:
        outcome = resolver.resolve_outcome(target)

    if output is not None:
        export_outcome_json(outcome=outcome, output_path=output)

    if as_json:
        typer.echo(dump_outcome_json(outcome))
    elif verbose:
        _console.print(build_attempts_table(outcome))
        _console.print(build_result_panel(outcome))
    elif outcome.timestamp_ms is not None:
        typer.echo(str(outcome.timestamp_ms))

    if outcome.timestamp_ms is None:
        error = ArtifactNotFoundError(target, outcome.attempts)
        _err_console.print(f"[red]{escape(str(error))}[/red]")
        raise typer.Exit(code=1)


def run() -> None:
    app()
