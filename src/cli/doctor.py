"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client
from core.config import AppSettings, get_user_env_file
from core.domain.repositories import endpoints_from_urls

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(client: httpx.Client, url: str) -> tuple[bool, str]:
    try:
        response = client.head(url)
    except httpx.HTTPError as exc:
        return False, f"{type(exc).__name__}: {exc}"
    return response.status_code < 500, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Show the active configuration and check that each repository answers."""

    settings = AppSettings()

    table = Table(title="artifact-age Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row(
        "Timeouts",
        "OK",
        f"connect={settings.connect_timeout_seconds}s read={settings.read_timeout_seconds}s",
    )
    table.add_row("Descriptor", "OK", f"*.{settings.descriptor_extension}")

    failures = 0
    with build_client(settings) as client:
        for index, endpoint in enumerate(endpoints_from_urls(settings.repositories)):
            ok, detail = _check_http(client, endpoint.base_url)
            failures += 0 if ok else 1
            table.add_row(f"Repository #{index} {endpoint.name}", "OK" if ok else "FAIL", detail)

    _console.print(table)

    if failures:
        _console.print(
            f"\n[yellow]Note:[/yellow] {failures} repositories are unreachable; "
            "lookups fall through to the next one in the list."
        )
