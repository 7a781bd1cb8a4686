"""CLI UI components (Rich).

Keeps command logic apart from presentation so tables/panels can be reused
by several commands.
"""

from __future__ import annotations

from datetime import datetime, timezone

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ResolutionOutcome


def format_timestamp(timestamp_ms: int) -> str:
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%d %H:%M:%S UTC")


def build_attempts_table(outcome: ResolutionOutcome) -> Table:
    """One row per probed repository, in probing order."""

    table = Table(title=f"Repositories probed for {outcome.coordinate}")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Repository", style="cyan", no_wrap=True)
    table.add_column("Found", style="green")
    table.add_column("Last-Modified", style="white")
    table.add_column("Error", style="red")

    for index, attempt in enumerate(outcome.attempts):
        if attempt.ok and attempt.timestamp_ms is not None:
            table.add_row(str(index), attempt.endpoint.name, "yes", format_timestamp(attempt.timestamp_ms), "")
        else:
            table.add_row(str(index), attempt.endpoint.name, "no", "", attempt.cause or "")
    return table


def build_result_panel(outcome: ResolutionOutcome) -> Panel:
    """Summary panel for a successful resolution."""

    resolved = outcome.resolved
    body = Text()
    if resolved is None or resolved.timestamp_ms is None:
        body.append("Not found", style="bold red")
        return Panel(body, title=str(outcome.coordinate), border_style="red")

    body.append(f"{resolved.timestamp_ms}\n", style="bold")
    body.append(format_timestamp(resolved.timestamp_ms) + "\n")
    body.append(f"Repository: {resolved.endpoint.name}", style="dim")
    return Panel(body, title=str(outcome.coordinate), border_style="green")
