"""
CLI utility helpers: output formatting and client construction.
"""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from pilothub.client import DEFAULT_BASE_URL, PilotHubClient
from pilothub.core.errors import ClientError

console = Console()
err_console = Console(stderr=True)

URL_OPTION = typer.Option(DEFAULT_BASE_URL, "--url", "-u", envvar="PILOTHUB_URL", help="API base URL")


def make_client(url: str) -> PilotHubClient:
    """Create a :class:`PilotHubClient` for CLI commands."""
    return PilotHubClient(url)


def fail(exc: ClientError) -> typer.Exit:
    """Print a client error and return the exit to raise."""
    status = f" ({exc.status_code})" if exc.status_code else ""
    err_console.print(f"[bold red]Error[/bold red]{status}: {exc.message}")
    return typer.Exit(code=1)


def print_json(data: Any) -> None:
    console.print_json(json.dumps(data, default=str))


def print_table(items: list[dict[str, Any]], *, columns: list[str], title: str = "") -> None:
    """Render a list of dicts as a Rich table restricted to *columns*."""
    if not items:
        console.print("[dim]No items.[/dim]")
        return
    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in columns:
        table.add_column(col, overflow="fold")
    for item in items:
        table.add_row(*(str(item.get(col, "")) for col in columns))
    console.print(table)


def print_dict(data: dict[str, Any], *, title: str = "") -> None:
    """Render a single dict as key-value pairs."""
    if title:
        console.print(f"[bold]{title}[/bold]")
    for k, v in data.items():
        console.print(f"  [cyan]{k}[/cyan]: {v}")
