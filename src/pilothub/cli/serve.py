"""
CLI: ``pilothub serve``: start the API server.
"""

from __future__ import annotations

import typer
import uvicorn

from pilothub.cli.utils import console
from pilothub.core.settings import PilotHubBaseSettings

app = typer.Typer(no_args_is_help=True)


@app.command("start")
def start(
    host: str | None = typer.Option(None, "--host", "-h", help="Bind address (default from PILOTHUB_HOST)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port (default from PILOTHUB_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on changes"),
    log_level: str = typer.Option("info", "--log-level"),
) -> None:
    """Start the pilothub REST API server."""
    settings = PilotHubBaseSettings()
    host = host or settings.host
    port = port or settings.port

    console.print(f"[bold green]Starting pilothub API[/bold green] on {host}:{port}")
    uvicorn.run(
        "pilothub.api:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )
