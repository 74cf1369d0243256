"""
Root Typer application for the pilothub CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from pilothub import __version__

app = Typer(
    name="pilothub",
    help="pilothub: content and records backend for the project dashboard.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pilothub {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """pilothub CLI: serve the API and manage page content."""


# ── Sub-command registration ─────────────────────────────────────────────

from pilothub.cli.pages import app as pages_app  # noqa: E402
from pilothub.cli.serve import app as serve_app  # noqa: E402

app.add_typer(serve_app, name="serve", help="Start the API server.")
app.add_typer(pages_app, name="pages", help="Page content.")
