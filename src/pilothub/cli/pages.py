"""CLI commands for page content.

Usage::

    pilothub pages list
    pilothub pages show home --json
    pilothub pages edit home --title "Welcome" --content-file home.json
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from pilothub.cli.utils import URL_OPTION, console, fail, make_client, print_dict, print_json, print_table
from pilothub.core.errors import ClientError

app = typer.Typer(
    name="pages",
    help="Inspect and edit page content.",
    no_args_is_help=True,
)


@app.command("list")
def list_pages(url: str = URL_OPTION) -> None:
    """List every page with its version and last update."""
    with make_client(url) as client:
        try:
            pages = client.list_pages()
        except ClientError as exc:
            raise fail(exc) from exc
    print_table(pages, columns=["pageName", "title", "version", "lastUpdated"], title="Pages")


@app.command("show")
def show(
    name: str = typer.Argument(..., help="Page name, e.g. 'home'"),
    as_json: bool = typer.Option(False, "--json", help="Print the decoded content document"),
    url: str = URL_OPTION,
) -> None:
    """Show one page."""
    with make_client(url) as client:
        try:
            if as_json:
                print_json(client.page_payload(name))
                return
            page = dict(client.get_page(name))
        except ClientError as exc:
            raise fail(exc) from exc
    content = page.pop("content", "")
    print_dict(page, title=name)
    console.print(f"  [cyan]content[/cyan]: {len(content)} chars")


@app.command("edit")
def edit(
    name: str = typer.Argument(..., help="Page name"),
    title: str | None = typer.Option(None, "--title", "-t", help="New title"),
    subtitle: str | None = typer.Option(None, "--subtitle", "-s", help="New subtitle"),
    content_file: Path | None = typer.Option(  # noqa: B008
        None, "--content-file", "-c", exists=True, dir_okay=False, readable=True, help="JSON file with new content"
    ),
    url: str = URL_OPTION,
) -> None:
    """Patch a page.  Fields that are not given are left unchanged."""
    content = None
    if content_file is not None:
        content = content_file.read_text(encoding="utf-8")
        try:
            json.loads(content)
        except ValueError as exc:
            console.print(f"[bold red]Error[/bold red]: {content_file} is not valid JSON ({exc})")
            raise typer.Exit(code=1) from exc

    if title is None and subtitle is None and content is None:
        console.print("[yellow]Nothing to update.[/yellow]")
        raise typer.Exit(code=1)

    with make_client(url) as client:
        try:
            page = client.update_page(name, title=title, subtitle=subtitle, content=content)
        except ClientError as exc:
            raise fail(exc) from exc
    console.print(f"[green]Updated[/green] {page['pageName']} to version {page['version']}")
