"""
Sticky Note Commands.

Commands for quick, folderless sticky notes.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cerebra.cli.client import get_store_client

app = typer.Typer(help="Sticky note commands")
console = Console()


@app.command("list")
def list_sticky_notes() -> None:
    """
    List sticky notes, most recently edited first.

    Examples:
        cli.py sticky list
    """
    stickies = get_store_client().call("sticky-notes:list")

    if not stickies:
        console.print("[dim]No sticky notes yet.[/dim]")
        return

    table = Table(title="Sticky Notes", show_header=True)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Content")
    table.add_column("Modified", style="dim")

    for sticky in stickies:
        table.add_row(
            str(sticky["id"]),
            escape(sticky["title"]),
            escape(sticky["content"]),
            sticky["modified_at"][:16].replace("T", " "),
        )

    console.print(table)


@app.command()
def create(
    content: str = typer.Argument(..., help="Sticky note text"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Title (default: Quick Note)"),
) -> None:
    """
    Create a sticky note.

    Examples:
        cli.py sticky create "Buy milk"
        cli.py sticky create "Call back at 3" --title Phone
    """
    payload: dict = {"content": content}
    if title is not None:
        payload["title"] = title

    sticky = get_store_client().call("sticky-notes:create", payload)
    console.print(f"[green]Created sticky note #{sticky['id']} {escape(repr(sticky['title']))}[/green]")


@app.command()
def edit(
    sticky_id: int = typer.Argument(..., help="Sticky note ID"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="New text"),
) -> None:
    """
    Change a sticky note's title, text, or both.

    Examples:
        cli.py sticky edit 1 --content "Buy oat milk"
    """
    changes = {
        key: value
        for key, value in (("title", title), ("content", content))
        if value is not None
    }
    if not changes:
        console.print("[yellow]Nothing to change; give --title and/or --content[/yellow]")
        raise typer.Exit(1)

    sticky = get_store_client().require(
        "sticky-notes:update", sticky_id, changes, what=f"Sticky note {sticky_id}",
    )
    console.print(f"[green]Updated sticky note #{sticky['id']}[/green]")


@app.command()
def delete(
    sticky_id: int = typer.Argument(..., help="Sticky note ID"),
) -> None:
    """
    Delete a sticky note.

    Examples:
        cli.py sticky delete 1
    """
    get_store_client().require(
        "sticky-notes:delete", sticky_id, what=f"Sticky note {sticky_id}",
    )
    console.print(f"[green]Deleted sticky note #{sticky_id}[/green]")
