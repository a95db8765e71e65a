"""
Note Commands.

Commands for reading, writing and searching notes.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cerebra.cli.client import get_store_client

app = typer.Typer(help="Note commands")
console = Console()

PREVIEW_LENGTH = 60


def _timestamp(value: str) -> str:
    """Trim an ISO-8601 timestamp to minutes for display."""
    return value[:16].replace("T", " ")


def _preview(content: str) -> str:
    first_line = content.strip().splitlines()[0] if content.strip() else ""
    if len(first_line) > PREVIEW_LENGTH:
        return first_line[: PREVIEW_LENGTH - 1] + "…"
    return first_line


def _notes_table(title: str, notes: list[dict]) -> Table:
    table = Table(title=title, show_header=True)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Folder", justify="right")
    table.add_column("Modified")
    table.add_column("Preview", style="dim")

    for note in notes:
        table.add_row(
            str(note["id"]),
            escape(note["title"]),
            str(note["folder_id"]),
            _timestamp(note["modified_at"]),
            escape(_preview(note["content"])),
        )
    return table


@app.command("list")
def list_notes(
    folder_id: int = typer.Argument(..., help="Folder ID"),
) -> None:
    """
    List the notes in a folder, most recently edited first.

    Examples:
        cli.py notes list 2
    """
    notes = get_store_client().call("notes:list-by-folder", folder_id)

    if not notes:
        console.print(f"[dim]No notes in folder #{folder_id}.[/dim]")
        return

    console.print(_notes_table(f"Notes in folder #{folder_id}", notes))


@app.command()
def show(
    note_id: int = typer.Argument(..., help="Note ID"),
) -> None:
    """
    Show a note in full.

    Examples:
        cli.py notes show 7
    """
    note = get_store_client().require("notes:get", note_id, what=f"Note {note_id}")

    console.print(Panel(
        escape(note["content"]) or "[dim](empty)[/dim]",
        title=f"[bold]{escape(note['title'])}[/bold]",
        subtitle=(
            f"#{note['id']} in folder #{note['folder_id']} | "
            f"modified {_timestamp(note['modified_at'])}"
        ),
    ))


@app.command()
def create(
    folder_id: int = typer.Argument(..., help="Folder ID"),
    title: str = typer.Argument(..., help="Note title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="Note body"),
) -> None:
    """
    Create a note in a folder.

    Examples:
        cli.py notes create 2 "Meeting notes"
        cli.py notes create 2 Ideas --content "Try the new layout"
    """
    payload: dict = {"title": title, "folder_id": folder_id}
    if content is not None:
        payload["content"] = content

    note = get_store_client().call("notes:create", payload)
    console.print(f"[green]Created note #{note['id']} {escape(repr(note['title']))}[/green]")


@app.command()
def edit(
    note_id: int = typer.Argument(..., help="Note ID"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="New body"),
) -> None:
    """
    Change a note's title, body, or both.

    Fields not given are left as they are.

    Examples:
        cli.py notes edit 7 --title "Renamed"
        cli.py notes edit 7 --content "New body"
    """
    changes = {
        key: value
        for key, value in (("title", title), ("content", content))
        if value is not None
    }
    if not changes:
        console.print("[yellow]Nothing to change; give --title and/or --content[/yellow]")
        raise typer.Exit(1)

    note = get_store_client().require("notes:update", note_id, changes, what=f"Note {note_id}")
    console.print(f"[green]Updated note #{note['id']} {escape(repr(note['title']))}[/green]")


@app.command()
def delete(
    note_id: int = typer.Argument(..., help="Note ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """
    Delete a note.

    Asks first when the confirmDelete setting is "true".

    Examples:
        cli.py notes delete 7 --yes
    """
    client = get_store_client()

    if not yes and client.call("settings:get", "confirmDelete") == "true":
        typer.confirm(f"Delete note #{note_id}?", abort=True)

    client.require("notes:delete", note_id, what=f"Note {note_id}")
    console.print(f"[green]Deleted note #{note_id}[/green]")


@app.command()
def search(
    query: str = typer.Argument(..., help="Text to look for in titles and bodies"),
) -> None:
    """
    Search all notes by title or body (case-insensitive).

    Examples:
        cli.py notes search budget
    """
    notes = get_store_client().call("notes:search", query)

    if not notes:
        console.print(f"[dim]No notes match {escape(repr(query))}.[/dim]")
        return

    console.print(_notes_table(f"Notes matching {escape(repr(query))}", notes))
