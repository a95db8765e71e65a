"""
Folder Commands.

Commands for creating, renaming, moving and deleting folders.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from cerebra.cli.client import get_store_client

app = typer.Typer(help="Folder commands")
console = Console()


@app.command("list")
def list_folders() -> None:
    """
    Show the folder tree with item counts.

    The count next to each folder is its direct notes plus direct subfolders.

    Examples:
        cli.py folders list
    """
    client = get_store_client()
    folders = client.call("folders:list")
    counts = client.call("folders:get-item-counts")

    if not folders:
        console.print("[dim]No folders yet.[/dim]")
        return

    console.print(_build_tree(folders, counts))


def _build_tree(folders: list[dict], counts: dict[int, int]) -> Tree:
    """Arrange the flat, name-ordered folder list into a Rich tree."""
    children: dict[int | None, list[dict]] = {}
    for folder in folders:
        children.setdefault(folder["parent_id"], []).append(folder)

    tree = Tree("[bold]Folders[/bold]")

    def add_branch(parent: Tree, parent_id: int | None) -> None:
        for folder in children.get(parent_id, []):
            label = (
                f"[cyan]{escape(folder['name'])}[/cyan] "
                f"[dim](#{folder['id']}, {counts.get(folder['id'], 0)} items)[/dim]"
            )
            add_branch(parent.add(label), folder["id"])

    add_branch(tree, None)
    return tree


@app.command()
def create(
    name: str = typer.Argument(..., help="Folder name"),
    parent: Optional[int] = typer.Option(None, "--parent", "-p", help="Parent folder ID"),
) -> None:
    """
    Create a folder, at the root or inside another folder.

    Examples:
        cli.py folders create Work
        cli.py folders create Projects --parent 1
    """
    payload: dict = {"name": name}
    if parent is not None:
        payload["parent_id"] = parent

    folder = get_store_client().call("folders:create", payload)
    console.print(f"[green]Created folder #{folder['id']} {escape(repr(folder['name']))}[/green]")


@app.command()
def rename(
    folder_id: int = typer.Argument(..., help="Folder ID"),
    name: str = typer.Argument(..., help="New name"),
) -> None:
    """
    Rename a folder without moving it.

    Examples:
        cli.py folders rename 3 Archive
    """
    folder = get_store_client().require(
        "folders:update", folder_id, {"name": name}, what=f"Folder {folder_id}",
    )
    console.print(f"[green]Renamed folder #{folder['id']} to {escape(repr(folder['name']))}[/green]")


@app.command()
def move(
    folder_id: int = typer.Argument(..., help="Folder ID"),
    parent: Optional[int] = typer.Option(None, "--parent", "-p", help="New parent folder ID"),
    root: bool = typer.Option(False, "--root", help="Move to the top level"),
) -> None:
    """
    Move a folder under another folder, or to the top level.

    Examples:
        cli.py folders move 4 --parent 2
        cli.py folders move 4 --root
    """
    if root == (parent is not None):
        console.print("[red]Give exactly one of --parent or --root[/red]")
        raise typer.Exit(1)

    folder = get_store_client().require(
        "folders:update", folder_id, {"parent_id": parent}, what=f"Folder {folder_id}",
    )
    where = "the top level" if folder['parent_id'] is None else f"folder #{folder['parent_id']}"
    console.print(f"[green]Moved folder #{folder['id']} to {where}[/green]")


@app.command()
def delete(
    folder_id: int = typer.Argument(..., help="Folder ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """
    Delete a folder with all its subfolders and notes.

    Asks first when the confirmDelete setting is "true".

    Examples:
        cli.py folders delete 3
        cli.py folders delete 3 --yes
    """
    client = get_store_client()

    if not yes and client.call("settings:get", "confirmDelete") == "true":
        typer.confirm(
            f"Delete folder #{folder_id} and everything inside it?",
            abort=True,
        )

    client.require("folders:delete", folder_id, what=f"Folder {folder_id}")
    console.print(f"[green]Deleted folder #{folder_id}[/green]")
