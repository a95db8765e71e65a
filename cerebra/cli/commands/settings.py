"""
Settings Commands.

Commands for reading and writing user preferences.
"""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cerebra.cli.client import get_store_client

app = typer.Typer(help="User preference commands")
console = Console()


@app.command("list")
def list_settings() -> None:
    """
    Show every stored setting.

    Examples:
        cli.py settings list
    """
    values = get_store_client().call("settings:get-all")

    table = Table(title="Settings", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key in sorted(values):
        table.add_row(escape(key), escape(values[key]))

    console.print(table)


@app.command()
def get(
    key: str = typer.Argument(..., help="Setting key, e.g. theme"),
) -> None:
    """
    Show one setting's value.

    Examples:
        cli.py settings get theme
    """
    value = get_store_client().require("settings:get", key, what=f"Setting {key!r}")
    console.print(value, soft_wrap=True, markup=False)


@app.command("set")
def set_setting(
    key: str = typer.Argument(..., help="Setting key"),
    value: str = typer.Argument(..., help="Value to store (always text)"),
) -> None:
    """
    Store a setting, replacing any previous value.

    Examples:
        cli.py settings set theme dark
        cli.py settings set confirmDelete false
    """
    get_store_client().call("settings:set", key, value)
    console.print(f"[green]{escape(key)} = {escape(value)}[/green]")
