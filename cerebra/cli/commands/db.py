"""
Database Commands.

Commands for locating and initializing the store file.
"""

import typer
from rich.console import Console

from cerebra.backend.core.exceptions import InitializationError

app = typer.Typer(help="Store location and initialization commands")
console = Console()


@app.command()
def path() -> None:
    """
    Show where the store file lives.

    Examples:
        cli.py db path
    """
    from cerebra.backend.core.config import get_database_path

    console.print(str(get_database_path()), soft_wrap=True)


@app.command()
def init() -> None:
    """
    Create the store and its default settings if they do not exist yet.

    Safe to run repeatedly; existing data and settings are left alone.

    Examples:
        cli.py db init
    """
    from cerebra.backend.core.bootstrap import initialize_database
    from cerebra.backend.core.config import get_database_path
    from cerebra.backend.core.database import get_engine

    try:
        first_run = initialize_database(get_engine())
    except InitializationError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    if first_run:
        console.print(f"[green]Store initialized at {get_database_path()}[/green]")
    else:
        console.print(f"Store already initialized at {get_database_path()}")
