#!/usr/bin/env python3
"""
Cerebra CLI.

Command-line front end for the note store.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    python cli.py --help                             # Show help

    # Store
    python cli.py db init                            # Create store and default settings
    python cli.py db path                            # Show where the store lives

    # Folders
    python cli.py folders list                       # Folder tree with item counts
    python cli.py folders create Work                # Top-level folder
    python cli.py folders create Q3 --parent 1       # Subfolder
    python cli.py folders move 4 --root              # Move to top level

    # Notes
    python cli.py notes list 1                       # Notes in folder 1
    python cli.py notes create 1 "Title" -c "Body"   # New note
    python cli.py notes search budget                # Search titles and bodies

    # Sticky notes and settings
    python cli.py sticky create "Buy milk"
    python cli.py settings set theme dark

    # System info
    python cli.py system info                        # Show app info
    python cli.py system config                      # Show configuration

Options:
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
    --help            Show help message
"""

import sys
from pathlib import Path

import typer
from rich.console import Console

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from cerebra.cli.commands import (
    db_app,
    folders_app,
    notes_app,
    settings_app,
    sticky_app,
    system_app,
)

# Create main app
app = typer.Typer(
    name="cli",
    help="Cerebra - folders, notes, sticky notes and preferences in a local store.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register command groups
app.add_typer(db_app, name="db")
app.add_typer(folders_app, name="folders")
app.add_typer(notes_app, name="notes")
app.add_typer(sticky_app, name="sticky")
app.add_typer(settings_app, name="settings")
app.add_typer(system_app, name="system")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Cerebra CLI.

    Organize notes in nested folders, keep sticky notes, and manage preferences.
    """
    from cerebra.backend.core.logging import bind_source, setup_logging

    # Configure logging based on flags
    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging()

    bind_source("cli")


if __name__ == "__main__":
    app()
