"""
CLI Client Module.

Command-line client built with Typer for working with the note store.

Architecture:
- CLI is a thin presentation layer
- All business logic lives in the backend services
- CLI calls the backend through the command dispatcher, by name
  ("folders:create", "notes:search", ...), exactly as a UI would

Usage:
    python cli.py --help
    python cli.py folders list
    python cli.py notes search "plan"
"""
