"""
Cerebra.

- backend/: Persistence layer, services, command dispatch, configuration
- cli/: Command-line client (Typer + Rich)
"""
