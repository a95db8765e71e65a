"""
Store Client for CLI.

Wraps the command dispatcher for CLI commands: bootstraps the store on
first use, logs every call with source "cli", and turns failures into
a red message and exit status 1.
"""

from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from cerebra.backend.api.commands import CommandDispatcher
from cerebra.backend.core.exceptions import ApplicationError, InitializationError
from cerebra.backend.core.logging import get_logger, log_with_source

logger = get_logger(__name__)
err_console = Console(stderr=True)


class StoreClient:
    """
    Dispatcher client for CLI commands.

    Usage:
        client = get_store_client()
        folders = client.call("folders:list")
        note = client.require("notes:get", 3, what="Note 3")
    """

    def __init__(self, dispatcher: CommandDispatcher | None = None) -> None:
        self._dispatcher = dispatcher

    def _get_dispatcher(self) -> CommandDispatcher:
        """Bootstrap the store and build the dispatcher on first use."""
        if self._dispatcher is None:
            from cerebra.backend.main import create_app

            try:
                self._dispatcher = create_app()
            except InitializationError as e:
                log_with_source(logger, "cli", "critical", "Store unavailable", error=e.message)
                err_console.print(f"[red]Error: {escape(e.message)}[/red]")
                raise typer.Exit(1) from e
        return self._dispatcher

    def call(self, command: str, *args: Any) -> Any:
        """
        Run a command and return its result.

        Raises:
            typer.Exit: If the command fails
        """
        dispatcher = self._get_dispatcher()

        log_with_source(logger, "cli", "debug", "Command request", command=command)

        try:
            result = dispatcher.dispatch(command, *args)
        except ApplicationError as e:
            log_with_source(
                logger, "cli", "error", "Command failed",
                command=command, code=e.code, error=e.message,
            )
            err_console.print(f"[red]Error: {escape(e.message)}[/red]")
            details = getattr(e, "details", None)
            if details:
                err_console.print(f"[dim]{escape(str(details))}[/dim]")
            raise typer.Exit(1) from e

        return result

    def require(self, command: str, *args: Any, what: str) -> Any:
        """
        Run a command whose None/False result means "not found".

        Raises:
            typer.Exit: If the target does not exist or the command fails
        """
        result = self.call(command, *args)
        if result is None or result is False:
            err_console.print(f"[red]{escape(what)} not found[/red]")
            raise typer.Exit(1)
        return result


# Module-level client instance
_client: StoreClient | None = None


def get_store_client() -> StoreClient:
    """Get or create the store client singleton."""
    global _client
    if _client is None:
        _client = StoreClient()
    return _client


def reset_store_client() -> None:
    """Forget the client singleton and release the process engine."""
    global _client
    from cerebra.backend.core.database import dispose_engine

    _client = None
    dispose_engine()
