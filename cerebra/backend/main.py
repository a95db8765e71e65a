"""
Application Entry Point.

Opens the store, applies the schema on first run, and returns the
command dispatcher that callers (CLI, UI bridge) talk to.
"""

from cerebra.backend.api.commands import CommandDispatcher
from cerebra.backend.core.bootstrap import initialize_database
from cerebra.backend.core.config import get_app_config, get_database_path
from cerebra.backend.core.database import get_engine, get_session_factory
from cerebra.backend.core.logging import get_logger

logger = get_logger(__name__)


def create_app() -> CommandDispatcher:
    """
    Bootstrap the store and build the dispatcher.

    Raises:
        InitializationError: If the store cannot be opened or initialized.
            There is no degraded mode; callers should exit.
    """
    app_config = get_app_config()

    first_run = initialize_database(get_engine())

    logger.info(
        "Application starting",
        extra={
            "app_name": app_config.application.name,
            "version": app_config.application.version,
            "database": str(get_database_path()),
            "first_run": first_run,
        },
    )
    return CommandDispatcher(get_session_factory())
