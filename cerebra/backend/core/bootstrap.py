"""
Store Bootstrap.

First-run initialization of the SQLite store: create tables and
indexes, then seed default settings. Safe to call on every process
start; after the first run it is a no-op.

Usage:
    from cerebra.backend.core.bootstrap import initialize_database
    from cerebra.backend.core.database import get_engine

    initialize_database(get_engine())
"""

from sqlalchemy import Engine, inspect
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.exc import SQLAlchemyError

from cerebra.backend.core.exceptions import InitializationError
from cerebra.backend.core.logging import get_logger, log_with_source
from cerebra.backend.models import Base, Folder, Setting

logger = get_logger(__name__)

DEFAULT_SETTINGS: dict[str, str] = {
    "appName": "CEREBRA",
    "confirmDelete": "true",
    "fontSize": "medium",
    "animations": "true",
    "theme": "light",
}


def is_database_initialized(engine: Engine) -> bool:
    """
    Check whether the folders table exists.

    A failing check (e.g. a corrupted file) counts as "not initialized";
    re-running the schema is harmless because every statement is guarded.
    """
    try:
        return inspect(engine).has_table(Folder.__tablename__)
    except SQLAlchemyError as e:
        log_with_source(
            logger, "bootstrap", "warning",
            "Initialization check failed, assuming first run",
            error=str(e),
        )
        return False


def create_tables(engine: Engine) -> None:
    """Create all tables and indexes that do not exist yet."""
    Base.metadata.create_all(engine, checkfirst=True)
    log_with_source(
        logger, "bootstrap", "info",
        "Tables and indexes created",
        tables=sorted(Base.metadata.tables),
    )


def seed_default_settings(engine: Engine) -> None:
    """Insert default settings, never overwriting a value that already exists."""
    stmt = insert(Setting).on_conflict_do_nothing(index_elements=[Setting.key])
    rows = [{"key": key, "value": value} for key, value in DEFAULT_SETTINGS.items()]
    with engine.begin() as conn:
        conn.execute(stmt, rows)
    log_with_source(
        logger, "bootstrap", "info",
        "Default settings seeded",
        keys=list(DEFAULT_SETTINGS),
    )


def initialize_database(engine: Engine) -> bool:
    """
    Apply the schema and default settings on first run.

    Args:
        engine: Engine for the store

    Returns:
        True if this call performed first-run initialization,
        False if the store was already initialized

    Raises:
        InitializationError: If the store cannot be opened or the schema fails
    """
    if is_database_initialized(engine):
        logger.debug("Database already initialized")
        return False

    log_with_source(logger, "bootstrap", "info", "First run detected, initializing database")
    try:
        create_tables(engine)
        seed_default_settings(engine)
    except SQLAlchemyError as e:
        raise InitializationError(f"Database initialization failed: {e}") from e

    return True
