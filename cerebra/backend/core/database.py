"""
Database Configuration.

SQLAlchemy engine and session management for the SQLite store.
Uses lazy initialization to prevent import-time failures before
configuration is available.

The whole data layer is synchronous and single-threaded: one engine
per process, one session per dispatched command.
"""

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from cerebra.backend.core.exceptions import InitializationError
from cerebra.backend.core.logging import get_logger

logger = get_logger(__name__)

# Module-level state for lazy initialization
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _enable_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """
    Turn on foreign-key enforcement for a new SQLite connection.

    SQLite ignores declared foreign keys unless this pragma is set on
    every connection. Without it, cascade deletes silently do nothing.
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_store_engine(url: str, echo: bool = False, **kwargs: Any) -> Engine:
    """
    Create an engine with foreign-key enforcement attached.

    All engines in the application (and in tests) must come from here.

    Args:
        url: SQLAlchemy database URL
        echo: Log every SQL statement
        **kwargs: Extra create_engine arguments (poolclass, connect_args, ...)

    Returns:
        SQLAlchemy engine
    """
    engine = create_engine(url, echo=echo, **kwargs)
    event.listen(engine, "connect", _enable_foreign_keys)
    return engine


def _create_engine() -> Engine:
    """Create the engine for the configured store file, creating its directory."""
    from cerebra.backend.core.config import (
        get_app_config,
        get_database_path,
        get_database_url,
    )

    db_config = get_app_config().database
    db_path = get_database_path()

    try:
        _ensure_directory(db_path)
    except OSError as e:
        raise InitializationError(
            f"Cannot create data directory {db_path.parent}: {e}"
        ) from e

    engine = create_store_engine(
        get_database_url(),
        echo=db_config.echo,
        echo_pool=db_config.echo_pool,
    )
    logger.debug("Database engine created", extra={"path": str(db_path)})
    return engine


def _ensure_directory(db_path: Path) -> None:
    """Create the parent directory of the store file (like mkdir -p)."""
    db_path.parent.mkdir(parents=True, exist_ok=True)


def get_engine() -> Engine:
    """
    Get the database engine, creating it on first use.

    Returns:
        SQLAlchemy engine instance

    Raises:
        InitializationError: If the data directory cannot be created
    """
    global _engine
    if _engine is None:
        _engine = _create_engine()
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """
    Get the session factory, creating it on first use.

    Returns:
        SQLAlchemy session factory
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(get_engine())
    return _session_factory


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Build a session factory bound to the given engine."""
    return sessionmaker(engine, class_=Session, expire_on_commit=False)


@contextmanager
def session_scope(
    factory: sessionmaker[Session] | None = None,
) -> Generator[Session, None, None]:
    """
    Provide a session that commits on success and rolls back on error.

    Each dispatched command runs inside exactly one scope, so every
    create/update/delete is its own atomic unit.

    Usage:
        with session_scope() as session:
            FolderService(session).create_folder(FolderCreate(name="Work"))
    """
    session_factory = factory or get_session_factory()
    with session_factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise


def dispose_engine() -> None:
    """Dispose the process engine and forget the cached factory."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None
