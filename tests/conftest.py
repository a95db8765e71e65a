"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Test Database Configuration:
    Tests use a fresh in-memory SQLite store per test, bootstrapped the
    same way the application bootstraps its store file (tables, indexes,
    default settings) and with foreign keys enforced.

    StaticPool keeps the single in-memory connection alive for the
    whole test, so every session sees the same data.
"""

from collections.abc import Generator

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from cerebra.backend.api.commands import CommandDispatcher
from cerebra.backend.core.bootstrap import initialize_database
from cerebra.backend.core.database import create_session_factory, create_store_engine

TEST_DATABASE_URL = "sqlite://"


# =============================================================================
# Database Engine Fixtures
# =============================================================================


@pytest.fixture
def db_engine() -> Generator[Engine, None, None]:
    """
    Create a bootstrapped in-memory store for one test.

    Function scope: dispatcher tests commit, so sharing an engine
    between tests would leak data.
    """
    engine = create_store_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    initialize_database(engine)

    yield engine

    engine.dispose()


@pytest.fixture
def session_factory(db_engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to the test engine."""
    return create_session_factory(db_engine)


# =============================================================================
# Database Session Fixtures
# =============================================================================


@pytest.fixture
def db_session(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """
    Provide a database session for a single test.

    Changes are rolled back after the test.

    Usage:
        def test_create_folder(db_session: Session):
            folder = FolderRepository(db_session).create(name="Work")
            assert folder.id is not None
    """
    with session_factory() as session:
        yield session
        session.rollback()


# =============================================================================
# Dispatcher Fixtures
# =============================================================================


@pytest.fixture
def dispatcher(session_factory: sessionmaker[Session]) -> CommandDispatcher:
    """Command dispatcher over the test store. Each dispatch commits."""
    return CommandDispatcher(session_factory)
