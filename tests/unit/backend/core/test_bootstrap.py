"""
Unit Tests for Store Bootstrap.

Runs first-run initialization against fresh in-memory engines.
"""

import pytest
from sqlalchemy import Engine, inspect, select, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from cerebra.backend.core.bootstrap import (
    DEFAULT_SETTINGS,
    initialize_database,
    is_database_initialized,
)
from cerebra.backend.core.database import create_store_engine
from cerebra.backend.core.exceptions import InitializationError
from cerebra.backend.models import Setting


@pytest.fixture
def empty_engine():
    """An in-memory engine with no schema applied."""
    engine = create_store_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    yield engine
    engine.dispose()


def _settings(engine: Engine) -> dict[str, str]:
    with engine.connect() as conn:
        rows = conn.execute(select(Setting.key, Setting.value)).all()
    return {key: value for key, value in rows}


class TestInitializeDatabase:
    """Tests for first-run schema creation and default seeding."""

    def test_first_call_reports_first_run(self, empty_engine):
        assert is_database_initialized(empty_engine) is False

        assert initialize_database(empty_engine) is True
        assert is_database_initialized(empty_engine) is True

    def test_creates_all_tables(self, empty_engine):
        initialize_database(empty_engine)

        tables = set(inspect(empty_engine).get_table_names())
        assert {"folders", "notes", "sticky_notes", "settings"} <= tables

    def test_creates_named_indexes(self, empty_engine):
        initialize_database(empty_engine)

        inspector = inspect(empty_engine)
        folder_indexes = {ix["name"] for ix in inspector.get_indexes("folders")}
        note_indexes = {ix["name"] for ix in inspector.get_indexes("notes")}

        assert "idx_folders_parent_id" in folder_indexes
        assert {"idx_notes_folder_id", "idx_notes_modified_at", "idx_notes_title"} <= note_indexes

    def test_seeds_default_settings(self, empty_engine):
        initialize_database(empty_engine)

        assert _settings(empty_engine) == DEFAULT_SETTINGS

    def test_default_values(self):
        assert DEFAULT_SETTINGS == {
            "appName": "CEREBRA",
            "confirmDelete": "true",
            "fontSize": "medium",
            "animations": "true",
            "theme": "light",
        }


class TestIdempotentBootstrap:
    """Repeated initialization leaves schema and settings as they were."""

    def test_second_call_is_a_no_op(self, empty_engine):
        initialize_database(empty_engine)
        tables_before = sorted(inspect(empty_engine).get_table_names())

        assert initialize_database(empty_engine) is False
        assert initialize_database(empty_engine) is False

        assert sorted(inspect(empty_engine).get_table_names()) == tables_before
        assert _settings(empty_engine) == DEFAULT_SETTINGS

    def test_user_edited_setting_survives_reinitialization(self, empty_engine):
        initialize_database(empty_engine)
        with empty_engine.begin() as conn:
            conn.execute(text("UPDATE settings SET value = 'dark' WHERE key = 'theme'"))

        initialize_database(empty_engine)

        settings = _settings(empty_engine)
        assert settings["theme"] == "dark"
        assert len(settings) == len(DEFAULT_SETTINGS)

    def test_missing_default_is_restored_when_schema_is_rerun(self, empty_engine):
        """A partially seeded store gets the missing defaults, keeps the rest."""
        from cerebra.backend.core.bootstrap import create_tables, seed_default_settings

        create_tables(empty_engine)
        with empty_engine.begin() as conn:
            conn.execute(text("INSERT INTO settings (key, value) VALUES ('theme', 'dark')"))

        seed_default_settings(empty_engine)

        settings = _settings(empty_engine)
        assert settings["theme"] == "dark"
        assert settings["fontSize"] == "medium"


class TestInitializationFailure:
    """Tests for fatal initialization errors."""

    def test_schema_failure_raises_initialization_error(self, empty_engine, monkeypatch):
        from cerebra.backend.core import bootstrap

        def fail(engine):
            raise OperationalError("CREATE TABLE folders", {}, Exception("disk I/O error"))

        monkeypatch.setattr(bootstrap, "create_tables", fail)

        with pytest.raises(InitializationError) as exc_info:
            initialize_database(empty_engine)

        assert exc_info.value.code == "SYS_INITIALIZATION_ERROR"

    def test_failing_check_counts_as_not_initialized(self, monkeypatch, empty_engine):
        from cerebra.backend.core import bootstrap

        def broken_inspect(engine):
            raise OperationalError("PRAGMA table_info", {}, Exception("file is not a database"))

        monkeypatch.setattr(bootstrap, "inspect", broken_inspect)

        assert is_database_initialized(empty_engine) is False
