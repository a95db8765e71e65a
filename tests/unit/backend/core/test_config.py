"""
Unit Tests for Configuration Management.

Covers where settings come from: the YAML defaults shipped inside the
package, a source checkout's overrides, and the CEREBRA_* variables
that move the store. Each test runs from a scratch working directory.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from cerebra.backend.core.config import (
    PACKAGE_CONFIG_DIR,
    find_project_root,
    get_app_config,
    get_data_dir,
    get_database_path,
    get_database_url,
    get_settings,
    load_yaml_config,
    resolve_config_file,
)
from cerebra.backend.core.config_schema import ApplicationSchema

DATABASE_YAML = "filename: {name}\necho: false\necho_pool: false\n"


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    monkeypatch.delenv("CEREBRA_DATA_DIR", raising=False)
    monkeypatch.delenv("CEREBRA_DATABASE_PATH", raising=False)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


@pytest.fixture
def elsewhere(tmp_path, monkeypatch):
    """A working directory with no checkout above it."""
    directory = tmp_path / "elsewhere"
    directory.mkdir()
    monkeypatch.chdir(directory)
    return directory


@pytest.fixture
def checkout(tmp_path, monkeypatch):
    """A source checkout with an empty config/settings/, used as cwd."""
    root = tmp_path / "checkout"
    (root / "config" / "settings").mkdir(parents=True)
    (root / ".project_root").touch()
    monkeypatch.chdir(root)
    return root


# =============================================================================
# Checkout discovery
# =============================================================================


class TestFindProjectRoot:
    """Tests for .project_root discovery."""

    def test_finds_marker_above_working_directory(self, checkout, monkeypatch):
        nested = checkout / "cerebra" / "backend"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        assert find_project_root() == checkout

    def test_none_outside_a_checkout(self, elsewhere):
        assert find_project_root() is None


# =============================================================================
# YAML resolution
# =============================================================================


class TestResolveConfigFile:
    """Packaged defaults, overridable per file from a checkout."""

    @pytest.mark.parametrize("filename", ["application.yaml", "database.yaml", "logging.yaml"])
    def test_packaged_defaults_outside_a_checkout(self, elsewhere, filename):
        assert resolve_config_file(filename) == PACKAGE_CONFIG_DIR / filename

    def test_checkout_file_wins(self, checkout):
        override = checkout / "config" / "settings" / "database.yaml"
        override.write_text(DATABASE_YAML.format(name="work.db"))

        assert resolve_config_file("database.yaml") == override

    def test_checkout_without_the_file_falls_back(self, checkout):
        assert resolve_config_file("logging.yaml") == PACKAGE_CONFIG_DIR / "logging.yaml"

    def test_missing_everywhere(self, elsewhere):
        with pytest.raises(FileNotFoundError, match="does_not_exist.yaml"):
            resolve_config_file("does_not_exist.yaml")

    def test_empty_override_loads_as_empty_dict(self, checkout):
        (checkout / "config" / "settings" / "empty.yaml").write_text("")

        assert load_yaml_config("empty.yaml") == {}


# =============================================================================
# AppConfig
# =============================================================================


class TestAppConfig:
    """Validated configuration."""

    def test_packaged_defaults(self, elsewhere):
        config = get_app_config()

        assert config.application.name == "CEREBRA"
        assert config.database.filename == "cerebra.db"
        assert config.logging.level == "WARNING"
        assert config.logging.handlers.file.enabled is False

    def test_invalid_override_names_the_file(self, checkout):
        (checkout / "config" / "settings" / "application.yaml").write_text("name: 'Incomplete'")

        with pytest.raises(ValueError, match="Invalid configuration in application.yaml"):
            get_app_config()

    def test_unknown_keys_are_rejected(self, elsewhere):
        data = load_yaml_config("application.yaml")
        data["unknown_field"] = "oops"

        with pytest.raises(PydanticValidationError, match="Extra inputs are not permitted"):
            ApplicationSchema(**data)

    def test_is_cached(self, elsewhere):
        assert get_app_config() is get_app_config()


# =============================================================================
# Store location
# =============================================================================


class TestStoreLocation:
    """Where cerebra.db ends up."""

    def test_default_is_the_per_user_app_dir(self, elsewhere):
        data_dir = get_data_dir()

        assert data_dir.name.lower() == "cerebra"
        assert get_database_path() == data_dir / "cerebra.db"

    def test_data_dir_variable(self, elsewhere, monkeypatch, tmp_path):
        monkeypatch.setenv("CEREBRA_DATA_DIR", str(tmp_path / "data"))

        assert get_database_path() == tmp_path / "data" / "cerebra.db"

    def test_database_path_variable_wins(self, elsewhere, monkeypatch, tmp_path):
        monkeypatch.setenv("CEREBRA_DATA_DIR", str(tmp_path / "ignored"))
        monkeypatch.setenv("CEREBRA_DATABASE_PATH", str(tmp_path / "notes.db"))

        assert get_database_path() == tmp_path / "notes.db"

    def test_data_dir_expands_home(self, elsewhere, monkeypatch):
        monkeypatch.setenv("CEREBRA_DATA_DIR", "~/cerebra-data")

        assert get_data_dir() == Path.home() / "cerebra-data"

    def test_checkout_yaml_renames_the_store_file(self, checkout, monkeypatch, tmp_path):
        (checkout / "config" / "settings" / "database.yaml").write_text(
            DATABASE_YAML.format(name="work.db")
        )
        monkeypatch.setenv("CEREBRA_DATA_DIR", str(tmp_path / "data"))

        assert get_database_path() == tmp_path / "data" / "work.db"

    def test_checkout_env_file_moves_the_store(self, checkout, tmp_path):
        store = tmp_path / "from-env" / "cerebra.db"
        (checkout / "config" / ".env").write_text(f"CEREBRA_DATABASE_PATH={store}\n")

        assert get_database_path() == store

    def test_env_file_is_ignored_outside_a_checkout(self, elsewhere, tmp_path):
        (elsewhere / "config").mkdir()
        (elsewhere / "config" / ".env").write_text(f"CEREBRA_DATABASE_PATH={tmp_path / 'x.db'}\n")

        assert get_settings().database_path is None

    def test_url_points_at_the_store_file(self, elsewhere, monkeypatch, tmp_path):
        monkeypatch.setenv("CEREBRA_DATABASE_PATH", str(tmp_path / "notes.db"))

        assert get_database_url() == f"sqlite:///{tmp_path / 'notes.db'}"
