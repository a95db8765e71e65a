"""
Configuration Management.

Defaults ship inside the package (cerebra/config/*.yaml), so the
installed `cerebra` command works from any directory. A source
checkout, marked by a .project_root file at or above the working
directory, may override them:

    <checkout>/config/settings/<file>.yaml   replaces the packaged file
    <checkout>/config/.env                   CEREBRA_* variables

Environment (.env or CEREBRA_* variables):
    CEREBRA_DATA_DIR, CEREBRA_DATABASE_PATH

Settings (YAML):
    application.yaml   - App identity and per-user data directory name
    database.yaml      - Store file name and SQL echo flags
    logging.yaml       - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import typer
import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from cerebra.backend.core.config_schema import (
    ApplicationSchema,
    DatabaseSchema,
    LoggingSchema,
)

PACKAGE_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"


def find_project_root() -> Path | None:
    """Find a source checkout by its .project_root marker, or None outside one."""
    current = Path.cwd()
    for directory in (current, *current.parents):
        if (directory / ".project_root").exists():
            return directory
    return None


def resolve_config_file(filename: str) -> Path:
    """
    Locate a YAML settings file.

    A checkout's config/settings/ copy wins over the packaged default.

    Raises:
        FileNotFoundError: If neither location has the file
    """
    project_root = find_project_root()
    if project_root is not None:
        override = project_root / "config" / "settings" / filename
        if override.exists():
            return override

    packaged = PACKAGE_CONFIG_DIR / filename
    if not packaged.exists():
        raise FileNotFoundError(f"Configuration file not found: {filename}")
    return packaged


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML settings file. An empty file loads as {}."""
    with open(resolve_config_file(filename)) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Environment overrides for where the store lives. Both are optional."""

    data_dir: str | None = None
    database_path: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="CEREBRA_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each file is validated against its schema at load time, so a bad
    override fails on startup with the file name in the message.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._database = _load_validated(DatabaseSchema, "database.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        return self._application

    @property
    def database(self) -> DatabaseSchema:
        return self._database

    @property
    def logging(self) -> LoggingSchema:
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached environment overrides, plus a checkout's config/.env if any."""
    project_root = find_project_root()
    if project_root is None:
        return Settings()
    return Settings(_env_file=str(project_root / "config" / ".env"))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_data_dir() -> Path:
    """
    Resolve the per-user application data directory.

    CEREBRA_DATA_DIR wins when set; otherwise the platform default
    (~/.config/<name> on Linux, ~/Library/Application Support/<name>
    on macOS, %APPDATA%\\<name> on Windows).
    """
    settings = get_settings()
    if settings.data_dir:
        return Path(settings.data_dir).expanduser()
    return Path(typer.get_app_dir(get_app_config().application.data_dir_name))


def get_database_path() -> Path:
    """
    Resolve the store file path.

    CEREBRA_DATABASE_PATH points at the file directly and bypasses
    the data directory entirely.
    """
    settings = get_settings()
    if settings.database_path:
        return Path(settings.database_path).expanduser()
    return get_data_dir() / get_app_config().database.filename


def get_database_url() -> str:
    """SQLite URL for the store file."""
    return f"sqlite:///{get_database_path()}"
