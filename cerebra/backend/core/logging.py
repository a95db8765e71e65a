"""
Logging.

Every module logs through structlog, rendered by the stdlib root logger.
Settings come from logging.yaml; the CLI's --verbose/--debug flags
override level and format.

Each record carries an explicit `source` naming the layer it came from:

    cli        - the Typer front end (bound once per invocation)
    dispatch   - the command boundary
    bootstrap  - first-run schema creation and default settings
    internal   - anything else that runs without a caller

Console output goes to stderr so command output on stdout can be piped.
The optional JSONL file lives in the data directory next to the store.

Usage:
    from cerebra.backend.core.logging import get_logger, log_with_source

    logger = get_logger(__name__)
    logger.info("Folder created", extra={"folder_id": 3})
    log_with_source(logger, "bootstrap", "info", "Defaults seeded", count=5)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import Processor

from cerebra.backend.core.config import get_app_config, get_data_dir
from cerebra.backend.core.config_schema import FileHandlerSchema

VALID_SOURCES = frozenset({"cli", "dispatch", "bootstrap", "internal", "unknown"})


def _processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]


def _formatter(renderer: Processor) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_processors(),
    )


def log_file_path(file_config: FileHandlerSchema | None = None) -> Path:
    """Where the JSONL log goes: the configured path under the data directory."""
    if file_config is None:
        file_config = get_app_config().logging.handlers.file
    return get_data_dir() / file_config.path


def _file_handler(file_config: FileHandlerSchema) -> logging.Handler:
    path = log_file_path(file_config)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(path),
        maxBytes=file_config.max_bytes,
        backupCount=file_config.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
    return handler


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    Configure structlog and the root logger.

    Arguments left as None take their value from logging.yaml. Calling
    this again replaces the previous handlers.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        format_type: "console" (colored, human) or "json"
        enable_console: Write records to stderr
        enable_file_logging: Write JSONL records to the data directory
    """
    config = get_app_config().logging
    handlers = config.handlers

    level = level or config.level
    format_type = format_type or config.format
    if enable_console is None:
        enable_console = handlers.console.enabled
    if enable_file_logging is None:
        enable_file_logging = handlers.file.enabled

    structlog.configure(
        processors=_processors() + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        if format_type == "console":
            renderer: Processor = structlog.dev.ConsoleRenderer(colors=True)
        else:
            renderer = structlog.processors.JSONRenderer()
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(_formatter(renderer))
        root_logger.addHandler(console_handler)

    if enable_file_logging:
        root_logger.addHandler(_file_handler(handlers.file))

    # echo=True in database.yaml turns these back on per engine
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Get a structlog logger, typically get_logger(__name__)."""
    return structlog.get_logger(name)


def _check_source(source: str) -> None:
    if source not in VALID_SOURCES:
        raise ValueError(f"Unknown log source: {source}")


def bind_source(source: str) -> None:
    """Stamp every following record in this context with source."""
    _check_source(source)
    structlog.contextvars.bind_contextvars(source=source)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log one record with an explicit source.

    Raises:
        ValueError: If source is not one of VALID_SOURCES
        AttributeError: If level is not a log method
    """
    _check_source(source)
    getattr(logger, level.lower())(message, source=source, **kwargs)
