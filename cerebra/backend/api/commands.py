"""
Command Dispatch.

Synchronous request-response boundary over the services. Every
operation is registered under a stable name ("folders:list",
"notes:search", ...) and invoked with positional arguments:

    dispatcher = CommandDispatcher(session_factory)
    folder = dispatcher.dispatch("folders:create", {"name": "Work"})
    dispatcher.dispatch("folders:update", folder["id"], {"parent_id": None})

Each dispatch runs in its own session scope: one command, one
transaction. Payload dicts are validated with the pydantic schemas;
results are JSON-ready (datetimes as ISO-8601 strings). Not-found is
returned as None/False, never raised.
"""

import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, PositiveInt, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from cerebra.backend.core.database import session_scope
from cerebra.backend.core.exceptions import (
    ApplicationError,
    DatabaseError,
    UnknownCommandError,
    ValidationError,
)
from cerebra.backend.core.logging import get_logger, log_with_source
from cerebra.backend.schemas.base import (
    ApiResponse,
    ErrorDetail,
    ErrorResponse,
    ResponseMetadata,
)
from cerebra.backend.schemas.folder import FolderCreate, FolderResponse, FolderUpdate
from cerebra.backend.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from cerebra.backend.schemas.setting import SettingWrite
from cerebra.backend.schemas.sticky_note import (
    StickyNoteCreate,
    StickyNoteResponse,
    StickyNoteUpdate,
)
from cerebra.backend.services.folder import FolderService
from cerebra.backend.services.note import NoteService
from cerebra.backend.services.setting import SettingService
from cerebra.backend.services.sticky_note import StickyNoteService

logger = get_logger(__name__)

Handler = Callable[..., Any]
SchemaT = TypeVar("SchemaT", bound=BaseModel)

_COMMANDS: dict[str, Handler] = {}
_id_adapter = TypeAdapter(PositiveInt)
_query_adapter = TypeAdapter(str)


def command(name: str) -> Callable[[Handler], Handler]:
    """Register a handler under a command name. Handlers take (session, *args)."""

    def decorator(func: Handler) -> Handler:
        _COMMANDS[name] = func
        return func

    return decorator


def _validated(value: Any, adapter: TypeAdapter, field: str) -> Any:
    try:
        return adapter.validate_python(value)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid {field}",
            details={"validation_errors": e.errors(include_url=False)},
        ) from e


def _payload(schema: type[SchemaT], payload: Any) -> SchemaT:
    """Validate a payload dict into its schema."""
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(payload or {})
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid {schema.__name__} payload",
            details={"validation_errors": e.errors(include_url=False)},
        ) from e


def _identifier(value: Any) -> int:
    return _validated(value, _id_adapter, "id")


def _dump(schema: type[BaseModel], instance: Any) -> dict[str, Any] | None:
    if instance is None:
        return None
    return schema.model_validate(instance).model_dump(mode="json")


def _dump_all(schema: type[BaseModel], instances: list[Any]) -> list[dict[str, Any]]:
    return [schema.model_validate(item).model_dump(mode="json") for item in instances]


# =============================================================================
# folders
# =============================================================================


@command("folders:list")
def list_folders(session: Session) -> list[dict[str, Any]]:
    return _dump_all(FolderResponse, FolderService(session).list_folders())


@command("folders:get")
def get_folder(session: Session, folder_id: Any) -> dict[str, Any] | None:
    return _dump(FolderResponse, FolderService(session).get_folder(_identifier(folder_id)))


@command("folders:get-item-counts")
def get_folder_item_counts(session: Session) -> dict[int, int]:
    return FolderService(session).get_item_counts()


@command("folders:create")
def create_folder(session: Session, payload: Any) -> dict[str, Any] | None:
    data = _payload(FolderCreate, payload)
    return _dump(FolderResponse, FolderService(session).create_folder(data))


@command("folders:update")
def update_folder(session: Session, folder_id: Any, payload: Any) -> dict[str, Any] | None:
    data = _payload(FolderUpdate, payload)
    folder = FolderService(session).update_folder(_identifier(folder_id), data)
    return _dump(FolderResponse, folder)


@command("folders:delete")
def delete_folder(session: Session, folder_id: Any) -> bool:
    return FolderService(session).delete_folder(_identifier(folder_id))


# =============================================================================
# notes
# =============================================================================


@command("notes:list-by-folder")
def list_notes_by_folder(session: Session, folder_id: Any) -> list[dict[str, Any]]:
    return _dump_all(NoteResponse, NoteService(session).list_notes(_identifier(folder_id)))


@command("notes:get")
def get_note(session: Session, note_id: Any) -> dict[str, Any] | None:
    return _dump(NoteResponse, NoteService(session).get_note(_identifier(note_id)))


@command("notes:create")
def create_note(session: Session, payload: Any) -> dict[str, Any] | None:
    data = _payload(NoteCreate, payload)
    return _dump(NoteResponse, NoteService(session).create_note(data))


@command("notes:update")
def update_note(session: Session, note_id: Any, payload: Any) -> dict[str, Any] | None:
    data = _payload(NoteUpdate, payload)
    return _dump(NoteResponse, NoteService(session).update_note(_identifier(note_id), data))


@command("notes:delete")
def delete_note(session: Session, note_id: Any) -> bool:
    return NoteService(session).delete_note(_identifier(note_id))


@command("notes:search")
def search_notes(session: Session, query: Any) -> list[dict[str, Any]]:
    text = _validated(query, _query_adapter, "query")
    return _dump_all(NoteResponse, NoteService(session).search_notes(text))


# =============================================================================
# sticky-notes
# =============================================================================


@command("sticky-notes:list")
def list_sticky_notes(session: Session) -> list[dict[str, Any]]:
    return _dump_all(StickyNoteResponse, StickyNoteService(session).list_sticky_notes())


@command("sticky-notes:get")
def get_sticky_note(session: Session, sticky_id: Any) -> dict[str, Any] | None:
    sticky = StickyNoteService(session).get_sticky_note(_identifier(sticky_id))
    return _dump(StickyNoteResponse, sticky)


@command("sticky-notes:create")
def create_sticky_note(session: Session, payload: Any) -> dict[str, Any] | None:
    data = _payload(StickyNoteCreate, payload)
    return _dump(StickyNoteResponse, StickyNoteService(session).create_sticky_note(data))


@command("sticky-notes:update")
def update_sticky_note(session: Session, sticky_id: Any, payload: Any) -> dict[str, Any] | None:
    data = _payload(StickyNoteUpdate, payload)
    sticky = StickyNoteService(session).update_sticky_note(_identifier(sticky_id), data)
    return _dump(StickyNoteResponse, sticky)


@command("sticky-notes:delete")
def delete_sticky_note(session: Session, sticky_id: Any) -> bool:
    return StickyNoteService(session).delete_sticky_note(_identifier(sticky_id))


# =============================================================================
# settings
# =============================================================================


@command("settings:get")
def get_setting(session: Session, key: Any) -> str | None:
    return SettingService(session).get_setting(_validated(key, _query_adapter, "key"))


@command("settings:set")
def set_setting(session: Session, key: Any, value: Any) -> None:
    data = _payload(SettingWrite, {"key": key, "value": value})
    SettingService(session).set_setting(data)


@command("settings:get-all")
def get_all_settings(session: Session) -> dict[str, str]:
    return SettingService(session).get_all_settings()


@command("settings:get-preferences")
def get_preferences(session: Session) -> dict[str, Any]:
    return SettingService(session).get_preferences().model_dump(mode="json", by_alias=True)


# =============================================================================
# Dispatcher
# =============================================================================


class CommandDispatcher:
    """
    Invokes registered commands against a session factory.

    dispatch() returns the raw result and raises ApplicationError on
    failure; handle() wraps the outcome in ApiResponse or ErrorResponse,
    which a UI bridge can pass through as-is.
    """

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        self._session_factory = session_factory
        self._handlers: dict[str, Handler] = dict(_COMMANDS)

    @property
    def commands(self) -> list[str]:
        """Registered command names, sorted."""
        return sorted(self._handlers)

    def dispatch(self, name: str, *args: Any) -> Any:
        """
        Run a command in its own session scope.

        Raises:
            UnknownCommandError: If no handler is registered under name
            ValidationError: If a payload or argument is invalid, or the
                number of arguments does not match the command
            DatabaseError: If the store rejects the operation
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownCommandError(f"Unknown command: {name}")

        try:
            inspect.signature(handler).bind(None, *args)
        except TypeError as e:
            raise ValidationError(
                f"Wrong arguments for {name}",
                details={"command": name, "error": str(e)},
            ) from e

        log_with_source(logger, "dispatch", "debug", "Dispatching command", command=name)
        try:
            with session_scope(self._session_factory) as session:
                return handler(session, *args)
        except SQLAlchemyError as e:
            # commit failures surface here, after the services returned
            log_with_source(
                logger, "dispatch", "error", "Database error", command=name, error=str(e),
            )
            raise DatabaseError(f"Database operation failed: {name}") from e

    def handle(self, name: str, *args: Any) -> ApiResponse[Any] | ErrorResponse:
        """Run a command and wrap the outcome in the response envelope."""
        metadata = ResponseMetadata(command=name)
        try:
            data = self.dispatch(name, *args)
        except ApplicationError as exc:
            log_extra = {"command": name, "code": exc.code, "error": exc.message}
            if isinstance(exc, DatabaseError):
                log_with_source(logger, "dispatch", "error", "Command failed", **log_extra)
            else:
                log_with_source(logger, "dispatch", "warning", "Command rejected", **log_extra)
            return ErrorResponse(
                error=ErrorDetail(
                    code=exc.code,
                    message=exc.message,
                    details=getattr(exc, "details", None) or None,
                ),
                metadata=metadata,
            )
        return ApiResponse(data=data, metadata=metadata)
