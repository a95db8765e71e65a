"""
Base Service.

Base class for all services providing common patterns for business logic.
Services orchestrate repositories, translate storage errors, and
implement business rules.

Usage:
    from cerebra.backend.services.base import BaseService

    class FolderService(BaseService):
        def __init__(self, session: Session) -> None:
            super().__init__(session)
            self.repo = FolderRepository(session)

        def create_folder(self, data: FolderCreate) -> Folder:
            return self._execute_db_operation(
                "create_folder", self.repo.create, name=data.name,
            )
"""

from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from cerebra.backend.core.exceptions import DatabaseError
from cerebra.backend.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class BaseService:
    """
    Base class for all services.

    Provides:
    - Database session access
    - Logging context
    - Error wrapping for database operations

    Subclasses should:
    - Call super().__init__(session) in their __init__
    - Initialize repositories in __init__
    - Implement business logic methods
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize the service with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session
        self._logger = get_logger(self.__class__.__module__)

    @property
    def session(self) -> Session:
        """Get the database session."""
        return self._session

    def _execute_db_operation(
        self,
        operation: str,
        func: Callable[..., T],
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """
        Execute a database operation with error handling.

        Converts SQLAlchemy exceptions to application exceptions. Nothing
        is retried or repaired: the failure goes straight to the caller,
        and the enclosing session scope rolls the transaction back.

        Args:
            operation: Description of the operation for logging
            func: Repository method to call
            *args: Positional arguments for func
            **kwargs: Keyword arguments for func

        Returns:
            Result of func

        Raises:
            DatabaseError: For constraint violations and other database errors
        """
        try:
            return func(*args, **kwargs)
        except IntegrityError as e:
            self._logger.warning(
                "Database integrity error",
                extra={"operation": operation, "error": str(e.orig)},
            )
            raise DatabaseError(f"Database constraint violation: {operation}") from e
        except SQLAlchemyError as e:
            self._logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database operation failed: {operation}") from e

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
