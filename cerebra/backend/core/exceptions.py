"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.

Absence of a row is not an error in this application: repositories and
services return None/False for it. These exceptions cover the cases
that must reach the caller as failures.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when validation fails."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class DatabaseError(ApplicationError):
    """Raised when a database operation fails."""

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message, code="SYS_DATABASE_ERROR")


class InitializationError(ApplicationError):
    """Raised when the store cannot be opened or its schema cannot be applied."""

    def __init__(self, message: str = "Database initialization failed") -> None:
        super().__init__(message, code="SYS_INITIALIZATION_ERROR")


class UnknownCommandError(ApplicationError):
    """Raised when a dispatched command name is not registered."""

    def __init__(self, message: str = "Unknown command") -> None:
        super().__init__(message, code="CMD_UNKNOWN")
