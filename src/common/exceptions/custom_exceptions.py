"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class ValidationError(ApplicationError):
    """Raised when a product field violates a domain invariant.

    ``code`` is a stable identifier (e.g. ``name_empty``) callers can match on;
    ``message`` is the human readable text.
    """

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code


class NotFoundError(ApplicationError):
    """Exception raised when a requested entity does not exist in storage."""

    def __init__(self, message: str = "Entity not found", entity_id: str | None = None) -> None:
        super().__init__(message)
        self.entity_id = entity_id


class DatabaseError(ApplicationError):
    """Exception raised for errors during database operations."""

    def __init__(self, message: str = "Database operation failed", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Database Error: {message}"
