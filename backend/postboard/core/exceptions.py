"""Custom exceptions for the post store."""

from typing import Optional


class PostboardError(Exception):
    """Base exception for all postboard errors."""


class StoreError(PostboardError):
    """Raised when a MongoDB operation fails.

    Wraps the driver exception so callers above the store never depend on
    pymongo error types.

    Attributes:
        operation: Short name of the store operation that failed.
        original_error: The driver exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
            operation: Name of the store operation (e.g. "insert_post").
            original_error: Original exception that caused this error.
        """
        self.operation = operation
        self.original_error = original_error
        super().__init__(message)

        # Chain the original error for better debugging
        if original_error is not None:
            self.__cause__ = original_error

    def __str__(self) -> str:
        """Return detailed error message with context."""
        parts = [super().__str__()]

        if self.operation:
            parts.append(f"Operation: {self.operation}")

        if self.original_error:
            parts.append(f"Original error: {type(self.original_error).__name__}")

        return " | ".join(parts)


class StoreConnectionError(StoreError):
    """Raised when the initial connection to MongoDB cannot be established."""

    def __init__(
        self,
        message: str = "Failed to connect to MongoDB",
        operation: Optional[str] = "connect",
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize the connection error."""
        super().__init__(message, operation, original_error)
