"""
Base Exception Class

This module contains ONLY the base exception class that all other exceptions inherit from.
All specialized exceptions are in their respective themed modules.
"""

from typing import Any


class PromBaseError(Exception):
    """
    Base exception for all prometheus_query errors.

    All custom exceptions inherit from this class to enable:
    - Consistent error handling
    - Structured error logging
    - Rich context for debugging (offending token, field name, URL)

    Attributes:
        message: Error message
        details: Additional error details (dict)

    Example:
        raise InvalidSampleValueError(
            "Invalid sample value 'abc'",
            details={"token": "abc"}
        )
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = (details or {}).copy()  # Create a copy to prevent external modification
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for logging.

        Returns:
            Dict with error_type, message and details
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }

    def with_suggestion(self, suggestion: str) -> "PromBaseError":
        """
        Add a suggestion to help users fix the error.

        Returns:
            Self (for method chaining)
        """
        self.details["suggestion"] = suggestion
        return self

    def with_context(self, **context) -> "PromBaseError":
        """
        Add additional context to the error details.

        Returns:
            Self (for method chaining)
        """
        self.details.update(context)
        return self

    def __repr__(self) -> str:
        details_str = f", details={self.details}" if self.details else ""
        return f"{self.__class__.__name__}(message='{self.message}'{details_str})"

    @classmethod
    def from_exception(
        cls,
        exc: Exception,
        message: str | None = None,
        **details
    ) -> "PromBaseError":
        """
        Create an error from another exception.

        Useful for wrapping third-party exceptions with additional context.

        Example:
            >>> try:
            ...     await client.get(url)
            ... except httpx.ConnectError as e:
            ...     raise TransportConnectionError.from_exception(e, url=url) from e
        """
        error_message = message or str(exc)
        error_details = {
            "original_error": exc.__class__.__name__,
            "original_message": str(exc),
            **details
        }
        return cls(error_message, details=error_details)


class ConfigurationError(PromBaseError):
    """Raised when configuration is invalid or missing."""
    pass
