"""
Query Exceptions

Raised when a well-formed response reports that Prometheus itself failed
to evaluate the request (an error envelope).
"""

from typing import Any

from prometheus_query.core.exceptions.base import PromBaseError


class QueryFailedError(PromBaseError):
    """
    Raised by ensure_success() for an error envelope.

    Attributes:
        error_type: Prometheus ``errorType`` (e.g. "bad_data", "timeout")
        warnings: Warnings returned alongside the error
    """

    def __init__(
        self,
        message: str,
        error_type: str,
        warnings: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details={"error_type": error_type, **(details or {})})
        self.error_type = error_type
        self.warnings = list(warnings or [])
