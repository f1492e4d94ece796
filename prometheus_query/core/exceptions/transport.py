"""
Transport Exceptions

Exception types for the HTTP transport that fetches raw Prometheus responses.

DESIGN PATTERN:
---------------
- TransportError is the base for all transport failures
- Specific subclasses for connection, timeout and unexpected HTTP status
- Decode failures are NOT transport errors; see codec.py
"""

from prometheus_query.core.exceptions.base import PromBaseError


class TransportError(PromBaseError):
    """
    Base exception for all transport-level failures.

    Example:
        try:
            result = await client.instant_query("up")
        except TransportError as e:
            logger.error("Prometheus request failed", error=e.to_dict())
    """

    pass


class TransportConnectionError(TransportError):
    """
    Raised when connection to the Prometheus server fails.

    COMMON CAUSES:
    --------------
    - Prometheus server is down or unreachable
    - Incorrect PROMETHEUS_URL configuration
    - DNS resolution failure
    """

    pass


class TransportTimeoutError(TransportError):
    """Raised when a request exceeds the configured timeout."""

    pass


class TransportStatusError(TransportError):
    """
    Raised when Prometheus answers with an HTTP status that carries no
    JSON envelope (e.g. 404 from a reverse proxy, 500 from a crashed server).

    The status code and a truncated response body are stored in ``details``.
    """

    pass
