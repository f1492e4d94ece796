"""
Codec Exceptions

Exception types raised while translating Prometheus JSON responses to and from
typed result values.

Every decode failure is a DecodeError subclass, so callers that only care
whether a payload was usable can catch the base class, while callers that
build user-facing messages can branch on the concrete kind. The offending
token or field name is always recorded in ``details``.

None of these are retried internally - the caller decides whether to retry
the underlying request.
"""

from prometheus_query.core.exceptions.base import PromBaseError


class DecodeError(PromBaseError):
    """Base class for all response decoding failures."""
    pass


class MalformedJsonError(DecodeError):
    """Raised when the payload is not valid JSON text."""
    pass


class MalformedEnvelopeError(DecodeError):
    """
    Raised when the top-level envelope is unusable.

    COMMON CAUSES:
    --------------
    - Top-level value is not an object
    - ``status`` missing or not "success"/"error"
    - ``errorType``/``error`` missing on an error envelope
    - ``warnings`` is not an array of strings
    """
    pass


class UnrecognizedDataShapeError(DecodeError):
    """Raised when ``data`` matches none of the known result shapes."""
    pass


class UnrecognizedResultTypeError(DecodeError):
    """Raised when ``resultType`` is not scalar, string, vector or matrix."""
    pass


class InvalidSampleValueError(DecodeError):
    """
    Raised when a sample value is neither a sentinel token nor a float literal.

    Example:
        raise InvalidSampleValueError(
            "Invalid sample value 'twelve'",
            details={"token": "twelve"}
        )
    """
    pass


class ArityMismatchError(DecodeError):
    """Raised when a tuple-encoded field has the wrong number of elements."""
    pass


class SchemaViolationError(DecodeError):
    """
    Raised when an object or field does not fit its schema.

    Covers unknown keys in closed-schema objects, duplicate keys, missing
    required fields and fields of the wrong JSON type.
    """
    pass


class EncodeError(PromBaseError):
    """Raised when a value handed to an encoder is not a result type."""
    pass
