"""
Exception Module

Structured exception hierarchy for prometheus_query.

Module Structure:
-----------------
- **base.py**: PromBaseError base class + ConfigurationError
- **codec.py**: Response decoding/encoding exceptions
- **transport.py**: HTTP transport exceptions
- **query.py**: Error-envelope exceptions

Usage:
------
```python
from prometheus_query.core.exceptions import DecodeError, InvalidSampleValueError
```
"""

# Base exception
from prometheus_query.core.exceptions.base import ConfigurationError, PromBaseError

# Codec exceptions
from prometheus_query.core.exceptions.codec import (
    ArityMismatchError,
    DecodeError,
    EncodeError,
    InvalidSampleValueError,
    MalformedEnvelopeError,
    MalformedJsonError,
    SchemaViolationError,
    UnrecognizedDataShapeError,
    UnrecognizedResultTypeError,
)

# Query exceptions
from prometheus_query.core.exceptions.query import QueryFailedError

# Transport exceptions
from prometheus_query.core.exceptions.transport import (
    TransportConnectionError,
    TransportError,
    TransportStatusError,
    TransportTimeoutError,
)

__all__ = [
    # Base
    "PromBaseError",
    "ConfigurationError",
    # Codec
    "DecodeError",
    "MalformedJsonError",
    "MalformedEnvelopeError",
    "UnrecognizedDataShapeError",
    "UnrecognizedResultTypeError",
    "InvalidSampleValueError",
    "ArityMismatchError",
    "SchemaViolationError",
    "EncodeError",
    # Query
    "QueryFailedError",
    # Transport
    "TransportError",
    "TransportConnectionError",
    "TransportTimeoutError",
    "TransportStatusError",
]
