"""
prometheus_query

Typed client and codec for the Prometheus HTTP v1 query API.

```python
from prometheus_query import decode_query_result

result = decode_query_result(body)
```
"""

from prometheus_query.client import (
    HttpxTransport,
    PromClient,
    PrometheusConfig,
    PromRequest,
    Transport,
    ensure_success,
    open_prom_client,
)
from prometheus_query.codec import (
    classify_data,
    decode_query_result,
    decode_result_data,
    decode_sample,
    decode_string_sample,
    encode_query_result,
    encode_result_data,
    encode_sample,
    encode_string_sample,
)
from prometheus_query.core.config.constants import DataShape, ResultType, TargetHealth
from prometheus_query.core.exceptions import (
    ArityMismatchError,
    DecodeError,
    EncodeError,
    InvalidSampleValueError,
    MalformedEnvelopeError,
    MalformedJsonError,
    PromBaseError,
    QueryFailedError,
    SchemaViolationError,
    TransportConnectionError,
    TransportError,
    TransportStatusError,
    TransportTimeoutError,
    UnrecognizedDataShapeError,
    UnrecognizedResultTypeError,
)
from prometheus_query.models import (
    ActiveTarget,
    AlertManager,
    AlertManagers,
    DroppedTarget,
    Expression,
    Flags,
    InstantResult,
    InstantVector,
    LabelsOrValues,
    Metric,
    QueryError,
    QueryResult,
    QuerySuccess,
    RangeMatrix,
    RangeResult,
    ResultData,
    Sample,
    ScalarResult,
    Series,
    StringResult,
    StringSample,
    Targets,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "HttpxTransport",
    "PromClient",
    "PromRequest",
    "PrometheusConfig",
    "Transport",
    "ensure_success",
    "open_prom_client",
    # Codec
    "classify_data",
    "decode_query_result",
    "decode_result_data",
    "decode_sample",
    "decode_string_sample",
    "encode_query_result",
    "encode_result_data",
    "encode_sample",
    "encode_string_sample",
    # Enums
    "DataShape",
    "ResultType",
    "TargetHealth",
    # Exceptions
    "PromBaseError",
    "DecodeError",
    "MalformedJsonError",
    "MalformedEnvelopeError",
    "UnrecognizedDataShapeError",
    "UnrecognizedResultTypeError",
    "InvalidSampleValueError",
    "ArityMismatchError",
    "SchemaViolationError",
    "EncodeError",
    "QueryFailedError",
    "TransportError",
    "TransportConnectionError",
    "TransportTimeoutError",
    "TransportStatusError",
    # Models
    "ActiveTarget",
    "AlertManager",
    "AlertManagers",
    "DroppedTarget",
    "Expression",
    "Flags",
    "InstantResult",
    "InstantVector",
    "LabelsOrValues",
    "Metric",
    "QueryError",
    "QueryResult",
    "QuerySuccess",
    "RangeMatrix",
    "RangeResult",
    "ResultData",
    "Sample",
    "ScalarResult",
    "Series",
    "StringResult",
    "StringSample",
    "Targets",
]
