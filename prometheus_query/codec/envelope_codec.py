"""
Result Envelope Codec
=====================

Decodes the ``{status, data|error, warnings}`` envelope returned by every
Prometheus HTTP v1 API call into typed QueryResult values, and encodes
them back.

DATA SHAPE DISPATCH
-------------------
``data`` carries no tag saying what it is. Its shape is tested in a fixed
precedence order and the first match wins:

```
1. EXPRESSION        object with "resultType"
2. SERIES            non-empty array of string->string objects
3. LABELS_OR_VALUES  array of strings (includes the empty array)
4. TARGETS           object with "activeTargets" and/or "droppedTargets"
5. ALERT_MANAGERS    object with "activeAlertmanagers" and/or "droppedAlertmanagers"
6. FLAGS             object whose values are all strings (includes {})
```

An empty array is ambiguous between SERIES and LABELS_OR_VALUES and is
always read as LABELS_OR_VALUES. Once a shape is chosen, the matching
decoder owns the value: a TARGETS object with an unknown key is a schema
violation, not a fall-through to FLAGS.

The module performs no I/O and holds no state; every function is safe to
call concurrently.
"""

from datetime import datetime
from typing import Any

from pydantic import ValidationError

from prometheus_query.codec.json_value import (
    JsonValue,
    describe,
    dump_json,
    is_string_map,
    parse_json,
)
from prometheus_query.codec.sample_codec import (
    decode_sample,
    decode_string_sample,
    encode_sample,
    encode_string_sample,
)
from prometheus_query.core.config.constants import (
    FIELD_ACTIVE_ALERTMANAGERS,
    FIELD_ACTIVE_TARGETS,
    FIELD_DATA,
    FIELD_DISCOVERED_LABELS,
    FIELD_DROPPED_ALERTMANAGERS,
    FIELD_DROPPED_TARGETS,
    FIELD_ERROR,
    FIELD_ERROR_TYPE,
    FIELD_HEALTH,
    FIELD_LABELS,
    FIELD_LAST_ERROR,
    FIELD_LAST_SCRAPE,
    FIELD_METRIC,
    FIELD_RESULT,
    FIELD_RESULT_TYPE,
    FIELD_SCRAPE_URL,
    FIELD_STATUS,
    FIELD_URL,
    FIELD_VALUE,
    FIELD_VALUES,
    FIELD_WARNINGS,
    SERIES_RESERVED_LABELS,
    DataShape,
    ResponseStatus,
    ResultType,
    TargetHealth,
)
from prometheus_query.core.exceptions import (
    EncodeError,
    MalformedEnvelopeError,
    SchemaViolationError,
    UnrecognizedDataShapeError,
    UnrecognizedResultTypeError,
)
from prometheus_query.models import (
    ActiveTarget,
    AlertManager,
    AlertManagers,
    DroppedTarget,
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
    ScalarResult,
    Series,
    StringResult,
    Targets,
)

_TARGETS_FIELDS = frozenset({FIELD_ACTIVE_TARGETS, FIELD_DROPPED_TARGETS})
_ALERTMANAGERS_FIELDS = frozenset({FIELD_ACTIVE_ALERTMANAGERS, FIELD_DROPPED_ALERTMANAGERS})
_ALERTMANAGER_FIELDS = frozenset({FIELD_URL})


# =============================================================================
# FIELD HELPERS
# =============================================================================


def _expect_object(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise SchemaViolationError(
            f"Expected {what} to be an object, got {describe(value)}",
            details={"field": what, "found": describe(value)},
        )
    return value


def _expect_array(value: Any, what: str) -> list:
    if not isinstance(value, list):
        raise SchemaViolationError(
            f"Expected {what} to be an array, got {describe(value)}",
            details={"field": what, "found": describe(value)},
        )
    return value


def _require(obj: dict[str, Any], field: str, owner: str) -> Any:
    if field not in obj:
        raise SchemaViolationError(
            f"Missing field '{field}' in {owner}",
            details={"field": field, "owner": owner, "reason": "missing"},
        )
    return obj[field]


def _require_string(obj: dict[str, Any], field: str, owner: str) -> str:
    value = _require(obj, field, owner)
    if not isinstance(value, str):
        raise SchemaViolationError(
            f"Field '{field}' in {owner} must be a string, got {describe(value)}",
            details={"field": field, "owner": owner, "found": describe(value)},
        )
    return value


def _reject_unknown(obj: dict[str, Any], allowed: frozenset[str], owner: str) -> None:
    unknown = sorted(set(obj) - allowed)
    if unknown:
        raise SchemaViolationError(
            f"Unknown field '{unknown[0]}' in {owner}",
            details={"field": unknown[0], "owner": owner, "reason": "unknown", "allowed": sorted(allowed)},
        )


def _optional_array(obj: dict[str, Any], field: str) -> list:
    value = obj.get(field)
    if value is None:
        return []
    return _expect_array(value, field)


# =============================================================================
# SHAPE CLASSIFICATION
# =============================================================================


def _is_label_set(value: Any) -> bool:
    return is_string_map(value) and not (SERIES_RESERVED_LABELS & set(value))


def classify_data(value: Any) -> DataShape:
    """
    Decide which ResultData shape a ``data`` value has.

    Predicates are evaluated in DataShape declaration order; the first one
    that holds wins. The result depends only on the value, so the same
    input always yields the same shape.

    Raises:
        UnrecognizedDataShapeError: No predicate holds
    """
    if isinstance(value, dict) and FIELD_RESULT_TYPE in value:
        return DataShape.EXPRESSION

    if isinstance(value, list):
        if value and all(_is_label_set(item) for item in value):
            return DataShape.SERIES
        if all(isinstance(item, str) for item in value):
            return DataShape.LABELS_OR_VALUES

    if isinstance(value, dict):
        if _TARGETS_FIELDS & set(value):
            return DataShape.TARGETS
        if _ALERTMANAGERS_FIELDS & set(value):
            return DataShape.ALERT_MANAGERS
        if is_string_map(value):
            return DataShape.FLAGS

    raise UnrecognizedDataShapeError(
        f"Response data matches no known result shape: {describe(value)}",
        details={"found": describe(value)},
    )


# =============================================================================
# DECODERS
# =============================================================================


def decode_metric(value: Any, what: str = FIELD_METRIC) -> Metric:
    obj = _expect_object(value, what)
    for label, label_value in obj.items():
        if not isinstance(label_value, str):
            raise SchemaViolationError(
                f"Label '{label}' in {what} must be a string, got {describe(label_value)}",
                details={"field": label, "owner": what, "found": describe(label_value)},
            )
    return Metric(labels=dict(obj))


def _decode_instant_result(value: Any) -> InstantResult:
    obj = _expect_object(value, "vector element")
    return InstantResult(
        metric=decode_metric(_require(obj, FIELD_METRIC, "vector element")),
        sample=decode_sample(_require(obj, FIELD_VALUE, "vector element")),
    )


def _decode_range_result(value: Any) -> RangeResult:
    obj = _expect_object(value, "matrix element")
    raw_samples = _expect_array(_require(obj, FIELD_VALUES, "matrix element"), FIELD_VALUES)
    return RangeResult(
        metric=decode_metric(_require(obj, FIELD_METRIC, "matrix element")),
        samples=[decode_sample(item) for item in raw_samples],
    )


def decode_expression(obj: dict[str, Any]) -> ResultData:
    """Decode an expression result, branching on ``resultType``."""
    token = _require(obj, FIELD_RESULT_TYPE, "expression result")
    try:
        result_type = ResultType(token)
    except ValueError as e:
        raise UnrecognizedResultTypeError(
            f"Unrecognized resultType '{token}'",
            details={"token": token, "expected": [t.value for t in ResultType]},
        ) from e

    result = _require(obj, FIELD_RESULT, "expression result")

    if result_type is ResultType.SCALAR:
        return ScalarResult(sample=decode_sample(result))
    if result_type is ResultType.STRING:
        return StringResult(sample=decode_string_sample(result))
    if result_type is ResultType.VECTOR:
        items = _expect_array(result, FIELD_RESULT)
        return InstantVector(results=[_decode_instant_result(item) for item in items])

    items = _expect_array(result, FIELD_RESULT)
    return RangeMatrix(results=[_decode_range_result(item) for item in items])


def _decode_last_scrape(value: Any) -> datetime:
    if not isinstance(value, str):
        raise SchemaViolationError(
            f"Field '{FIELD_LAST_SCRAPE}' must be a string, got {describe(value)}",
            details={"field": FIELD_LAST_SCRAPE, "found": describe(value)},
        )
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise SchemaViolationError(
            f"Field '{FIELD_LAST_SCRAPE}' is not an RFC 3339 timestamp: '{value}'",
            details={"field": FIELD_LAST_SCRAPE, "token": value},
        ) from e
    if parsed.tzinfo is None:
        raise SchemaViolationError(
            f"Field '{FIELD_LAST_SCRAPE}' has no UTC offset: '{value}'",
            details={"field": FIELD_LAST_SCRAPE, "token": value},
        )
    return parsed


def _decode_last_error(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise SchemaViolationError(
            f"Field '{FIELD_LAST_ERROR}' must be a string, got {describe(value)}",
            details={"field": FIELD_LAST_ERROR, "found": describe(value)},
        )
    return value or None


def _decode_health(value: Any) -> TargetHealth:
    # Anything other than "up"/"down", absence included, is UNKNOWN
    if value == TargetHealth.UP.value:
        return TargetHealth.UP
    if value == TargetHealth.DOWN.value:
        return TargetHealth.DOWN
    return TargetHealth.UNKNOWN


def _decode_url(value: Any, field: str, owner: str):
    if not isinstance(value, str):
        raise SchemaViolationError(
            f"Field '{field}' in {owner} must be a string, got {describe(value)}",
            details={"field": field, "owner": owner, "found": describe(value)},
        )
    return value


def _decode_active_target(value: Any) -> ActiveTarget:
    owner = "active target"
    obj = _expect_object(value, owner)
    scrape_url = _decode_url(_require(obj, FIELD_SCRAPE_URL, owner), FIELD_SCRAPE_URL, owner)
    try:
        return ActiveTarget(
            discovered_labels=decode_metric(_require(obj, FIELD_DISCOVERED_LABELS, owner), FIELD_DISCOVERED_LABELS),
            labels=decode_metric(_require(obj, FIELD_LABELS, owner), FIELD_LABELS),
            scrape_url=scrape_url,
            last_error=_decode_last_error(obj.get(FIELD_LAST_ERROR)),
            last_scrape=_decode_last_scrape(_require(obj, FIELD_LAST_SCRAPE, owner)),
            health=_decode_health(obj.get(FIELD_HEALTH)),
        )
    except ValidationError as e:
        raise SchemaViolationError(
            f"Field '{FIELD_SCRAPE_URL}' is not a valid URL: '{scrape_url}'",
            details={"field": FIELD_SCRAPE_URL, "token": scrape_url},
        ) from e


def _decode_dropped_target(value: Any) -> DroppedTarget:
    obj = _expect_object(value, "dropped target")
    return DroppedTarget(
        discovered_labels=decode_metric(
            _require(obj, FIELD_DISCOVERED_LABELS, "dropped target"), FIELD_DISCOVERED_LABELS
        ),
    )


def decode_targets(obj: dict[str, Any]) -> Targets:
    _reject_unknown(obj, _TARGETS_FIELDS, "targets")
    return Targets(
        active=[_decode_active_target(item) for item in _optional_array(obj, FIELD_ACTIVE_TARGETS)],
        dropped=[_decode_dropped_target(item) for item in _optional_array(obj, FIELD_DROPPED_TARGETS)],
    )


def _decode_alertmanager(value: Any) -> AlertManager:
    owner = "alertmanager"
    obj = _expect_object(value, owner)
    _reject_unknown(obj, _ALERTMANAGER_FIELDS, owner)
    url = _decode_url(_require(obj, FIELD_URL, owner), FIELD_URL, owner)
    try:
        return AlertManager(url=url)
    except ValidationError as e:
        raise SchemaViolationError(
            f"Field '{FIELD_URL}' is not a valid URL: '{url}'",
            details={"field": FIELD_URL, "token": url},
        ) from e


def decode_alertmanagers(obj: dict[str, Any]) -> AlertManagers:
    _reject_unknown(obj, _ALERTMANAGERS_FIELDS, "alertmanagers")
    return AlertManagers(
        active=[_decode_alertmanager(item) for item in _optional_array(obj, FIELD_ACTIVE_ALERTMANAGERS)],
        dropped=[_decode_alertmanager(item) for item in _optional_array(obj, FIELD_DROPPED_ALERTMANAGERS)],
    )


def decode_result_data(value: Any) -> ResultData:
    """
    Decode a ``data`` JSON value into its typed ResultData variant.

    Raises:
        UnrecognizedDataShapeError: Value matches no known shape
        UnrecognizedResultTypeError: Expression with unknown ``resultType``
        SchemaViolationError: Chosen shape's schema is violated
        ArityMismatchError / InvalidSampleValueError: Bad sample pair
    """
    shape = classify_data(value)

    if shape is DataShape.EXPRESSION:
        return decode_expression(value)
    if shape is DataShape.SERIES:
        return Series(metrics=[decode_metric(item, "series element") for item in value])
    if shape is DataShape.LABELS_OR_VALUES:
        return LabelsOrValues(values=list(value))
    if shape is DataShape.TARGETS:
        return decode_targets(value)
    if shape is DataShape.ALERT_MANAGERS:
        return decode_alertmanagers(value)
    return Flags(flags=dict(value))


def _decode_warnings(envelope: dict[str, Any]) -> list[str]:
    warnings = envelope.get(FIELD_WARNINGS)
    if warnings is None:
        return []
    if not isinstance(warnings, list) or not all(isinstance(w, str) for w in warnings):
        raise MalformedEnvelopeError(
            f"Envelope '{FIELD_WARNINGS}' must be an array of strings, got {describe(warnings)}",
            details={"field": FIELD_WARNINGS, "found": describe(warnings)},
        )
    return list(warnings)


def _decode_envelope_string(envelope: dict[str, Any], field: str) -> str:
    value = envelope.get(field)
    if not isinstance(value, str):
        reason = "missing" if field not in envelope else f"not a string ({describe(value)})"
        raise MalformedEnvelopeError(
            f"Error envelope field '{field}' is {reason}",
            details={"field": field},
        )
    return value


def decode_envelope(envelope: Any) -> QueryResult:
    """Decode an already-parsed envelope JSON value."""
    if not isinstance(envelope, dict):
        raise MalformedEnvelopeError(
            f"Response envelope must be an object, got {describe(envelope)}",
            details={"found": describe(envelope)},
        )

    if FIELD_STATUS not in envelope:
        raise MalformedEnvelopeError(
            f"Response envelope has no '{FIELD_STATUS}' field",
            details={"field": FIELD_STATUS},
        )
    token = envelope[FIELD_STATUS]
    try:
        status = ResponseStatus(token)
    except ValueError as e:
        raise MalformedEnvelopeError(
            f"Invalid response status '{token}'",
            details={"field": FIELD_STATUS, "token": token, "expected": [s.value for s in ResponseStatus]},
        ) from e

    raw_data = envelope.get(FIELD_DATA)
    data = None if raw_data is None else decode_result_data(raw_data)
    warnings = _decode_warnings(envelope)

    if status is ResponseStatus.SUCCESS:
        return QuerySuccess(data=data, warnings=warnings)

    return QueryError(
        error_type=_decode_envelope_string(envelope, FIELD_ERROR_TYPE),
        error_message=_decode_envelope_string(envelope, FIELD_ERROR),
        data=data,
        warnings=warnings,
    )


def decode_query_result(payload: bytes | bytearray | memoryview | str) -> QueryResult:
    """
    Decode a raw Prometheus response body.

    Args:
        payload: Complete response body

    Returns:
        QuerySuccess or QueryError

    Raises:
        DecodeError subclass describing the first problem found

    Example:
        >>> result = decode_query_result(b'{"status":"success","data":["a","b"]}')
        >>> result.data.values
        ['a', 'b']
    """
    return decode_envelope(parse_json(payload))


# =============================================================================
# ENCODERS
# =============================================================================


def _encode_metric(metric: Metric) -> dict[str, str]:
    return dict(metric.labels)


def _encode_active_target(target: ActiveTarget) -> dict[str, Any]:
    return {
        FIELD_DISCOVERED_LABELS: _encode_metric(target.discovered_labels),
        FIELD_LABELS: _encode_metric(target.labels),
        FIELD_SCRAPE_URL: str(target.scrape_url),
        FIELD_LAST_ERROR: target.last_error or "",
        FIELD_LAST_SCRAPE: target.last_scrape.isoformat(),
        FIELD_HEALTH: target.health.value,
    }


def encode_result_data(data: ResultData) -> JsonValue:
    """Encode a ResultData value into its JSON value."""
    if isinstance(data, ScalarResult):
        return {FIELD_RESULT_TYPE: ResultType.SCALAR.value, FIELD_RESULT: encode_sample(data.sample)}
    if isinstance(data, StringResult):
        return {FIELD_RESULT_TYPE: ResultType.STRING.value, FIELD_RESULT: encode_string_sample(data.sample)}
    if isinstance(data, InstantVector):
        return {
            FIELD_RESULT_TYPE: ResultType.VECTOR.value,
            FIELD_RESULT: [
                {FIELD_METRIC: _encode_metric(r.metric), FIELD_VALUE: encode_sample(r.sample)}
                for r in data.results
            ],
        }
    if isinstance(data, RangeMatrix):
        return {
            FIELD_RESULT_TYPE: ResultType.MATRIX.value,
            FIELD_RESULT: [
                {FIELD_METRIC: _encode_metric(r.metric), FIELD_VALUES: [encode_sample(s) for s in r.samples]}
                for r in data.results
            ],
        }
    if isinstance(data, Series):
        return [_encode_metric(m) for m in data.metrics]
    if isinstance(data, LabelsOrValues):
        return list(data.values)
    if isinstance(data, Targets):
        return {
            FIELD_ACTIVE_TARGETS: [_encode_active_target(t) for t in data.active],
            FIELD_DROPPED_TARGETS: [
                {FIELD_DISCOVERED_LABELS: _encode_metric(t.discovered_labels)} for t in data.dropped
            ],
        }
    if isinstance(data, AlertManagers):
        return {
            FIELD_ACTIVE_ALERTMANAGERS: [{FIELD_URL: str(a.url)} for a in data.active],
            FIELD_DROPPED_ALERTMANAGERS: [{FIELD_URL: str(a.url)} for a in data.dropped],
        }
    if isinstance(data, Flags):
        return dict(data.flags)

    raise EncodeError(
        f"Cannot encode {type(data).__name__} as response data",
        details={"found": type(data).__name__},
    )


def encode_envelope(result: QueryResult) -> dict[str, Any]:
    """Encode a QueryResult into the envelope JSON value."""
    if isinstance(result, QuerySuccess):
        envelope: dict[str, Any] = {FIELD_STATUS: ResponseStatus.SUCCESS.value}
    elif isinstance(result, QueryError):
        envelope = {
            FIELD_STATUS: ResponseStatus.ERROR.value,
            FIELD_ERROR_TYPE: result.error_type,
            FIELD_ERROR: result.error_message,
        }
    else:
        raise EncodeError(
            f"Cannot encode {type(result).__name__} as a response envelope",
            details={"found": type(result).__name__},
        )

    if result.data is not None:
        envelope[FIELD_DATA] = encode_result_data(result.data)
    envelope[FIELD_WARNINGS] = list(result.warnings)
    return envelope


def encode_query_result(result: QueryResult) -> bytes:
    """
    Encode a QueryResult into a response body.

    ``decode_query_result(encode_query_result(r)) == r`` for every
    constructible result.
    """
    return dump_json(encode_envelope(result))
