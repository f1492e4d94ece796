"""
Sample Codec

Translates the ``[epoch, "value"]`` pairs Prometheus uses for scalar and
string results and for every vector/matrix point.

The value element is a *string*. Besides ordinary float literals it can be
one of three sentinel tokens:

    "Inf"   -> +inf
    "-Inf"  -> -inf
    "NaN"   -> nan

Sentinels are resolved through an explicit table; everything else must
match a plain base-10 float literal before ``float()`` sees it, because
``float()`` would otherwise also accept spellings Prometheus never emits
("inf", "nan", "1_000", " 1 ").
"""

import math
import re
from typing import Any

from prometheus_query.codec.json_value import describe, is_number
from prometheus_query.core.config.constants import (
    PROM_INFINITY,
    PROM_NAN,
    PROM_NEGATIVE_INFINITY,
    SAMPLE_ARITY,
)
from prometheus_query.core.exceptions import (
    ArityMismatchError,
    EncodeError,
    InvalidSampleValueError,
    SchemaViolationError,
)
from prometheus_query.models.samples import Sample, StringSample

_SENTINELS: dict[str, float] = {
    PROM_INFINITY: math.inf,
    PROM_NEGATIVE_INFINITY: -math.inf,
    PROM_NAN: math.nan,
}

_FLOAT_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_sample_value(token: str) -> float:
    """
    Parse the string value element of a sample.

    Raises:
        InvalidSampleValueError: Token is neither a sentinel nor a float literal
    """
    sentinel = _SENTINELS.get(token)
    if sentinel is not None:
        return sentinel

    if _FLOAT_LITERAL.fullmatch(token):
        return float(token)

    raise InvalidSampleValueError(
        f"Invalid sample value '{token}'",
        details={"token": token},
    )


def format_sample_value(value: float) -> str:
    """Inverse of parse_sample_value."""
    if math.isnan(value):
        return PROM_NAN
    if math.isinf(value):
        return PROM_INFINITY if value > 0 else PROM_NEGATIVE_INFINITY

    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _unpack_pair(raw: Any, kind: str) -> tuple[float, str]:
    if not isinstance(raw, list):
        raise SchemaViolationError(
            f"Expected {kind} as a {SAMPLE_ARITY}-element array, got {describe(raw)}",
            details={"field": kind, "found": describe(raw)},
        )
    if len(raw) != SAMPLE_ARITY:
        raise ArityMismatchError(
            f"Expected {kind} with {SAMPLE_ARITY} elements, got {len(raw)}",
            details={"field": kind, "expected": SAMPLE_ARITY, "actual": len(raw)},
        )

    epoch, value = raw
    if not is_number(epoch):
        raise SchemaViolationError(
            f"Sample time must be a number, got {describe(epoch)}",
            details={"field": "sample time", "found": describe(epoch)},
        )
    if not isinstance(value, str):
        raise SchemaViolationError(
            f"Sample value must be a string, got {describe(value)}",
            details={"field": "sample value", "found": describe(value)},
        )
    try:
        epoch = float(epoch)
    except OverflowError as e:
        raise SchemaViolationError(
            "Sample time is out of range",
            details={"field": "sample time", "found": describe(epoch)},
        ) from e
    if not math.isfinite(epoch):
        raise SchemaViolationError(
            f"Sample time must be finite, got {epoch!r}",
            details={"field": "sample time", "found": repr(epoch)},
        )
    return epoch, value


def decode_sample(raw: Any) -> Sample:
    """Decode ``[epoch, "value"]`` into a Sample."""
    epoch, token = _unpack_pair(raw, "sample")
    return Sample(epoch=epoch, value=parse_sample_value(token))


def decode_string_sample(raw: Any) -> StringSample:
    """Decode ``[epoch, "value"]`` into a StringSample, keeping the value verbatim."""
    epoch, value = _unpack_pair(raw, "string sample")
    return StringSample(epoch=epoch, value=value)


def encode_sample(sample: Sample) -> list:
    if not isinstance(sample, Sample):
        raise EncodeError(
            f"Expected Sample, got {type(sample).__name__}",
            details={"found": type(sample).__name__},
        )
    return [sample.epoch, format_sample_value(sample.value)]


def encode_string_sample(sample: StringSample) -> list:
    if not isinstance(sample, StringSample):
        raise EncodeError(
            f"Expected StringSample, got {type(sample).__name__}",
            details={"found": type(sample).__name__},
        )
    return [sample.epoch, sample.value]
