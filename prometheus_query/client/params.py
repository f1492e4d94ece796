"""
Query parameter formatting for the Prometheus HTTP API.

Prometheus accepts timestamps as RFC 3339 strings or Unix seconds, and
durations as float seconds or duration strings.
"""

from datetime import datetime, timedelta

from prometheus_query.codec.sample_codec import format_sample_value

Timestamp = datetime | float | int
Duration = timedelta | float | int


def _format_number(value: float | int, what: str) -> str:
    value = float(value)
    if value != value or value in (float("inf"), float("-inf")):
        raise ValueError(f"{what} must be finite, got {value!r}")
    return format_sample_value(value)


def format_timestamp(value: Timestamp) -> str:
    """
    Render a timestamp parameter.

    >>> format_timestamp(1435781451.781)
    '1435781451.781'
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise ValueError("datetime parameters must be timezone-aware")
        return value.isoformat()
    return _format_number(value, "timestamp")


def format_duration(value: Duration) -> str:
    """
    Render a duration parameter (``step``, ``timeout``) as seconds.

    >>> format_duration(timedelta(minutes=1))
    '60'
    """
    if isinstance(value, timedelta):
        seconds = value.total_seconds()
    else:
        seconds = float(value)
    if seconds <= 0:
        raise ValueError(f"duration must be positive, got {value!r}")
    return _format_number(seconds, "duration")
