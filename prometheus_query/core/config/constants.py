"""
Wire Constants and Enumerations

Field names, tag values and sentinel tokens of the Prometheus HTTP v1 API
JSON format. The codec never spells a wire name inline; it always goes
through this module.
"""

from enum import Enum

# ============================================================================
# Sample value sentinel tokens
# ============================================================================

PROM_INFINITY = "Inf"
PROM_NEGATIVE_INFINITY = "-Inf"
PROM_NAN = "NaN"

SAMPLE_ARITY = 2


# ============================================================================
# Envelope
# ============================================================================


class ResponseStatus(str, Enum):
    """Value of the envelope ``status`` tag."""

    SUCCESS = "success"
    ERROR = "error"


FIELD_STATUS = "status"
FIELD_DATA = "data"
FIELD_WARNINGS = "warnings"
FIELD_ERROR_TYPE = "errorType"
FIELD_ERROR = "error"


# ============================================================================
# Expression results
# ============================================================================


class ResultType(str, Enum):
    """Value of ``resultType`` in an expression result."""

    SCALAR = "scalar"
    STRING = "string"
    VECTOR = "vector"
    MATRIX = "matrix"


FIELD_RESULT_TYPE = "resultType"
FIELD_RESULT = "result"
FIELD_METRIC = "metric"
FIELD_VALUE = "value"
FIELD_VALUES = "values"


# ============================================================================
# Targets / Alertmanagers
# ============================================================================

FIELD_ACTIVE_TARGETS = "activeTargets"
FIELD_DROPPED_TARGETS = "droppedTargets"
FIELD_DISCOVERED_LABELS = "discoveredLabels"
FIELD_LABELS = "labels"
FIELD_SCRAPE_URL = "scrapeUrl"
FIELD_LAST_ERROR = "lastError"
FIELD_LAST_SCRAPE = "lastScrape"
FIELD_HEALTH = "health"

FIELD_ACTIVE_ALERTMANAGERS = "activeAlertmanagers"
FIELD_DROPPED_ALERTMANAGERS = "droppedAlertmanagers"
FIELD_URL = "url"

# Keys a response uses to recognise a shape; a series label set or a flag
# map holding one of them would be read back as a different shape.
SERIES_RESERVED_LABELS = frozenset({FIELD_RESULT_TYPE, FIELD_RESULT})
FLAGS_RESERVED_NAMES = frozenset(
    {
        FIELD_RESULT_TYPE,
        FIELD_ACTIVE_TARGETS,
        FIELD_DROPPED_TARGETS,
        FIELD_ACTIVE_ALERTMANAGERS,
        FIELD_DROPPED_ALERTMANAGERS,
    }
)


class TargetHealth(str, Enum):
    """
    Scrape health of an active target.

    UP: Last scrape succeeded
    DOWN: Last scrape failed
    UNKNOWN: Not scraped yet, or a value this client does not know
    """

    UP = "up"
    DOWN = "down"
    UNKNOWN = "unknown"


class DataShape(str, Enum):
    """
    Shapes the ``data`` member of a successful envelope can take.

    Declared in dispatch precedence order.
    """

    EXPRESSION = "expression"
    SERIES = "series"
    LABELS_OR_VALUES = "labels_or_values"
    TARGETS = "targets"
    ALERT_MANAGERS = "alert_managers"
    FLAGS = "flags"


# ============================================================================
# HTTP API
# ============================================================================

API_PREFIX = "/api/v1"

# Statuses on which Prometheus still answers with a JSON envelope
ENVELOPE_ERROR_STATUSES = frozenset({400, 422, 503})
