"""
Models Module

Immutable pydantic models for every value the codec produces.
"""

from prometheus_query.core.config.constants import TargetHealth
from prometheus_query.models.results import (
    Expression,
    InstantResult,
    InstantVector,
    LabelsOrValues,
    QueryError,
    QueryResult,
    QuerySuccess,
    RangeMatrix,
    RangeResult,
    ResultData,
    ScalarResult,
    Series,
    StringResult,
)
from prometheus_query.models.samples import Metric, Sample, StringSample
from prometheus_query.models.status import (
    ActiveTarget,
    AlertManager,
    AlertManagers,
    DroppedTarget,
    Flags,
    Targets,
)

__all__ = [
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
    "TargetHealth",
    "Targets",
]
