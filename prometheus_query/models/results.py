"""
Query Result Models

Typed counterparts of the Prometheus response envelope and every shape its
``data`` member can take.

Hierarchy:
----------
```
QueryResult = QuerySuccess | QueryError
    data: ResultData | None

ResultData = Expression | Series | LabelsOrValues | Targets | AlertManagers | Flags
Expression = ScalarResult | StringResult | InstantVector | RangeMatrix
```
"""

from typing import Union

from pydantic import BaseModel, Field, field_validator

from prometheus_query.core.config.constants import SERIES_RESERVED_LABELS
from prometheus_query.models.samples import Metric, Sample, StringSample
from prometheus_query.models.status import AlertManagers, Flags, Targets


class InstantResult(BaseModel):
    """One series of an instant vector with its single sample."""
    model_config = {"frozen": True}

    metric: Metric
    sample: Sample


class RangeResult(BaseModel):
    """One series of a range matrix with its samples in time order."""
    model_config = {"frozen": True}

    metric: Metric
    samples: list[Sample] = Field(default_factory=list)


class ScalarResult(BaseModel):
    model_config = {"frozen": True}

    sample: Sample


class StringResult(BaseModel):
    model_config = {"frozen": True}

    sample: StringSample


class InstantVector(BaseModel):
    model_config = {"frozen": True}

    results: list[InstantResult] = Field(default_factory=list)


class RangeMatrix(BaseModel):
    model_config = {"frozen": True}

    results: list[RangeResult] = Field(default_factory=list)


Expression = Union[ScalarResult, StringResult, InstantVector, RangeMatrix]


class Series(BaseModel):
    """
    Label sets returned by the series endpoint.

    Never empty: an empty ``data`` array always decodes as LabelsOrValues.
    """
    model_config = {"frozen": True}

    metrics: list[Metric] = Field(..., min_length=1)

    @field_validator("metrics")
    @classmethod
    def validate_label_names(cls, v: list[Metric]) -> list[Metric]:
        for metric in v:
            reserved = sorted(SERIES_RESERVED_LABELS & set(metric.labels))
            if reserved:
                raise ValueError(f"label '{reserved[0]}' is reserved in series results")
        return v


class LabelsOrValues(BaseModel):
    """Label names or the values of a single label."""
    model_config = {"frozen": True}

    values: list[str] = Field(default_factory=list)


ResultData = Union[
    ScalarResult,
    StringResult,
    InstantVector,
    RangeMatrix,
    Series,
    LabelsOrValues,
    Targets,
    AlertManagers,
    Flags,
]


class QuerySuccess(BaseModel):
    model_config = {"frozen": True}

    data: ResultData | None = None
    warnings: list[str] = Field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return True


class QueryError(BaseModel):
    """
    Error envelope. Prometheus may still attach partial ``data``.
    """
    model_config = {"frozen": True}

    error_type: str
    error_message: str
    data: ResultData | None = None
    warnings: list[str] = Field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.error_message


QueryResult = Union[QuerySuccess, QueryError]
