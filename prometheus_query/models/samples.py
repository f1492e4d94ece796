"""
Sample Models

Numeric and string samples, plus the label set that identifies a series.
"""

import math

from pydantic import BaseModel, Field


def _same_value(a: float, b: float) -> bool:
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    return a == b


class Sample(BaseModel):
    """
    A numeric sample: Unix epoch seconds and a float value.

    Two samples holding NaN compare equal, so decoded results containing
    ``NaN`` behave like any other value in assertions and set membership.
    """
    model_config = {"frozen": True}

    epoch: float = Field(..., allow_inf_nan=False, description="Seconds since the Unix epoch")
    value: float = Field(..., description="Sample value (may be inf/-inf/nan)")

    def __eq__(self, other):
        if not isinstance(other, Sample):
            return NotImplemented
        return self.epoch == other.epoch and _same_value(self.value, other.value)

    def __hash__(self):
        value = "NaN" if math.isnan(self.value) else self.value
        return hash((self.epoch, value))


class StringSample(BaseModel):
    """A string sample; the value is kept verbatim."""
    model_config = {"frozen": True}

    epoch: float = Field(..., allow_inf_nan=False)
    value: str


class Metric(BaseModel):
    """
    Label set of a time series.

    ``__name__`` carries the metric name by convention only; it is stored
    like any other label.
    """
    model_config = {"frozen": True}

    labels: dict[str, str] = Field(default_factory=dict)

    @property
    def name(self) -> str | None:
        return self.labels.get("__name__")

    def __getitem__(self, label: str) -> str:
        return self.labels[label]
