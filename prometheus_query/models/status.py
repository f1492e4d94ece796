"""
Status Models

Scrape targets, Alertmanager discovery and runtime flags.
"""

from pydantic import AnyUrl, AwareDatetime, BaseModel, Field, field_validator

from prometheus_query.core.config.constants import FLAGS_RESERVED_NAMES, TargetHealth
from prometheus_query.models.samples import Metric


class ActiveTarget(BaseModel):
    """A target currently being scraped."""
    model_config = {"frozen": True}

    discovered_labels: Metric
    labels: Metric
    scrape_url: AnyUrl
    last_error: str | None = Field(default=None, description="None when the last scrape succeeded")
    last_scrape: AwareDatetime
    health: TargetHealth = TargetHealth.UNKNOWN

    @field_validator("last_error")
    @classmethod
    def empty_error_is_none(cls, v: str | None) -> str | None:
        """An empty error string means the last scrape succeeded."""
        return v or None


class DroppedTarget(BaseModel):
    """A discovered target removed by relabelling."""
    model_config = {"frozen": True}

    discovered_labels: Metric


class Targets(BaseModel):
    model_config = {"frozen": True}

    active: list[ActiveTarget] = Field(default_factory=list)
    dropped: list[DroppedTarget] = Field(default_factory=list)


class AlertManager(BaseModel):
    model_config = {"frozen": True}

    url: AnyUrl


class AlertManagers(BaseModel):
    model_config = {"frozen": True}

    active: list[AlertManager] = Field(default_factory=list)
    dropped: list[AlertManager] = Field(default_factory=list)


class Flags(BaseModel):
    """Runtime flags; values are always the raw strings Prometheus reports."""
    model_config = {"frozen": True}

    flags: dict[str, str] = Field(default_factory=dict)

    @field_validator("flags")
    @classmethod
    def validate_flag_names(cls, v: dict[str, str]) -> dict[str, str]:
        reserved = sorted(FLAGS_RESERVED_NAMES & set(v))
        if reserved:
            raise ValueError(f"flag name '{reserved[0]}' is reserved for another result shape")
        return v
