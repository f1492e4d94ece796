"""
Configuration Module

- **settings.py**: Pydantic-based configuration with environment variable loading
- **constants.py**: Wire field names, sentinel tokens and enums

Usage:
------
```python
from prometheus_query.core.config import get_settings
from prometheus_query.core.config.constants import ResultType

settings = get_settings()
base_url = settings.prometheus.PROMETHEUS_URL
```
"""

from prometheus_query.core.config.settings import (
    LoggingSettings,
    PrometheusSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "LoggingSettings",
    "PrometheusSettings",
    "Settings",
    "get_settings",
    "reload_settings",
]
