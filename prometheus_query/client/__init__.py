"""
Client Module

Prometheus HTTP v1 API client built on the codec.

- **transport.py**: PromRequest and the Transport protocol
- **http_transport.py**: httpx-backed transport and its configuration
- **params.py**: Timestamp/duration parameter formatting
- **prom_client.py**: Endpoint methods, ensure_success, open_prom_client
"""

from prometheus_query.client.http_transport import HttpxTransport, PrometheusConfig
from prometheus_query.client.prom_client import PromClient, ensure_success, open_prom_client
from prometheus_query.client.transport import PromRequest, Transport

__all__ = [
    "HttpxTransport",
    "PromClient",
    "PromRequest",
    "PrometheusConfig",
    "Transport",
    "ensure_success",
    "open_prom_client",
]
