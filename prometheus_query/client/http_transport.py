"""
HTTP Transport for Prometheus
=============================

httpx-backed implementation of the Transport protocol.

LIFECYCLE
---------
The transport owns an ``httpx.AsyncClient`` and must be used as an async
context manager so pooled connections are closed:

```python
async with HttpxTransport() as transport:
    body = await transport.send(PromRequest(path="/api/v1/labels"))
```

STATUS HANDLING
---------------
Prometheus answers 400, 422 and 503 with a regular JSON error envelope, so
those bodies are handed to the codec like any 2xx body. Every other non-2xx
status raises TransportStatusError.

No retries are attempted; the caller decides whether to repeat a request.
"""

from __future__ import annotations

from collections import defaultdict

import httpx
from pydantic import BaseModel, Field, ValidationError, field_validator

from prometheus_query.client.transport import PromRequest
from prometheus_query.core.config.constants import ENVELOPE_ERROR_STATUSES
from prometheus_query.core.config.settings import get_settings
from prometheus_query.core.exceptions import (
    ConfigurationError,
    TransportConnectionError,
    TransportStatusError,
    TransportTimeoutError,
)
from prometheus_query.core.logging import get_logger

logger = get_logger(__name__)


class PrometheusConfig(BaseModel):
    """
    Configuration for the HTTP transport with validation.

    Defaults are taken from settings (PROMETHEUS_URL, PROMETHEUS_TIMEOUT,
    PROMETHEUS_MAX_CONNECTIONS).

    Example:
        config = PrometheusConfig(base_url="http://prometheus:9090", timeout=5.0)
    """

    model_config = {"frozen": True}  # Make config immutable

    base_url: str = Field(
        default_factory=lambda: get_settings().prometheus.PROMETHEUS_URL,
        description="Prometheus server URL",
    )

    timeout: float = Field(
        default_factory=lambda: get_settings().prometheus.PROMETHEUS_TIMEOUT,
        gt=0,
        le=300,
        description="HTTP request timeout in seconds",
    )

    max_connections: int = Field(
        default_factory=lambda: get_settings().prometheus.PROMETHEUS_MAX_CONNECTIONS,
        ge=1,
        le=100,
        description="Maximum HTTP connections in pool",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")


def _group_form(form: list[tuple[str, str]]) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = defaultdict(list)
    for key, value in form:
        grouped[key].append(value)
    return dict(grouped)


class HttpxTransport:
    """
    Asynchronous HTTP transport for the Prometheus v1 API.

    Attributes:
        config: Validated configuration object
    """

    def __init__(
        self,
        config: PrometheusConfig | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            config: Optional configuration; defaults come from settings.
            http_transport: Optional lower-level httpx transport
                            (e.g. ``httpx.MockTransport`` in tests).

        Raises:
            ConfigurationError: Settings yield an invalid configuration
        """
        if config is None:
            try:
                config = PrometheusConfig()
            except ValidationError as e:
                raise ConfigurationError.from_exception(
                    e, message="Invalid Prometheus connection settings"
                ) from e
        self.config = config
        self._http_transport = http_transport
        self._client: httpx.AsyncClient | None = None

        logger.debug(
            "Prometheus transport initialized",
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            max_connections=self.config.max_connections,
        )

    async def __aenter__(self) -> HttpxTransport:
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.timeout),
            limits=httpx.Limits(
                max_connections=self.config.max_connections,
                max_keepalive_connections=max(self.config.max_connections // 2, 1),
            ),
            transport=self._http_transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            logger.debug("HTTP client closed")
        self._client = None

    def _ensure_client_initialized(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError(
                "HttpxTransport not initialized. Use 'async with HttpxTransport() as transport:' "
                "to properly initialize and cleanup the HTTP client."
            )
        return self._client

    async def send(self, request: PromRequest) -> bytes:
        """
        Execute a request and return the response body.

        Raises:
            TransportConnectionError: Cannot connect to Prometheus
            TransportTimeoutError: Request exceeded the timeout
            TransportStatusError: Non-envelope HTTP status
            RuntimeError: Transport used outside ``async with``
        """
        client = self._ensure_client_initialized()
        url = f"{self.config.base_url}{request.path}"

        logger.debug("Sending Prometheus request", method=request.method, url=url)

        try:
            response = await client.request(
                request.method,
                url,
                params=request.params or None,
                data=_group_form(request.form) if request.form is not None else None,
            )

        except httpx.TimeoutException as e:
            logger.warning("Prometheus request timed out", url=url, timeout=self.config.timeout)
            raise TransportTimeoutError(
                f"Prometheus request timed out after {self.config.timeout}s",
                details={"url": url, "timeout": self.config.timeout},
            ) from e

        except httpx.TransportError as e:
            logger.warning("Cannot reach Prometheus", url=url, error=str(e))
            raise TransportConnectionError.from_exception(
                e,
                message=f"Cannot connect to Prometheus at {self.config.base_url}",
                url=url,
            ) from e

        if response.is_success or response.status_code in ENVELOPE_ERROR_STATUSES:
            return response.content

        logger.warning(
            "Prometheus returned unexpected HTTP status",
            url=url,
            status_code=response.status_code,
        )
        raise TransportStatusError(
            f"Prometheus returned HTTP {response.status_code}",
            details={
                "url": url,
                "status_code": response.status_code,
                "response_text": response.text[:500] if response.text else None,
            },
        )
