"""
Prometheus Query Client
=======================

Builds requests for the Prometheus HTTP v1 API endpoints whose responses
have a documented result shape, sends them through a Transport and decodes
the body into a QueryResult.

USAGE PATTERNS
--------------
```python
async with open_prom_client() as client:
    result = await client.instant_query("up")
    vector = ensure_success(result).data
    for series in vector.results:
        print(series.metric.name, series.sample.value)
```

Error envelopes (bad PromQL, query timeout) are NOT raised: they come back
as QueryError values, which may still carry partial data and warnings.
Use ensure_success() where an error envelope should become an exception.
"""

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from urllib.parse import quote

from prometheus_query.client.http_transport import HttpxTransport, PrometheusConfig
from prometheus_query.client.params import Duration, Timestamp, format_duration, format_timestamp
from prometheus_query.client.transport import PromRequest, Transport
from prometheus_query.codec.envelope_codec import decode_query_result
from prometheus_query.core.config.constants import API_PREFIX
from prometheus_query.core.exceptions import DecodeError, QueryFailedError
from prometheus_query.core.logging import get_logger
from prometheus_query.models import QueryError, QueryResult, QuerySuccess

logger = get_logger(__name__)


class PromClient:
    """
    Client for the Prometheus HTTP v1 API.

    Args:
        transport: Anything implementing the Transport protocol
        use_post: Send query-bearing requests as form-encoded POSTs, which
                  avoids URL length limits for long PromQL expressions
    """

    def __init__(self, transport: Transport, use_post: bool = False):
        self.transport = transport
        self.use_post = use_post

    def _build(self, path: str, params: list[tuple[str, str]], allow_post: bool = True) -> PromRequest:
        if self.use_post and allow_post:
            return PromRequest(method="POST", path=path, form=params)
        return PromRequest(method="GET", path=path, params=params)

    async def _execute(self, request: PromRequest) -> QueryResult:
        body = await self.transport.send(request)

        try:
            result = decode_query_result(body)
        except DecodeError as e:
            logger.warning(
                "Failed to decode Prometheus response",
                path=request.path,
                error=e.to_dict(),
            )
            raise

        if isinstance(result, QueryError):
            logger.info(
                "Prometheus returned an error envelope",
                path=request.path,
                error_type=result.error_type,
                error=result.error_message,
            )
        elif result.warnings:
            logger.info("Prometheus returned warnings", path=request.path, warnings=result.warnings)

        return result

    async def instant_query(
        self,
        query: str,
        at: Timestamp | None = None,
        timeout: Duration | None = None,
    ) -> QueryResult:
        """
        Evaluate an expression at a single instant (``/api/v1/query``).

        Args:
            query: PromQL expression
            at: Evaluation time; server time when omitted
            timeout: Evaluation timeout
        """
        params = [("query", query)]
        if at is not None:
            params.append(("time", format_timestamp(at)))
        if timeout is not None:
            params.append(("timeout", format_duration(timeout)))
        return await self._execute(self._build(f"{API_PREFIX}/query", params))

    async def range_query(
        self,
        query: str,
        start: Timestamp,
        end: Timestamp,
        step: Duration,
        timeout: Duration | None = None,
    ) -> QueryResult:
        """Evaluate an expression over a range (``/api/v1/query_range``)."""
        params = [
            ("query", query),
            ("start", format_timestamp(start)),
            ("end", format_timestamp(end)),
            ("step", format_duration(step)),
        ]
        if timeout is not None:
            params.append(("timeout", format_duration(timeout)))
        return await self._execute(self._build(f"{API_PREFIX}/query_range", params))

    async def series(
        self,
        matchers: Sequence[str],
        start: Timestamp | None = None,
        end: Timestamp | None = None,
    ) -> QueryResult:
        """Find series matching label selectors (``/api/v1/series``)."""
        if isinstance(matchers, str):
            matchers = [matchers]
        if not matchers:
            raise ValueError("series() needs at least one matcher")

        params = [("match[]", m) for m in matchers]
        if start is not None:
            params.append(("start", format_timestamp(start)))
        if end is not None:
            params.append(("end", format_timestamp(end)))
        return await self._execute(self._build(f"{API_PREFIX}/series", params))

    async def label_names(self) -> QueryResult:
        return await self._execute(self._build(f"{API_PREFIX}/labels", []))

    async def label_values(self, label: str) -> QueryResult:
        path = f"{API_PREFIX}/label/{quote(label, safe='')}/values"
        return await self._execute(self._build(path, [], allow_post=False))

    async def targets(self) -> QueryResult:
        return await self._execute(self._build(f"{API_PREFIX}/targets", [], allow_post=False))

    async def alertmanagers(self) -> QueryResult:
        return await self._execute(self._build(f"{API_PREFIX}/alertmanagers", [], allow_post=False))

    async def flags(self) -> QueryResult:
        return await self._execute(self._build(f"{API_PREFIX}/status/flags", [], allow_post=False))


def ensure_success(result: QueryResult) -> QuerySuccess:
    """
    Return the result if it is a success, otherwise raise.

    Raises:
        QueryFailedError: Result is an error envelope
    """
    if isinstance(result, QueryError):
        raise QueryFailedError(
            result.error_message,
            error_type=result.error_type,
            warnings=result.warnings,
        )
    return result


@asynccontextmanager
async def open_prom_client(
    config: PrometheusConfig | None = None,
    use_post: bool = False,
) -> AsyncIterator[PromClient]:
    """
    Open a PromClient over a fresh HttpxTransport and close it afterwards.
    """
    async with HttpxTransport(config) as transport:
        yield PromClient(transport, use_post=use_post)
