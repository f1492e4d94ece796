"""
Transport Interface

The codec only needs a complete response body. Anything able to turn a
PromRequest into bytes can back PromClient: the httpx transport in
http_transport.py, a cache, or a canned-response double in tests.
"""

from typing import Literal, Protocol, runtime_checkable

from pydantic import BaseModel, Field


class PromRequest(BaseModel):
    """
    A fully-formed Prometheus API request.

    ``params`` and ``form`` are ordered pairs because several endpoints
    repeat a key (``match[]``).
    """
    model_config = {"frozen": True}

    method: Literal["GET", "POST"] = "GET"
    path: str = Field(..., min_length=1, description="Path below the server base URL")
    params: list[tuple[str, str]] = Field(default_factory=list)
    form: list[tuple[str, str]] | None = Field(default=None, description="Form-encoded body")


@runtime_checkable
class Transport(Protocol):
    """
    Protocol every transport implements.

    USAGE IN TESTS:
    ---------------
    ```python
    class CannedTransport:
        async def send(self, request: PromRequest) -> bytes:
            return b'{"status":"success","data":[]}'

    client = PromClient(CannedTransport())
    ```
    """

    async def send(self, request: PromRequest) -> bytes:
        """Execute the request and return the raw response body."""
        ...
