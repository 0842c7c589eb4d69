"""Transport capability used by the search controller.

A transport takes a fully built ``httpx.Request`` and reports back exactly once
with either the response payload or the error that prevented it. Failures are
returned, not raised, so the controller can classify them.

Two implementations are provided:

* ``HttpxTransport`` sends through a shared ``httpx.AsyncClient`` using the
  client's own defaults. No retries and no timeout override.
* ``StaticTransport`` returns a fixed ``(data, error)`` pair without touching
  the network. It is meant for tests and offline runs.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Protocol

import httpx

from itunes_search.logging import logger


@dataclass(slots=True, frozen=True)
class TransportResponse:
    data: bytes | None = None
    response: httpx.Response | None = None
    error: Exception | None = None


class Transport(Protocol):
    async def fetch(self, request: httpx.Request) -> TransportResponse:
        """Send ``request`` and report the payload or the error."""
        ...


class HttpxTransport:
    """Live transport backed by ``httpx``."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._client = http_client

    async def fetch(self, request: httpx.Request) -> TransportResponse:
        try:
            response = await self._client.send(request)
        except (httpx.HTTPError, RuntimeError) as exc:
            # RuntimeError covers sending through a client that was already closed.
            logger.warning(
                "itunes_transport_error",
                url=str(request.url),
                error_type=exc.__class__.__name__,
                error=str(exc),
            )
            return TransportResponse(error=exc)
        # Status codes are not interpreted here; the body goes to the decoder.
        return TransportResponse(data=response.content, response=response)


class StaticTransport:
    """Deterministic transport returning a preset ``(data, error)`` pair.

    The request content is ignored. Delivery still yields to the event loop
    first so callers never observe a synchronous completion. Pass
    ``record_requests=True`` to keep the received requests for inspection.
    """

    def __init__(
        self,
        data: bytes | None = None,
        error: Exception | None = None,
        *,
        record_requests: bool = False,
    ) -> None:
        self.data = data
        self.error = error
        self.record_requests = record_requests
        self.requests: list[httpx.Request] = []

    async def fetch(self, request: httpx.Request) -> TransportResponse:
        if self.record_requests:
            self.requests.append(request)
        await asyncio.sleep(0)
        return TransportResponse(data=self.data, error=self.error)


__all__ = ["HttpxTransport", "StaticTransport", "Transport", "TransportResponse"]
