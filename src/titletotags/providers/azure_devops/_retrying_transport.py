"""httpx async transport that follows Azure DevOps throttling signals.

Azure DevOps rate limits in two ways. A blocked request is answered with 429
(or 503 when the service is overloaded) and a ``Retry-After`` header. A request
that is merely *delayed* still succeeds but carries ``Retry-After`` as well, and
the client is expected to hold off before its next call.
"""

from __future__ import annotations

import asyncio
import logging
import random
import time

import httpx

_LOG = logging.getLogger(__name__)

_THROTTLED_STATUS_CODES = frozenset({429, 503})
_TRANSIENT_STATUS_CODES = frozenset({502, 504})


class RetryingTransport(httpx.AsyncBaseTransport):
    """Wraps an httpx async transport with throttle-aware retries.

    Every ``Retry-After`` seen, on any status, moves a shared resume time
    forward; later requests through this transport wait for it. Throttled and
    transient responses and transport errors are retried up to *max_retries*
    times, with exponential backoff when the server gave no ``Retry-After``.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int = 3,
    ) -> None:
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._max_retries = max_retries
        self._resume_at = 0.0

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        attempt = 0
        while True:
            await self._wait_for_window()

            try:
                response = await self._transport.handle_async_request(request)
            except httpx.TransportError:
                if attempt >= self._max_retries:
                    raise
                await self._sleep_backoff(attempt)
                attempt += 1
                continue

            retry_after = self._parse_retry_after(response)
            if retry_after is not None:
                self._defer(retry_after, response)

            retryable = response.status_code in _THROTTLED_STATUS_CODES | _TRANSIENT_STATUS_CODES
            if not retryable or attempt >= self._max_retries:
                return response

            if retry_after is None:
                await self._sleep_backoff(attempt)
            attempt += 1

    async def aclose(self) -> None:
        await self._transport.aclose()

    def _defer(self, seconds: float, response: httpx.Response) -> None:
        resume_at = time.monotonic() + seconds
        if resume_at <= self._resume_at:
            return
        self._resume_at = resume_at
        resource = response.headers.get("X-RateLimit-Resource", "unknown resource")
        _LOG.warning(
            "Azure DevOps asked to delay requests %.1fs (HTTP %d, %s)", seconds, response.status_code, resource
        )

    async def _wait_for_window(self) -> None:
        delay = self._resume_at - time.monotonic()
        if delay > 0:
            await asyncio.sleep(delay)

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> float | None:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return None
        try:
            return max(0.0, float(raw))
        except ValueError:
            return None

    @staticmethod
    async def _sleep_backoff(attempt: int) -> None:
        seconds = min(4.0, float(2**attempt)) + random.uniform(0.0, 0.25)
        _LOG.warning("Retrying Azure DevOps request (attempt %d)", attempt + 1)
        await asyncio.sleep(seconds)
