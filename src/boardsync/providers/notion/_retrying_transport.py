"""httpx transport that retries Notion's transient failures and honours its rate limit."""

from __future__ import annotations

import asyncio
import logging
import random
import time

import httpx

_LOG = logging.getLogger(__name__)

RATE_LIMITED = 429
# 409 is Notion's conflict_error for concurrent writes to the same page.
TRANSIENT_STATUS = frozenset({409, 502, 503, 504})
DEFAULT_RETRY_AFTER = 1.0


def backoff_delay(attempt: int, *, cap: float = 4.0) -> float:
    """Exponential delay for the 0-based *attempt*, plus up to 250ms of jitter."""
    return min(cap, 2.0**attempt) + random.uniform(0.0, 0.25)


def retry_after_seconds(response: httpx.Response) -> float:
    raw = response.headers.get("Retry-After")
    if raw is None:
        return DEFAULT_RETRY_AFTER
    try:
        return max(0.0, float(raw))
    except ValueError:
        return DEFAULT_RETRY_AFTER


class RateLimitGate:
    """Holds every request of one integration until a 429 window has passed."""

    def __init__(self) -> None:
        self._open = asyncio.Event()
        self._open.set()
        self._reopen_at = 0.0

    @property
    def is_open(self) -> bool:
        return self._open.is_set()

    async def wait(self) -> None:
        await self._open.wait()

    async def close_for(self, seconds: float) -> None:
        reopen_at = time.monotonic() + seconds
        if reopen_at > self._reopen_at:
            self._reopen_at = reopen_at
            self._open.clear()
        await asyncio.sleep(max(0.0, self._reopen_at - time.monotonic()))
        # Whoever set the latest deadline reopens the gate.
        if reopen_at >= self._reopen_at:
            self._open.set()


class RetryingTransport(httpx.AsyncBaseTransport):
    """Wrap *transport* so transient Notion failures are retried.

    Notion allows about three requests per second per integration. A 429
    closes a shared :class:`RateLimitGate` for ``Retry-After`` seconds, so
    concurrent feature tasks back off together. 409 conflicts, 502/503/504
    and connection errors are retried with exponential backoff. After
    *max_retries* retries the last response is returned (or the last
    transport error raised) for the provider to map.
    """

    def __init__(self, *, transport: httpx.AsyncBaseTransport | None = None, max_retries: int = 3) -> None:
        self.inner = transport or httpx.AsyncHTTPTransport()
        self.max_retries = max_retries
        self.gate = RateLimitGate()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        attempt = 0
        while True:
            await self.gate.wait()
            try:
                response = await self.inner.handle_async_request(request)
            except httpx.TransportError as exc:
                if attempt >= self.max_retries:
                    raise
                await self._back_off(request, attempt, type(exc).__name__)
            else:
                status = response.status_code
                if attempt >= self.max_retries or (status != RATE_LIMITED and status not in TRANSIENT_STATUS):
                    return response
                await response.aclose()
                if status == RATE_LIMITED:
                    delay = retry_after_seconds(response)
                    _LOG.info("Notion rate limit hit on %s; pausing %.1fs", request.url.path, delay)
                    await self.gate.close_for(delay)
                else:
                    await self._back_off(request, attempt, f"HTTP {status}")
            attempt += 1

    async def aclose(self) -> None:
        await self.inner.aclose()

    @staticmethod
    async def _back_off(request: httpx.Request, attempt: int, reason: str) -> None:
        delay = backoff_delay(attempt)
        _LOG.warning(
            "Notion %s %s failed (%s); retry %d in %.1fs", request.method, request.url.path, reason, attempt + 1, delay
        )
        await asyncio.sleep(delay)
