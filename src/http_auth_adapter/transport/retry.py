"""Retry layer for the httpx transport used by authentication requests.

Authentication endpoints are usually POST endpoints, so retries are
conservative:

| Condition | Methods retried |
|-----------|-----------------|
| 429 Too Many Requests | all (the server rejected the request before acting on it) |
| 502, 503, 504 | idempotent methods only |
| network errors | idempotent methods only |

``Retry-After`` is honoured on 429 responses in both delay-seconds and
HTTP-date form; otherwise delays grow exponentially from ``backoff_factor``
and are capped at ``max_backoff``.

Example:
    ```python
    import httpx

    from http_auth_adapter.transport import HttpxTransport
    from http_auth_adapter.transport.retry import RetryTransport

    transport = HttpxTransport(
        transport=RetryTransport(wrapped_transport=httpx.AsyncHTTPTransport(), max_retries=3),
    )
    ```
"""

import asyncio
import logging
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

import httpx

logger = logging.getLogger(__name__)


class RetryTransport(httpx.AsyncBaseTransport):
    """Wrap another async transport and retry throttled or failed requests.

    Args:
        wrapped_transport: The underlying transport to wrap
        max_retries: Maximum number of retry attempts (default: 3)
        backoff_factor: Multiplier for exponential backoff (default: 0.5)
        max_backoff: Maximum delay between attempts in seconds (default: 30)
        retry_status_codes: 5xx codes retried for idempotent methods
    """

    IDEMPOTENT_METHODS: frozenset[str] = frozenset(["HEAD", "GET", "PUT", "DELETE", "OPTIONS", "TRACE"])

    DEFAULT_RETRY_STATUS_CODES: frozenset[int] = frozenset([502, 503, 504])

    def __init__(
        self,
        *,
        wrapped_transport: httpx.AsyncBaseTransport,
        max_retries: int = 3,
        backoff_factor: float = 0.5,
        max_backoff: float = 30.0,
        retry_status_codes: frozenset[int] | None = None,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.max_backoff = max_backoff
        self.retry_status_codes = retry_status_codes or self.DEFAULT_RETRY_STATUS_CODES

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        retries = 0

        while True:
            try:
                response = await self._wrapped_transport.handle_async_request(request)
            except httpx.TransportError as e:
                if retries >= self.max_retries or request.method not in self.IDEMPOTENT_METHODS:
                    raise
                retries += 1
                delay = self._calculate_backoff_delay(retries)
                logger.warning(
                    f"Request {request.method} {request.url} failed with {e!r}, "
                    f"retrying in {delay}s (attempt {retries}/{self.max_retries})"
                )
                await asyncio.sleep(delay)
                continue

            delay = self._retry_delay(request, response, retries)
            if delay is None:
                return response

            retries += 1
            logger.warning(
                f"Request {request.method} {request.url} failed with {response.status_code}, "
                f"retrying in {delay}s (attempt {retries}/{self.max_retries})"
            )
            await response.aclose()
            await asyncio.sleep(delay)

    def _retry_delay(self, request: httpx.Request, response: httpx.Response, current_retries: int) -> float | None:
        """Return the delay before the next attempt, or None if the response is final."""
        if current_retries >= self.max_retries:
            return None

        if response.status_code == 429:
            delay = self._parse_retry_after(response)
            return delay if delay is not None else self._calculate_backoff_delay(current_retries + 1)

        if response.status_code in self.retry_status_codes and request.method in self.IDEMPOTENT_METHODS:
            return self._calculate_backoff_delay(current_retries + 1)

        return None

    def _parse_retry_after(self, response: httpx.Response) -> float | None:
        retry_after = response.headers.get("Retry-After")
        if not retry_after:
            return None

        try:
            delay = float(int(retry_after))
        except ValueError:
            try:
                retry_date = parsedate_to_datetime(retry_after)
            except (ValueError, TypeError):
                return None
            delay = (retry_date - datetime.now(UTC)).total_seconds()

        # Negative values (or clock skew) fall back to exponential backoff
        if delay < 0:
            return None
        return min(delay, self.max_backoff)

    def _calculate_backoff_delay(self, retry_number: int) -> float:
        """``backoff_factor * 2 ** (retry_number - 1)``, capped at ``max_backoff``."""
        return min(self.backoff_factor * (2 ** (retry_number - 1)), self.max_backoff)
