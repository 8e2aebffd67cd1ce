"""Transport contract and the httpx-backed implementation.

A transport performs exactly one request per call and either returns a
response or raises. Responses must expose ``json()`` and ``text``, which
``httpx.Response`` does.

The adapter describes each request with a plain dict:

- ``method``: HTTP verb
- ``headers``: mapping of headers, or None
- ``body``: request payload (POST)
- ``search``: query parameters (GET)
- any passthrough keys collected from the adapter options
"""

import logging
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

import httpx

from http_auth_adapter.errors.handler import raise_for_status

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Passthrough request options understood by httpx.AsyncClient.request
FORWARDED_OPTIONS = ("timeout", "follow_redirects", "extensions")


@runtime_checkable
class Transport(Protocol):
    """Sends one request and returns its response, raising on failure."""

    async def request(self, url: str, options: Mapping[str, Any]) -> Any: ...


class HttpxTransport:
    """Send adapter requests with ``httpx.AsyncClient``.

    Args:
        client: Client to send requests with. Not closed by this transport.
            When omitted, a short-lived client is created per request.
        transport: httpx transport for the per-request clients (for example
            a :class:`~http_auth_adapter.transport.retry.RetryTransport` or
            ``httpx.MockTransport`` in tests). Ignored when ``client`` is given.
        raise_for_status: Raise an :class:`~http_auth_adapter.errors.APIError`
            subclass for non-2xx responses (default: True).
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        raise_for_status: bool = True,
    ):
        self._client = client
        self._transport = transport
        self.raise_for_status = raise_for_status

    async def request(self, url: str, options: Mapping[str, Any]) -> httpx.Response:
        method, kwargs = self.build_request_kwargs(options)
        logger.debug(f"Sending {method} {url}")

        if self._client is not None:
            response = await self._client.request(method, url, **kwargs)
        else:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.request(method, url, **kwargs)

        if self.raise_for_status:
            raise_for_status(response)
        return response

    def build_request_kwargs(self, options: Mapping[str, Any]) -> tuple[str, dict[str, Any]]:
        """Translate an adapter request descriptor into ``httpx`` request arguments."""
        remaining = dict(options)
        method = str(remaining.pop("method", None) or "GET").upper()
        headers = httpx.Headers(remaining.pop("headers", None) or {})
        body = remaining.pop("body", None)
        search = remaining.pop("search", None)

        kwargs: dict[str, Any] = {}

        if search is not None:
            kwargs["params"] = search

        if body is not None:
            if isinstance(body, httpx.QueryParams):
                kwargs["content"] = str(body)
                if "content-type" not in headers:
                    headers["Content-Type"] = FORM_CONTENT_TYPE
            elif isinstance(body, (Mapping, list)):
                kwargs["json"] = body
            elif isinstance(body, bytes):
                kwargs["content"] = body
            else:
                kwargs["content"] = str(body)

        for key in FORWARDED_OPTIONS:
            if key in remaining:
                kwargs[key] = remaining.pop(key)

        if remaining:
            logger.debug(f"Ignoring request options not supported by httpx: {sorted(remaining)}")

        kwargs["headers"] = headers
        return method, kwargs
