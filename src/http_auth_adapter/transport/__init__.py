"""Transports that carry authentication requests.

Modules:
    base: Transport protocol and the httpx-backed transport
    retry: Retry layer for throttled or failing endpoints

Example:
    ```python
    import httpx

    from http_auth_adapter.transport import HttpxTransport, RetryTransport

    transport = HttpxTransport(
        transport=RetryTransport(wrapped_transport=httpx.AsyncHTTPTransport(), max_retries=3),
    )
    ```
"""

from http_auth_adapter.transport.base import HttpxTransport, Transport
from http_auth_adapter.transport.retry import RetryTransport

__all__ = ["HttpxTransport", "RetryTransport", "Transport"]
