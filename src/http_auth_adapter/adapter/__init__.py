"""Authentication adapters.

Example:
    ```python
    from http_auth_adapter.adapter import HttpAdapter
    from http_auth_adapter.transport import HttpxTransport

    adapter = HttpAdapter(HttpxTransport(), options={"url": "https://auth.example.com/login"})
    adapter.set_identity("alice").set_credential("s3cr3t")
    result = await adapter.authenticate()
    ```
"""

from http_auth_adapter.adapter.base import Adapter
from http_auth_adapter.adapter.hooks import build_query_params, decode_response, failure_result, success_result
from http_auth_adapter.adapter.http import HttpAdapter
from http_auth_adapter.adapter.options import HttpAdapterConfig

__all__ = [
    "Adapter",
    "HttpAdapter",
    "HttpAdapterConfig",
    "build_query_params",
    "decode_response",
    "failure_result",
    "success_result",
]
