"""HTTP Auth Adapter - pluggable authentication over an HTTP request.

The adapter binds an identity/credential pair into a configurable request,
sends it through an injected transport and normalises the outcome:

- Option merging from explicit options and an ``authentication.http`` config section
- Hooks to replace payload building and result construction
- Credential sources (in-memory, environment and .env files)
- Templated URLs with per-template default headers
- httpx transport with status-code errors and a retry layer

Example:
    ```python
    from http_auth_adapter import HttpAdapter, MappingConfig, StaticCredentials
    from http_auth_adapter.transport import HttpxTransport

    config = MappingConfig({"authentication": {"http": {"url": "https://auth.example.com/login"}}})
    adapter = HttpAdapter(HttpxTransport(), config=config, credentials=StaticCredentials("alice", "s3cr3t"))

    result = await adapter.authenticate()
    print(result.identity, result.payload)
    ```
"""

from http_auth_adapter.adapter import Adapter, HttpAdapter, HttpAdapterConfig
from http_auth_adapter.auth import EnvironmentCredentials, StaticCredentials
from http_auth_adapter.config import MappingConfig
from http_auth_adapter.errors import AuthAdapterError, AuthenticationFailedError, ConfigurationError
from http_auth_adapter.resolver import TemplateUrlResolver
from http_auth_adapter.result import Result, ResultCode

__version__ = "0.1.0"

__all__ = [
    "Adapter",
    "AuthAdapterError",
    "AuthenticationFailedError",
    "ConfigurationError",
    "EnvironmentCredentials",
    "HttpAdapter",
    "HttpAdapterConfig",
    "MappingConfig",
    "Result",
    "ResultCode",
    "StaticCredentials",
    "TemplateUrlResolver",
    "__version__",
]
