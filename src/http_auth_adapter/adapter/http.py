"""Adapter that authenticates by sending the credentials in an HTTP request.

Each call to :meth:`HttpAdapter.authenticate` performs one request:

1. the identity and credential are written into the configured params
   (under ``param_name_identity`` / ``param_name_credential``);
2. the URL template is resolved against those params when a resolver is set;
3. the params are turned into a payload by the ``build_params`` hook, or
   into ordered query-string pairs by default;
4. the payload becomes the body of a POST or the query of a GET (other
   methods carry no payload);
5. the transport sends the request and its response or error is turned into
   a :class:`~http_auth_adapter.result.Result`, unless an ``on_success`` /
   ``on_failure`` hook takes over.

Failures are raised as :class:`~http_auth_adapter.errors.AuthenticationFailedError`
carrying the failure outcome in ``.result``.

Example:
    ```python
    adapter = HttpAdapter(
        HttpxTransport(),
        options={"url": "https://auth.example.com/login"},
        credentials=StaticCredentials("alice", "s3cr3t"),
    )
    try:
        result = await adapter.authenticate()
    except AuthenticationFailedError as e:
        result = e.result
    ```

Note:
    Concurrent calls on one adapter share ``config.params``. Payloads are
    built before the first await, so each request carries the credentials
    bound for it, but the shared mapping holds whatever was bound last.
"""

import logging
from typing import Any

from http_auth_adapter.adapter.base import Adapter
from http_auth_adapter.adapter.hooks import build_query_params, failure_result, success_result
from http_auth_adapter.adapter.options import HttpAdapterConfig
from http_auth_adapter.auth.credentials import CredentialSource
from http_auth_adapter.config import ConfigStore, get_adapter_options
from http_auth_adapter.errors.exceptions import AuthenticationFailedError, ConfigurationError
from http_auth_adapter.resolver import UrlResolver
from http_auth_adapter.result import Result
from http_auth_adapter.transport.base import Transport

logger = logging.getLogger(__name__)


class HttpAdapter(Adapter):
    """Authenticate an identity/credential pair against an HTTP endpoint.

    Args:
        transport: Sends the request. See :class:`~http_auth_adapter.transport.Transport`.
        resolver: Optional URL resolver for templated URLs and default headers.
        config: Optional configuration store. Its ``authentication`` → ``http``
            section is applied after ``options`` and overrides them field by field.
        options: Explicit adapter options, see :meth:`HttpAdapterConfig.set_options`.
        credentials: Source of identity and credential.
    """

    def __init__(
        self,
        transport: Transport,
        resolver: UrlResolver | None = None,
        config: ConfigStore | None = None,
        options: dict[str, Any] | None = None,
        credentials: CredentialSource | None = None,
    ):
        super().__init__(credentials)
        self.transport = transport
        self.resolver = resolver
        self.config = HttpAdapterConfig(resolver=resolver)

        if options:
            self.config.set_options(options)

        auth_options = get_adapter_options(config)
        if auth_options:
            self.config.set_options(auth_options)

    def set_options(self, options: dict[str, Any]) -> "HttpAdapter":
        self.config.set_options(options)
        return self

    async def authenticate(self) -> Result:
        """Send one authentication request and return its result.

        Returns:
            A SUCCESS :class:`Result`, or the value returned by ``on_success``.

        Raises:
            ConfigurationError: If no URL is configured or the method is empty.
            AuthenticationFailedError: If the transport failed. ``.result``
                holds a FAILURE :class:`Result` or the value returned by
                ``on_failure``.
        """
        config = self.config
        if not config.url:
            raise ConfigurationError("No URL configured for the HTTP adapter; set the 'url' option")
        if not isinstance(config.method, str) or not config.method.strip():
            raise ConfigurationError(f"Invalid HTTP method for the HTTP adapter: {config.method!r}")

        identity = self.get_identity()
        params = self.bind_params(identity, self.get_credential())

        url = self.resolver.url(config.url, params) if self.resolver is not None else config.url

        build = config.build_params or self.build_params
        payload = build(params)

        options = config.request_options
        method = config.method.upper()
        if method == "POST":
            options["body"] = payload
        elif method == "GET":
            options["search"] = payload

        logger.debug(
            f"Authenticating via {method} {url} "
            f"(identity param '{config.param_name_identity}', credential param '{config.param_name_credential}')"
        )

        try:
            response = await self.transport.request(url, options)
        except Exception as error:
            logger.warning(f"Authentication request {method} {url} failed: {error!r}")
            if config.on_failure is not None:
                outcome = config.on_failure(error)
            else:
                outcome = self.create_result_failure(error)
            raise AuthenticationFailedError(outcome) from error

        logger.info(f"Authentication request {method} {url} succeeded")
        if config.on_success is not None:
            return config.on_success(response)
        return self.create_result_success(response, identity)

    def bind_params(self, identity: str | None, credential: str | None) -> dict[str, Any]:
        """Write ``identity`` and ``credential`` into ``config.params`` and return it."""
        params = self.config.params
        params[self.config.param_name_identity] = identity
        params[self.config.param_name_credential] = credential
        return params

    def build_params(self, params: dict[str, Any]) -> Any:
        return build_query_params(params)

    def create_result_success(self, response: Any, identity: str | None = None) -> Result:
        if identity is None:
            identity = self.get_identity()
        return success_result(response, identity)

    def create_result_failure(self, error: Exception) -> Result:
        return failure_result(error)
