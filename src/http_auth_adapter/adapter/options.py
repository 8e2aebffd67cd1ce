"""Configuration for the HTTP authentication adapter.

:class:`HttpAdapterConfig` collects everything the adapter needs to build its
request: the endpoint URL, HTTP method, static parameters, headers, the
names under which identity and credential are sent, the three hooks and a
passthrough dict of extra request options for the transport.

Options can be applied in bulk with :meth:`HttpAdapterConfig.set_options`,
which may be called any number of times. Each call applies the recognised
fields in a fixed order and later calls win field by field; unrecognised
keys are shallow-merged into the passthrough options.

Example:
    ```python
    config = HttpAdapterConfig()
    config.set_options({"url": "https://auth.example.com/login", "method": "GET", "timeout": 5})
    config.set_options({"paramNameIdentity": "email"})

    config.url                  # 'https://auth.example.com/login'
    config.param_name_identity  # 'email'
    config.request_options      # {'timeout': 5, 'method': 'GET', 'headers': None}
    ```

Keys may be spelled in snake_case, in the camelCase used by JSON
configuration files (``paramNameIdentity``, ``onSuccess``, ...) or in the
all-lowercase form that environment-derived configuration produces.
"""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from http_auth_adapter.adapter.hooks import BuildParamsHook, OnFailureHook, OnSuccessHook
from http_auth_adapter.errors.exceptions import ConfigurationError

if TYPE_CHECKING:
    from http_auth_adapter.resolver import UrlResolver

logger = logging.getLogger(__name__)

DEFAULT_METHOD = "POST"
DEFAULT_PARAM_NAME_IDENTITY = "username"
DEFAULT_PARAM_NAME_CREDENTIAL = "password"

OPTION_ALIASES: dict[str, str] = {
    "paramNameIdentity": "param_name_identity",
    "paramNameCredential": "param_name_credential",
    "onSuccess": "on_success",
    "onFailure": "on_failure",
    "buildParams": "build_params",
}
# Keys coming from case-insensitive sources such as environment variables
OPTION_ALIASES.update({alias.lower(): name for alias, name in list(OPTION_ALIASES.items())})


class HttpAdapterConfig:
    """Mutable configuration of an :class:`~http_auth_adapter.adapter.http.HttpAdapter`.

    Args:
        resolver: Optional URL resolver consulted for default headers when
            :meth:`set_options` is called without ``headers``.
    """

    def __init__(self, resolver: "UrlResolver | None" = None):
        self.resolver = resolver
        self.url: str | None = None
        self.method: str = DEFAULT_METHOD
        self.params: dict[str, Any] = {}
        self.headers: dict[str, str] | None = None
        self.param_name_identity: str = DEFAULT_PARAM_NAME_IDENTITY
        self.param_name_credential: str = DEFAULT_PARAM_NAME_CREDENTIAL
        self.extra: dict[str, Any] = {}
        self.on_success: OnSuccessHook | None = None
        self.on_failure: OnFailureHook | None = None
        self.build_params: BuildParamsHook | None = None

    @property
    def request_options(self) -> dict[str, Any]:
        """Request descriptor handed to the transport, without the payload."""
        return {**self.extra, "method": self.method, "headers": self.headers}

    def set_url(self, url: str | None) -> "HttpAdapterConfig":
        self.url = url
        return self

    def set_method(self, method: str) -> "HttpAdapterConfig":
        self.method = method
        return self

    def set_params(self, params: dict[str, Any]) -> "HttpAdapterConfig":
        self.params = params
        return self

    def set_headers(self, headers: dict[str, str] | None) -> "HttpAdapterConfig":
        self.headers = headers
        return self

    def set_request_options(self, options: Mapping[str, Any]) -> "HttpAdapterConfig":
        """Replace the request descriptor.

        ``method`` and ``headers`` go through :meth:`set_method` and
        :meth:`set_headers` so payload placement follows the method sent;
        every other key replaces the passthrough options.
        """
        extra = dict(options)
        method = extra.pop("method", None)
        if method is not None:
            self.set_method(method)
        if "headers" in extra:
            self.set_headers(extra.pop("headers"))
        self.extra = extra
        return self

    def set_param_name_identity(self, name: str) -> "HttpAdapterConfig":
        self.param_name_identity = name
        return self

    def set_param_name_credential(self, name: str) -> "HttpAdapterConfig":
        self.param_name_credential = name
        return self

    def set_on_success(self, hook: OnSuccessHook | None) -> "HttpAdapterConfig":
        self.on_success = _check_hook("on_success", hook)
        return self

    def set_on_failure(self, hook: OnFailureHook | None) -> "HttpAdapterConfig":
        self.on_failure = _check_hook("on_failure", hook)
        return self

    def set_build_params(self, hook: BuildParamsHook | None) -> "HttpAdapterConfig":
        self.build_params = _check_hook("build_params", hook)
        return self

    def set_options(self, options: Mapping[str, Any]) -> "HttpAdapterConfig":
        """Apply a bag of options on top of the current configuration.

        Recognised fields are applied in the order url, param_name_identity,
        param_name_credential, method, params, headers, on_success,
        on_failure, build_params. Fields that are missing or None keep their
        current value. Everything else is merged into the passthrough request
        options, overriding keys of the same name.

        ``options`` itself is left untouched.

        Raises:
            ConfigurationError: If a hook option is not callable.
        """
        remaining = {OPTION_ALIASES.get(key, key): value for key, value in options.items()}

        url = remaining.pop("url", None)
        if url is not None:
            self.set_url(url)

        name = remaining.pop("param_name_identity", None)
        if name is not None:
            self.set_param_name_identity(name)

        name = remaining.pop("param_name_credential", None)
        if name is not None:
            self.set_param_name_credential(name)

        method = remaining.pop("method", None)
        if method is not None:
            self.set_method(method)

        params = remaining.pop("params", None)
        if params is not None:
            self.set_params(params)

        headers = remaining.pop("headers", None)
        if headers is not None:
            self.set_headers(headers)
        elif self.resolver is not None and self.url is not None:
            default_headers = self.resolver.get_headers(self.url)
            if default_headers:
                logger.debug(f"Using resolver default headers for {self.url}")
                self.set_headers(default_headers)

        hook = remaining.pop("on_success", None)
        if hook is not None:
            self.set_on_success(hook)

        hook = remaining.pop("on_failure", None)
        if hook is not None:
            self.set_on_failure(hook)

        hook = remaining.pop("build_params", None)
        if hook is not None:
            self.set_build_params(hook)

        if remaining:
            self.set_request_options({**self.extra, **remaining})

        return self


def _check_hook(name: str, hook: Any) -> Any:
    if hook is not None and not callable(hook):
        raise ConfigurationError(f"Option '{name}' must be callable, got {type(hook).__name__}")
    return hook
