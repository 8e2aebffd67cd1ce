"""URL resolution for adapter endpoints.

A resolver turns the configured URL template plus the bound request
parameters into the concrete request URL, and may supply default headers
for a template. :class:`TemplateUrlResolver` understands ``{name}`` and
``:name`` placeholders.

Example:
    ```python
    resolver = TemplateUrlResolver(base_url="https://auth.example.com")
    resolver.register_headers("/tenants/{tenant}/login", {"Accept": "application/json"})
    resolver.url("/tenants/{tenant}/login", {"tenant": "acme"})
    # 'https://auth.example.com/tenants/acme/login'
    ```
"""

import re
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable
from urllib.parse import quote

import httpx

from http_auth_adapter.errors.exceptions import ConfigurationError

# ``{name}`` or ``:name``; the colon form must follow a slash so that
# ``https://`` and ``host:8080`` are left alone.
_PLACEHOLDER = re.compile(r"\{(?P<brace>[A-Za-z_][A-Za-z0-9_]*)\}|(?<=/):(?P<colon>[A-Za-z_][A-Za-z0-9_]*)")


@runtime_checkable
class UrlResolver(Protocol):
    """Resolves URL templates and supplies per-template default headers."""

    def get_headers(self, url_template: str) -> dict[str, str] | None: ...

    def url(self, url_template: str, params: Mapping[str, Any]) -> str: ...


class TemplateUrlResolver:
    """Placeholder-substituting resolver with optional base URL.

    Args:
        base_url: Prefix for relative templates. Absolute templates are used as-is.
        headers: Default headers per URL template.
    """

    def __init__(self, base_url: str | None = None, headers: Mapping[str, Mapping[str, str]] | None = None):
        self.base_url = httpx.URL(base_url) if base_url else None
        self._headers: dict[str, dict[str, str]] = {
            template: dict(values) for template, values in (headers or {}).items()
        }

    def register_headers(self, url_template: str, headers: Mapping[str, str]) -> "TemplateUrlResolver":
        self._headers[url_template] = dict(headers)
        return self

    def get_headers(self, url_template: str) -> dict[str, str] | None:
        headers = self._headers.get(url_template)
        return dict(headers) if headers else None

    def url(self, url_template: str, params: Mapping[str, Any]) -> str:
        """Substitute placeholders from ``params`` and join onto ``base_url``.

        Raises:
            ConfigurationError: If ``url_template`` is empty or a placeholder
                has no value in ``params``.
        """
        if not url_template:
            raise ConfigurationError("Cannot resolve an empty URL template")

        def substitute(match: re.Match) -> str:
            name = match.group("brace") or match.group("colon")
            if name not in params or params[name] is None:
                raise ConfigurationError(f"No value for URL placeholder '{name}' in {url_template!r}")
            return quote(str(params[name]), safe="")

        resolved = _PLACEHOLDER.sub(substitute, url_template)

        if self.base_url is not None and not httpx.URL(resolved).is_absolute_url:
            return str(self.base_url.join(resolved))
        return resolved
