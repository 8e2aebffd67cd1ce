"""Configuration lookup used to seed adapter options.

Adapters read their lower-precedence options from the section
``authentication`` → ``http`` of a configuration store. Any object with a
``get(key, default=None)`` method works as a store; :class:`MappingConfig`
is the in-memory implementation and also understands dotted keys, so
``config.get("authentication.http")`` reaches the same section.

Example:
    ```python
    config = MappingConfig({"authentication": {"http": {"url": "https://auth.example.com"}}})
    config.get("authentication.http.url")
    ```
"""

import logging
import os
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

CONFIG_KEY_AUTH = "authentication"
CONFIG_KEY_ADAPTER = "http"

_MISSING = object()


@runtime_checkable
class ConfigStore(Protocol):
    """Key/value configuration lookup."""

    def get(self, key: str, default: Any = None) -> Any: ...


class MappingConfig:
    """Configuration store over a nested mapping.

    Args:
        data: Nested mapping of configuration values.
        separator: Separator for nested keys in :meth:`get`.
    """

    def __init__(self, data: Mapping[str, Any] | None = None, separator: str = "."):
        self._data: dict[str, Any] = dict(data or {})
        self.separator = separator

    def get(self, key: str, default: Any = None) -> Any:
        """Look up ``key``, descending into nested mappings on the separator."""
        if key in self._data:
            return self._data[key]

        node: Any = self._data
        for part in key.split(self.separator):
            if not isinstance(node, Mapping):
                return default
            node = node.get(part, _MISSING)
            if node is _MISSING:
                return default
        return node

    def set(self, key: str, value: Any) -> "MappingConfig":
        """Store ``value`` under a (possibly dotted) key, creating sections as needed."""
        parts = key.split(self.separator)
        node = self._data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value
        return self

    def as_dict(self) -> dict[str, Any]:
        return self._data

    @classmethod
    def from_env(
        cls,
        prefix: str = "AUTH_ADAPTER__",
        *,
        environ: Mapping[str, str] | None = None,
        nested_delimiter: str = "__",
    ) -> "MappingConfig":
        """Build a configuration from environment variables.

        ``AUTH_ADAPTER__AUTHENTICATION__HTTP__URL=https://...`` becomes
        ``{"authentication": {"http": {"url": "https://..."}}}``. Keys are
        lower-cased, so adapter options must be spelled in snake_case
        (``PARAM_NAME_IDENTITY``) or as the camelCase name run together
        (``PARAMNAMEIDENTITY``); values stay strings.
        """
        environ = os.environ if environ is None else environ
        config = cls()
        for name, value in environ.items():
            if not name.startswith(prefix):
                continue
            path = [part.lower() for part in name[len(prefix) :].split(nested_delimiter) if part]
            if not path:
                continue
            config.set(config.separator.join(path), value)
            logger.debug(f"Loaded configuration key {'.'.join(path)} from environment variable {name}")
        return config


def get_adapter_options(config: ConfigStore | None) -> dict[str, Any] | None:
    """Return the ``authentication.http`` section of ``config``, if any."""
    if config is None:
        return None

    section = config.get(CONFIG_KEY_AUTH)
    if not isinstance(section, Mapping):
        return None

    options = section.get(CONFIG_KEY_ADAPTER)
    if not isinstance(options, Mapping):
        return None
    return dict(options)
