"""Credential sources for authentication adapters.

An adapter asks its credential source for the current identity and
credential on every authentication attempt. Two sources are provided:

- :class:`StaticCredentials` holds values set in code (the default).
- :class:`EnvironmentCredentials` resolves values lazily through
  :class:`CredentialResolver`.

Resolution order used by :class:`CredentialResolver` (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, loaded into the environment)
4. Default value

Example:
    ```python
    from http_auth_adapter.auth import EnvironmentCredentials

    credentials = EnvironmentCredentials(
        identity_env_var="AUTH_USERNAME",
        credential_env_var="AUTH_PASSWORD",
    )
    credentials.get_identity()
    ```

Credential values are never logged; only their source is.
"""

import logging
import os
from pathlib import Path
from threading import Lock
from typing import Protocol, runtime_checkable

from dotenv import load_dotenv

from http_auth_adapter.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)


@runtime_checkable
class CredentialSource(Protocol):
    """Supplies the identity and credential bound into each request."""

    def get_identity(self) -> str | None: ...

    def get_credential(self) -> str | None: ...


class StaticCredentials:
    """Identity and credential held in memory.

    Setters return ``self`` so a login form handler can chain them:

        ```python
        adapter.credentials.set_identity(form.username).set_credential(form.password)
        ```
    """

    def __init__(self, identity: str | None = None, credential: str | None = None):
        self._identity = identity
        self._credential = credential

    def get_identity(self) -> str | None:
        return self._identity

    def get_credential(self) -> str | None:
        return self._credential

    def set_identity(self, identity: str | None) -> "StaticCredentials":
        self._identity = identity
        return self

    def set_credential(self, credential: str | None) -> "StaticCredentials":
        self._credential = credential
        return self


class CredentialResolver:
    """Resolve secrets from explicit values, the environment, .env files or files on disk.

    The .env file is loaded once per resolver, guarded by a lock so that
    resolvers shared between threads do not load it twice.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories for one.
            load_dotenv: Whether to load a .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a value from the first source that has one.

        Args:
            value: Explicit value. Wins over every other source.
            env_var_name: Environment variable to read (includes .env values).
            default: Fallback when nothing else is set.
            required: Raise instead of returning None when unresolved.
            mask_in_logs: Log ``***`` in place of the value. Disable only for
                non-sensitive values such as usernames.

        Returns:
            The resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If ``required`` and no source had a value.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved credential from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a secret from a file.

        The path may be given directly or through ``env_var_name``; ``~`` and
        ``$VAR`` are expanded. Surrounding whitespace is stripped from the
        contents.

        Raises:
            CredentialFileError: If ``required`` and the file cannot be read.
        """
        path_to_use = None

        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, mask_in_logs=False)

        if path_to_use is None:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except PermissionError:
            error_msg = f"Permission denied reading credential file: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.warning(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content


class EnvironmentCredentials:
    """Credential source backed by environment variables and .env files.

    Values are resolved on every call so that rotated secrets are picked up
    without rebuilding the adapter. A ``credential_file`` takes precedence
    over ``credential_env_var`` when both are given.

    Args:
        identity_env_var: Variable holding the identity (e.g. username).
        credential_env_var: Variable holding the credential (e.g. password).
        credential_file: Path to a file holding the credential.
        default_identity: Identity used when the variable is unset.
        required: Raise :class:`CredentialNotFoundError` for unresolved values.
        resolver: Resolver to use; a new one (loading .env) by default.
    """

    def __init__(
        self,
        identity_env_var: str,
        credential_env_var: str | None = None,
        *,
        credential_file: str | Path | None = None,
        default_identity: str | None = None,
        required: bool = False,
        resolver: CredentialResolver | None = None,
    ):
        self.identity_env_var = identity_env_var
        self.credential_env_var = credential_env_var
        self.credential_file = credential_file
        self.default_identity = default_identity
        self.required = required
        self._resolver = resolver or CredentialResolver()

    def get_identity(self) -> str | None:
        return self._resolver.resolve(
            env_var_name=self.identity_env_var,
            default=self.default_identity,
            required=self.required,
            mask_in_logs=False,
        )

    def get_credential(self) -> str | None:
        if self.credential_file is not None:
            return self._resolver.resolve_from_file(file_path=self.credential_file, required=self.required)
        return self._resolver.resolve(env_var_name=self.credential_env_var, required=self.required)
