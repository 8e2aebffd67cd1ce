"""Identity and credential sources for authentication adapters.

Example:
    ```python
    from http_auth_adapter.auth import StaticCredentials

    credentials = StaticCredentials().set_identity("alice").set_credential("s3cr3t")
    ```
"""

from http_auth_adapter.auth.credentials import (
    CredentialResolver,
    CredentialSource,
    EnvironmentCredentials,
    StaticCredentials,
)
from http_auth_adapter.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "CredentialSource",
    "EnvironmentCredentials",
    "StaticCredentials",
]
