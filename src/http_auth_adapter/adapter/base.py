"""Abstract base class for authentication adapters."""

from abc import ABC, abstractmethod

from http_auth_adapter.auth.credentials import CredentialSource, StaticCredentials
from http_auth_adapter.result import Result


class Adapter(ABC):
    """Base class for adapters that authenticate an identity/credential pair.

    The identity and credential come from a :class:`CredentialSource`. When
    none is given an empty :class:`StaticCredentials` is used, which callers
    fill through :meth:`set_identity` and :meth:`set_credential`.
    """

    def __init__(self, credentials: CredentialSource | None = None):
        self.credentials: CredentialSource = credentials if credentials is not None else StaticCredentials()

    def get_identity(self) -> str | None:
        return self.credentials.get_identity()

    def get_credential(self) -> str | None:
        return self.credentials.get_credential()

    def set_credentials(self, credentials: CredentialSource) -> "Adapter":
        self.credentials = credentials
        return self

    def set_identity(self, identity: str | None) -> "Adapter":
        """Set the identity on a :class:`StaticCredentials` source.

        Raises:
            TypeError: If the current credential source is read-only.
        """
        if not isinstance(self.credentials, StaticCredentials):
            raise TypeError(f"{type(self.credentials).__name__} does not support setting the identity")
        self.credentials.set_identity(identity)
        return self

    def set_credential(self, credential: str | None) -> "Adapter":
        """Set the credential on a :class:`StaticCredentials` source.

        Raises:
            TypeError: If the current credential source is read-only.
        """
        if not isinstance(self.credentials, StaticCredentials):
            raise TypeError(f"{type(self.credentials).__name__} does not support setting the credential")
        self.credentials.set_credential(credential)
        return self

    @abstractmethod
    async def authenticate(self) -> Result:
        """Authenticate the current identity/credential pair.

        Returns:
            A SUCCESS :class:`Result` (or what a success hook produced).

        Raises:
            AuthenticationFailedError: Carrying the failure outcome.
        """
        ...
