"""Exception hierarchy for the authentication adapter."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class AuthAdapterError(Exception):
    """Base exception for all adapter errors."""

    pass


class ConfigurationError(AuthAdapterError):
    """Raised when the adapter is asked to run with an unusable configuration.

    Missing URL, an empty method or a URL template placeholder with no
    matching parameter all end up here, before any request is sent.
    """

    pass


class AuthenticationFailedError(AuthAdapterError):
    """Raised by ``authenticate()`` when the attempt failed.

    Attributes:
        result: The failure outcome. A :class:`~http_auth_adapter.result.Result`
            with code FAILURE, or whatever the configured ``on_failure`` hook
            returned.
    """

    def __init__(self, result: Any, message: str = "Authentication failed"):
        super().__init__(message)
        self.result = result


class APIError(AuthAdapterError):
    """Base exception for non-success HTTP responses from the auth endpoint."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass
