"""Map HTTP responses from the auth endpoint to exceptions."""

import httpx

from http_auth_adapter.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)

_EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
}


def error_class_for_status(status_code: int) -> type[APIError]:
    """Return the exception class that represents ``status_code``."""
    if status_code in _EXCEPTION_MAP:
        return _EXCEPTION_MAP[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return APIError


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching :class:`APIError` subclass for a non-2xx response.

    Args:
        response: HTTP response object

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code
    exc_class = error_class_for_status(status_code)

    response_text = response.text[:200]
    message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        raise RateLimitError(message, retry_after=retry_after, status_code=status_code, response=response)

    raise exc_class(message, status_code=status_code, response=response)
