"""Error types and HTTP status handling for the authentication adapter."""

from http_auth_adapter.errors.exceptions import (
    APIError,
    AuthAdapterError,
    AuthenticationFailedError,
    BadRequestError,
    ClientError,
    ConfigurationError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)
from http_auth_adapter.errors.handler import error_class_for_status, raise_for_status

__all__ = [
    "APIError",
    "AuthAdapterError",
    "AuthenticationFailedError",
    "BadRequestError",
    "ClientError",
    "ConfigurationError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "UnauthorizedError",
    "error_class_for_status",
    "raise_for_status",
]
