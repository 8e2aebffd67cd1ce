"""Authentication result value returned by adapters."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ResultCode(Enum):
    """Outcome of a single authentication attempt."""

    FAILURE = 0
    SUCCESS = 1


@dataclass(frozen=True)
class Result:
    """Uniform outcome of an authentication attempt.

    Attributes:
        code: Whether the attempt succeeded.
        identity: The identity that was authenticated, or None on failure.
        payload: Decoded response body on success, the transport error on failure.
    """

    code: ResultCode
    identity: str | None = None
    payload: Any = None

    @property
    def is_valid(self) -> bool:
        return self.code is ResultCode.SUCCESS
