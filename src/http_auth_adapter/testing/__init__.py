"""Testing utilities for code built on the authentication adapter.

Example:
    ```python
    from http_auth_adapter.testing import RecordingTransport, json_response


    async def test_login_succeeds():
        transport = RecordingTransport(json_response({"token": "abc"}))
        adapter = HttpAdapter(transport, options={"url": "https://auth.example.com/login"})
        result = await adapter.authenticate()
        assert transport.calls[0].options["method"] == "POST"
    ```
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from http_auth_adapter.auth.credentials import StaticCredentials


@dataclass
class RecordedRequest:
    """A request seen by :class:`RecordingTransport`."""

    url: str
    options: dict[str, Any]


class RecordingTransport:
    """Transport stub that records requests and replays a canned outcome.

    Args:
        outcome: Response to return, exception to raise, or a callable
            ``(url, options) -> response`` that may itself raise.
    """

    def __init__(self, outcome: Any = None):
        self.outcome = outcome if outcome is not None else json_response({})
        self.calls: list[RecordedRequest] = []

    async def request(self, url: str, options: Mapping[str, Any]) -> Any:
        self.calls.append(RecordedRequest(url=url, options=dict(options)))
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        if callable(self.outcome):
            return self.outcome(url, options)
        return self.outcome

    @property
    def last_request(self) -> RecordedRequest:
        return self.calls[-1]


def json_response(data: Any, status_code: int = 200) -> httpx.Response:
    """Create an ``httpx.Response`` with a JSON body."""
    return httpx.Response(status_code, json=data)


def echo_handler() -> Callable[[str, Mapping[str, Any]], httpx.Response]:
    """Return a ``RecordingTransport`` outcome that echoes the request payload as JSON."""

    def handler(url: str, options: Mapping[str, Any]) -> httpx.Response:
        payload = options.get("body", options.get("search"))
        return json_response({"url": url, "method": options.get("method"), "params": dict(payload or {})})

    return handler


def mock_credentials(identity: str = "alice", credential: str = "s3cr3t") -> StaticCredentials:
    return StaticCredentials(identity, credential)


__all__ = ["RecordedRequest", "RecordingTransport", "echo_handler", "json_response", "mock_credentials"]
