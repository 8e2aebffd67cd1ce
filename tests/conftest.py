"""Pytest configuration and shared fixtures for http-auth-adapter tests."""

import pytest

from http_auth_adapter.testing import RecordingTransport, json_response, mock_credentials


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Clear adapter-related environment variables before each test.

    Prevents test pollution when testing credential and config resolution.
    """
    import os

    test_prefixes = ("TEST_", "AUTH_", "AUTH_ADAPTER__")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def credentials():
    """Credential source returning identity 'alice' and credential 's3cr3t'."""
    return mock_credentials("alice", "s3cr3t")


@pytest.fixture
def transport():
    """Transport stub that answers every request with ``{"token": "abc"}``."""
    return RecordingTransport(json_response({"token": "abc"}))
