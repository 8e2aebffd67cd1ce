"""Tests for credential sources and multi-source credential resolution."""

import logging
import os

import pytest

from http_auth_adapter.auth import (
    CredentialError,
    CredentialResolver,
    CredentialSource,
    EnvironmentCredentials,
    StaticCredentials,
)
from http_auth_adapter.auth.exceptions import CredentialFileError, CredentialNotFoundError
from http_auth_adapter.errors import AuthAdapterError


class TestStaticCredentials:
    """Test the in-memory credential source."""

    def test_defaults_to_none(self):
        credentials = StaticCredentials()

        assert credentials.get_identity() is None
        assert credentials.get_credential() is None

    def test_setters_chain(self):
        credentials = StaticCredentials().set_identity("alice").set_credential("s3cr3t")

        assert credentials.get_identity() == "alice"
        assert credentials.get_credential() == "s3cr3t"

    def test_satisfies_protocol(self):
        assert isinstance(StaticCredentials(), CredentialSource)


class TestCredentialResolverResolve:
    """Test resolution priority: explicit value, environment, default."""

    def test_resolve_from_explicit_value(self, monkeypatch):
        monkeypatch.setenv("TEST_PRIORITY_KEY", "env-value")
        resolver = CredentialResolver(load_dotenv=False)

        result = resolver.resolve(value="explicit-value", env_var_name="TEST_PRIORITY_KEY", default="default")

        assert result == "explicit-value"

    def test_environment_overrides_default(self, monkeypatch):
        monkeypatch.setenv("TEST_PRIORITY_KEY", "env-value")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_PRIORITY_KEY", default="default") == "env-value"

    def test_default_used_when_nothing_else_set(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_MISSING", default="default") == "default"

    def test_returns_none_when_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_MISSING") is None

    def test_raises_when_required_and_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialNotFoundError) as exc_info:
            resolver.resolve(env_var_name="TEST_MISSING", required=True)

        assert "Required credential not found" in str(exc_info.value)
        assert exc_info.value.env_var_name == "TEST_MISSING"

    def test_resolve_from_dotenv_file(self, tmp_path, monkeypatch):
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("TEST_DOTENV_PASSWORD=dotenv-value\n")
        monkeypatch.delenv("TEST_DOTENV_PASSWORD", raising=False)

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))
        try:
            assert resolver.resolve(env_var_name="TEST_DOTENV_PASSWORD") == "dotenv-value"
        finally:
            os.environ.pop("TEST_DOTENV_PASSWORD", None)

    def test_dotenv_loading_error_handled_gracefully(self, tmp_path):
        dotenv_path = tmp_path / "not_a_file"
        dotenv_path.mkdir()

        resolver = CredentialResolver(dotenv_path=str(dotenv_path))

        assert resolver._dotenv_loaded is True
        assert resolver.resolve(value="works") == "works"

    def test_exceptions_share_base_classes(self):
        assert issubclass(CredentialNotFoundError, CredentialError)
        assert issubclass(CredentialFileError, CredentialError)
        assert issubclass(CredentialError, AuthAdapterError)


class TestCredentialResolverFromFile:
    """Test file-based credential resolution."""

    def test_strips_whitespace(self, tmp_path):
        cred_file = tmp_path / "password.txt"
        cred_file.write_text("  file-password  \n")

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=str(cred_file)) == "file-password"

    def test_path_from_env_var(self, tmp_path, monkeypatch):
        cred_file = tmp_path / "secret.txt"
        cred_file.write_text("secret-from-env-path")
        monkeypatch.setenv("TEST_PASSWORD_FILE", str(cred_file))

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(env_var_name="TEST_PASSWORD_FILE") == "secret-from-env-path"

    def test_env_var_expansion_in_path(self, tmp_path, monkeypatch):
        (tmp_path / "password").write_text("expanded")
        monkeypatch.setenv("TEST_CONFIG_DIR", str(tmp_path))

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path="$TEST_CONFIG_DIR/password") == "expanded"

    def test_missing_file(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path="/nonexistent/password.txt") is None
        with pytest.raises(CredentialFileError, match="not found"):
            resolver.resolve_from_file(file_path="/nonexistent/password.txt", required=True)

    def test_no_path_provided_required(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file() is None
        with pytest.raises(CredentialFileError, match="No file path provided"):
            resolver.resolve_from_file(required=True)

    def test_directory_instead_of_file(self, tmp_path):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=str(tmp_path)) is None
        with pytest.raises(CredentialFileError):
            resolver.resolve_from_file(file_path=str(tmp_path), required=True)


class TestCredentialMasking:
    """Credential values must never reach the logs."""

    def test_value_is_masked_in_debug_logs(self, caplog):
        caplog.set_level(logging.DEBUG)

        CredentialResolver(load_dotenv=False).resolve(value="super-secret-123")

        assert "super-secret-123" not in caplog.text
        assert "***" in caplog.text

    def test_masking_can_be_disabled(self, caplog):
        caplog.set_level(logging.DEBUG)

        CredentialResolver(load_dotenv=False).resolve(value="alice", mask_in_logs=False)

        assert "alice" in caplog.text

    def test_file_credentials_are_masked(self, tmp_path, caplog):
        caplog.set_level(logging.DEBUG)
        cred_file = tmp_path / "secret.txt"
        cred_file.write_text("file-secret-xyz")

        CredentialResolver(load_dotenv=False).resolve_from_file(file_path=str(cred_file))

        assert "file-secret-xyz" not in caplog.text


class TestEnvironmentCredentials:
    """Test the environment-backed credential source."""

    def test_reads_identity_and_credential(self, monkeypatch):
        monkeypatch.setenv("TEST_USERNAME", "alice")
        monkeypatch.setenv("TEST_PASSWORD", "s3cr3t")

        credentials = EnvironmentCredentials(
            "TEST_USERNAME", "TEST_PASSWORD", resolver=CredentialResolver(load_dotenv=False)
        )

        assert credentials.get_identity() == "alice"
        assert credentials.get_credential() == "s3cr3t"

    def test_resolves_on_every_call(self, monkeypatch):
        monkeypatch.setenv("TEST_PASSWORD", "old")
        credentials = EnvironmentCredentials(
            "TEST_USERNAME", "TEST_PASSWORD", resolver=CredentialResolver(load_dotenv=False)
        )
        assert credentials.get_credential() == "old"

        monkeypatch.setenv("TEST_PASSWORD", "rotated")

        assert credentials.get_credential() == "rotated"

    def test_credential_file_takes_precedence(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TEST_PASSWORD", "from-env")
        cred_file = tmp_path / "password"
        cred_file.write_text("from-file\n")

        credentials = EnvironmentCredentials(
            "TEST_USERNAME",
            "TEST_PASSWORD",
            credential_file=cred_file,
            resolver=CredentialResolver(load_dotenv=False),
        )

        assert credentials.get_credential() == "from-file"

    def test_default_identity(self):
        credentials = EnvironmentCredentials(
            "TEST_USERNAME", default_identity="guest", resolver=CredentialResolver(load_dotenv=False)
        )

        assert credentials.get_identity() == "guest"
        assert credentials.get_credential() is None

    def test_required_values_raise(self):
        credentials = EnvironmentCredentials(
            "TEST_USERNAME", "TEST_PASSWORD", required=True, resolver=CredentialResolver(load_dotenv=False)
        )

        with pytest.raises(CredentialNotFoundError) as exc_info:
            credentials.get_identity()
        assert exc_info.value.env_var_name == "TEST_USERNAME"
