"""
Tests for the auth command group.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from flexprice_cli.cli.main import app
from flexprice_cli.core.config import CredentialStore, Credentials
from flexprice_cli.core.exceptions import ConnectionCheckError
from flexprice_cli.models.auth import AuthResponse


class TestLogin:
    """Tests for `auth login`."""

    @patch("flexprice_cli.cli.commands.auth.FlexPriceClient")
    def test_login_persists_token(
        self, mock_client_cls: MagicMock, runner: CliRunner, store: CredentialStore
    ) -> None:
        """A successful login replaces the record with the session."""
        store.persist(Credentials(api_key="old_key_123456", environment_id="env_1"))
        mock_client_cls.return_value.post.return_value = AuthResponse(
            token="jwt123", user_id="user_1", tenant_id="tenant_1"
        )

        result = runner.invoke(
            app, ["auth", "login", "--api-url", "http://api.test"], input="me@acme.test\nsecret\n"
        )

        assert result.exit_code == 0, result.output
        assert "Authenticated successfully!" in result.output
        assert "tenant_1" in result.output

        call = mock_client_cls.return_value.post.call_args
        assert call[0][0] == "/v1/auth/login"
        assert call[1]["json_data"] == {"email": "me@acme.test", "password": "secret"}

        saved = store.load_persisted()
        assert saved.api_url == "http://api.test"
        assert saved.auth_header() == ("Authorization", "Bearer jwt123")
        assert saved.user_id == "user_1"
        assert saved.api_key is None
        assert saved.environment_id is None

    @patch("flexprice_cli.cli.commands.auth.FlexPriceClient")
    def test_login_prompts_for_url(
        self, mock_client_cls: MagicMock, runner: CliRunner, store: CredentialStore
    ) -> None:
        """The endpoint is prompted for, defaulting to localhost."""
        mock_client_cls.return_value.post.return_value = AuthResponse(
            token="jwt", user_id="u", tenant_id="t"
        )

        result = runner.invoke(app, ["auth", "login"], input="\nme@acme.test\nsecret\n")

        assert result.exit_code == 0, result.output
        assert store.load_persisted().api_url == "http://localhost:8080"


class TestSetApiKey:
    """Tests for `auth set-api-key`."""

    @patch("flexprice_cli.cli.commands.auth.FlexPriceClient")
    def test_validates_and_saves(
        self, mock_client_cls: MagicMock, runner: CliRunner, store: CredentialStore
    ) -> None:
        result = runner.invoke(
            app, ["auth", "set-api-key", "fp_live_abcd1234", "--api-url", "http://api.test"]
        )

        assert result.exit_code == 0, result.output
        mock_client_cls.return_value.health_check.assert_called_once()
        saved = store.load_persisted()
        assert saved.api_url == "http://api.test"
        assert saved.auth_header() == ("x-api-key", "fp_live_abcd1234")

    @patch("flexprice_cli.cli.commands.auth.FlexPriceClient")
    def test_keeps_stored_token(
        self, mock_client_cls: MagicMock, runner: CliRunner, store: CredentialStore
    ) -> None:
        store.persist(Credentials(auth_token="jwt123", tenant_id="t1"))

        runner.invoke(app, ["auth", "set-api-key", "fp_live_abcd1234"])

        saved = store.load_persisted()
        assert saved.auth_token is not None
        assert saved.tenant_id == "t1"
        assert saved.api_key is not None

    @patch("flexprice_cli.cli.commands.auth.FlexPriceClient")
    def test_not_saved_when_unreachable(
        self, mock_client_cls: MagicMock, runner: CliRunner, store: CredentialStore
    ) -> None:
        mock_client_cls.return_value.health_check.side_effect = ConnectionCheckError("down")

        result = runner.invoke(app, ["auth", "set-api-key", "fp_live_abcd1234"])

        assert isinstance(result.exception, ConnectionCheckError)
        assert not store.path.exists()


class TestWhoami:
    """Tests for `auth whoami`."""

    @patch("flexprice_cli.cli.commands.auth.get_client")
    def test_shows_identity(
        self, mock_get_client: MagicMock, runner: CliRunner, store: CredentialStore
    ) -> None:
        store.persist(Credentials(auth_token="jwt", tenant_id="tenant_1", user_id="user_1"))
        mock_get_client.return_value.get.return_value = {"email": "me@acme.test"}

        result = runner.invoke(app, ["auth", "whoami"])

        assert result.exit_code == 0, result.output
        mock_get_client.return_value.get.assert_called_once_with("/v1/users/me")
        assert "tenant_1" in result.output
        assert "JWT Token" in result.output
        assert "me@acme.test" in result.output


class TestStatus:
    """Tests for `auth status`."""

    def test_not_authenticated(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["auth", "status"])

        assert result.exit_code == 0
        assert "Not authenticated." in result.output

    @patch("flexprice_cli.cli.commands.auth.FlexPriceClient")
    def test_connection_ok(
        self, mock_client_cls: MagicMock, runner: CliRunner, logged_in: Credentials
    ) -> None:
        result = runner.invoke(app, ["auth", "status"])

        assert result.exit_code == 0, result.output
        assert "Credentials found" in result.output
        assert "fp_l...1234" in result.output
        assert "API connection OK" in result.output

    @patch("flexprice_cli.cli.commands.auth.FlexPriceClient")
    def test_connection_failure_is_warning(
        self, mock_client_cls: MagicMock, runner: CliRunner, logged_in: Credentials
    ) -> None:
        mock_client_cls.return_value.health_check.side_effect = ConnectionCheckError("down")

        result = runner.invoke(app, ["auth", "status"])

        assert result.exit_code == 0
        assert "API unreachable" in result.output


class TestLogout:
    """Tests for `auth logout`."""

    def test_removes_record(
        self, runner: CliRunner, store: CredentialStore, logged_in: Credentials
    ) -> None:
        result = runner.invoke(app, ["auth", "logout"])

        assert result.exit_code == 0
        assert not store.path.exists()
        assert "logged out" in result.output

    def test_without_record(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["auth", "logout"])

        assert result.exit_code == 0
