"""
Configuration and credential management for flexprice-cli.

Handles loading configuration from environment variables, .env files,
the stored credential record, and CLI arguments with proper precedence:

    ~/.flexprice/credentials.json  <  FLEXPRICE_* env vars  <  CLI flags
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    ValidationError,
    field_serializer,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from flexprice_cli.constants import APIConfig, CredentialConfig
from flexprice_cli.core.exceptions import (
    CredentialsCorruptError,
    CredentialsIOError,
    CredentialsNotFoundError,
    NotAuthenticatedError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# FlexPrice Credentials
# =============================================================================


class Credentials(BaseModel):
    """
    The identity used to authenticate requests, persisted as a single record.

    Attributes:
        api_url: Base endpoint (empty means the local default)
        api_key: Static API key credential
        auth_token: Session bearer token from `auth login`
        tenant_id: Tenant the token belongs to
        user_id: User the token belongs to
        environment_id: Sent as x-environment-id on every request
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    api_url: str = ""
    api_key: SecretStr | None = None
    auth_token: SecretStr | None = None
    tenant_id: str | None = None
    user_id: str | None = None
    environment_id: str | None = None

    @field_validator("api_url", mode="before")
    @classmethod
    def validate_api_url(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator(
        "api_key", "auth_token", "tenant_id", "user_id", "environment_id", mode="before"
    )
    @classmethod
    def empty_as_none(cls, v: Any) -> Any:
        """Blank values mean "not set"."""
        if isinstance(v, SecretStr):
            v = v.get_secret_value()
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_serializer("api_key", "auth_token", when_used="json")
    def dump_secret(self, v: SecretStr | None) -> str | None:
        return v.get_secret_value() if v is not None else None

    @property
    def is_authenticated(self) -> bool:
        """True when an API key or an auth token is available."""
        return self.api_key is not None or self.auth_token is not None

    @property
    def auth_kind(self) -> str:
        """Which credential will be sent, for display."""
        if self.api_key is not None:
            return "API Key"
        if self.auth_token is not None:
            return "JWT Token"
        return "(none)"

    def auth_header(self) -> tuple[str, str] | None:
        """
        Get the single authentication header for a request.

        The API key takes priority over the auth token; never both.

        Returns:
            (header name, header value) or None when unauthenticated
        """
        if self.api_key is not None:
            return APIConfig.API_KEY_HEADER, self.api_key.get_secret_value()
        if self.auth_token is not None:
            return APIConfig.AUTHORIZATION_HEADER, f"Bearer {self.auth_token.get_secret_value()}"
        return None

    def masked_api_key(self) -> str:
        """Mask the API key for display (first 4 + ... + last 4)."""
        if self.api_key is None:
            return CredentialConfig.NOT_SET
        key = self.api_key.get_secret_value()
        if len(key) > 8:
            return f"{key[:4]}...{key[-4:]}"
        return "*" * len(key)


def require_auth(credentials: Credentials) -> Credentials:
    """
    Ensure credentials can authenticate before making a call.

    Raises:
        NotAuthenticatedError: If neither API key nor token is set
    """
    if not credentials.is_authenticated:
        raise NotAuthenticatedError()
    return credentials


# =============================================================================
# Main Settings
# =============================================================================


class FlexPriceSettings(BaseSettings):
    """
    Settings for flexprice-cli, loaded from the environment and .env.

    Environment variables (prefix FLEXPRICE_):
        FLEXPRICE_API_URL, FLEXPRICE_API_KEY, FLEXPRICE_ENVIRONMENT_ID
        FLEXPRICE_TIMEOUT, FLEXPRICE_DEBUG, FLEXPRICE_LOG_LEVEL
        FLEXPRICE_CONFIG_DIR
    """

    model_config = SettingsConfigDict(
        env_prefix=CredentialConfig.ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Credential overrides
    api_url: str = ""
    api_key: SecretStr = SecretStr("")
    environment_id: str = ""

    timeout: Annotated[int, Field(default=APIConfig.DEFAULT_TIMEOUT, ge=1, le=300)]

    # Paths
    config_dir: Path = Field(
        default_factory=lambda: Path.home() / CredentialConfig.CONFIG_DIR_NAME
    )

    # Logging
    debug: bool = False
    log_level: Annotated[str, Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")]

    @property
    def credentials_path(self) -> Path:
        """Path of the stored credential record."""
        return self.config_dir / CredentialConfig.CREDENTIALS_FILE


# =============================================================================
# Singleton Settings Access
# =============================================================================

_settings: FlexPriceSettings | None = None


def get_settings() -> FlexPriceSettings:
    """
    Get the global settings instance.

    Creates a new instance on first call, returns cached instance thereafter.
    """
    global _settings
    if _settings is None:
        _settings = FlexPriceSettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None


# =============================================================================
# Credential Store
# =============================================================================


class CredentialStore:
    """
    Reads, writes and resolves the stored credential record.

    Usage:
        store = CredentialStore()
        creds = store.resolve(cli_api_url=None, cli_api_key="fp_live_...")

        store.persist(creds)
        store.erase()

    The record is plain user config: it is not locked, so concurrent
    writers race and the last write wins.
    """

    def __init__(self, path: Path | None = None, settings: FlexPriceSettings | None = None):
        """
        Initialize the store.

        Args:
            path: Record location (defaults to ~/.flexprice/credentials.json)
            settings: Settings for the environment layer (defaults to global)
        """
        self._settings = settings
        self.path = path or self.settings.credentials_path

    @property
    def settings(self) -> FlexPriceSettings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    def load_persisted(self) -> Credentials:
        """
        Load the stored record.

        Raises:
            CredentialsNotFoundError: No record at the expected path
            CredentialsCorruptError: Record exists but cannot be parsed
            CredentialsIOError: Record exists but cannot be read
        """
        if not self.path.exists():
            raise CredentialsNotFoundError(str(self.path))

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise CredentialsIOError(str(self.path), str(e)) from e

        try:
            credentials = Credentials.model_validate_json(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValidationError) as e:
            raise CredentialsCorruptError(str(self.path), str(e)) from e

        logger.debug(f"Loaded credentials from {self.path}")
        return credentials

    def persist(self, credentials: Credentials) -> None:
        """
        Write the full record, creating the parent directory if needed.

        Raises:
            CredentialsIOError: If the directory or file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(credentials.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise CredentialsIOError(str(self.path), str(e)) from e
        logger.debug(f"Saved credentials to {self.path}")

    def erase(self) -> None:
        """
        Remove the stored record. A missing record is not an error.

        Raises:
            CredentialsIOError: If the file exists but cannot be removed
        """
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise CredentialsIOError(str(self.path), str(e)) from e
        logger.debug(f"Removed credentials at {self.path}")

    def resolve(
        self,
        cli_api_url: str | None = None,
        cli_api_key: str | None = None,
    ) -> Credentials:
        """
        Produce the credentials for this invocation. Never persists.

        Layers, lowest first: stored record (empty when missing),
        FLEXPRICE_API_URL / FLEXPRICE_API_KEY / FLEXPRICE_ENVIRONMENT_ID
        when not blank, then the CLI flags when given.

        Args:
            cli_api_url: --api-url flag value
            cli_api_key: --api-key flag value

        Returns:
            Merged Credentials with api_url defaulted when still empty
        """
        try:
            base = self.load_persisted()
        except CredentialsNotFoundError:
            logger.debug("No stored credentials, starting empty")
            base = Credentials()

        values: dict[str, Any] = dict(base)

        settings = self.settings
        if settings.api_url.strip():
            values["api_url"] = settings.api_url
        if settings.api_key.get_secret_value().strip():
            values["api_key"] = settings.api_key
        if settings.environment_id.strip():
            values["environment_id"] = settings.environment_id

        if cli_api_url is not None:
            values["api_url"] = cli_api_url
        if cli_api_key is not None:
            values["api_key"] = cli_api_key

        credentials = Credentials.model_validate(values)
        if not credentials.api_url:
            credentials = credentials.model_copy(update={"api_url": APIConfig.DEFAULT_URL})
        return credentials
