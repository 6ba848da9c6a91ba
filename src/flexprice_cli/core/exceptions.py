"""
Exception hierarchy for flexprice-cli.

All exceptions inherit from FlexPriceError for unified error handling.
One-shot commands let these propagate to the CLI entry point, which prints
the message and exits non-zero. The dashboard captures them into its error
display instead.
"""

from __future__ import annotations

from typing import Any


class FlexPriceError(Exception):
    """
    Base exception for all flexprice-cli errors.

    Attributes:
        message: Human-readable error description
        context: Optional dictionary with additional error context
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Credential Errors
# =============================================================================


class CredentialsError(FlexPriceError):
    """Base class for credential store errors."""

    pass


class CredentialsNotFoundError(CredentialsError):
    """
    No credential record exists at the expected location.

    Recoverable: callers treat this as "not authenticated".
    """

    def __init__(self, path: str):
        super().__init__(f"No credentials file found: {path}", context={"path": path})
        self.path = path


class CredentialsCorruptError(CredentialsError):
    """The credential record exists but cannot be parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Credentials file is corrupt ({path}): {reason}",
            context={"path": path, "reason": reason},
        )
        self.path = path
        self.reason = reason


class CredentialsIOError(CredentialsError):
    """Writing or removing the credential record failed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Could not update credentials file {path}: {reason}",
            context={"path": path, "reason": reason},
        )
        self.path = path
        self.reason = reason


class NotAuthenticatedError(FlexPriceError):
    """Neither an API key nor an auth token is configured."""

    def __init__(
        self,
        message: str = (
            "Not authenticated. Run `flexprice auth login` or "
            "`flexprice auth set-api-key <KEY>` first."
        ),
    ):
        super().__init__(message)


# =============================================================================
# API Client Errors
# =============================================================================


class APIError(FlexPriceError):
    """
    The API answered with a non-success status.

    Attributes:
        status_code: HTTP status code
        body: Raw response body text
    """

    def __init__(self, status_code: int, message: str, body: str = ""):
        super().__init__(message, context={"status_code": status_code})
        self.status_code = status_code
        self.body = body


class NetworkError(FlexPriceError):
    """The request never produced an HTTP response (DNS, refused, reset)."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class APITimeoutError(NetworkError):
    """The request exceeded the client timeout."""

    pass


class DecodeError(FlexPriceError):
    """
    A success response whose body does not match the expected shape.

    The HTTP call itself succeeded; only decoding failed.
    """

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class ConnectionCheckError(FlexPriceError):
    """Health check failed, for whatever reason."""

    pass
