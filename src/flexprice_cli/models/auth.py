"""
Authentication and error payload models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    """Body of POST /v1/auth/login."""

    email: str
    password: str


class AuthResponse(BaseModel):
    """Session issued by a successful login."""

    model_config = ConfigDict(extra="allow")

    token: str
    user_id: str
    tenant_id: str


class ErrorBody(BaseModel):
    """
    Structured error returned with non-success statuses.

    Attributes:
        error: Short error code or message
        message: Alternative message field
        hint: Optional remediation hint
    """

    model_config = ConfigDict(extra="ignore")

    error: str | None = None
    message: str | None = None
    hint: str | None = None

    @property
    def summary(self) -> str:
        return self.error or self.message or "Unknown error"
