"""
Client utilities for CLI commands.

Resolves credentials from the stored record, environment and the global
--api-url/--api-key flags, and builds the API client commands use.
"""

from __future__ import annotations

from dataclasses import dataclass

import typer

from flexprice_cli.api.client import FlexPriceClient
from flexprice_cli.core.config import CredentialStore, Credentials, get_settings, require_auth


@dataclass
class CLIState:
    """Global options shared by every command through ``ctx.obj``."""

    api_url: str | None = None
    api_key: str | None = None


def get_state(ctx: typer.Context) -> CLIState:
    """Get the global options, tolerating commands invoked without the root callback."""
    state = ctx.find_object(CLIState)
    return state if state is not None else CLIState()


def get_credentials(ctx: typer.Context, authenticated: bool = True) -> Credentials:
    """Resolve credentials for this invocation.

    Args:
        ctx: Typer context carrying the global options
        authenticated: Require an API key or auth token

    Returns:
        Resolved credentials

    Raises:
        NotAuthenticatedError: If ``authenticated`` and none are configured
    """
    state = get_state(ctx)
    credentials = CredentialStore().resolve(cli_api_url=state.api_url, cli_api_key=state.api_key)
    if authenticated:
        require_auth(credentials)
    return credentials


def get_client(ctx: typer.Context, credentials: Credentials | None = None) -> FlexPriceClient:
    """Get an authenticated FlexPrice API client.

    Args:
        ctx: Typer context carrying the global options
        credentials: Already resolved credentials (resolved from ctx if None)

    Raises:
        NotAuthenticatedError: If credentials are not configured
    """
    if credentials is None:
        credentials = get_credentials(ctx)
    return FlexPriceClient(credentials, timeout=get_settings().timeout)
