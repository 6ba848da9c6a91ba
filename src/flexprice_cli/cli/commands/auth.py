"""
Authentication commands.

Provides login with email/password, API key storage, and inspection or
removal of the stored credentials.
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from flexprice_cli.api.client import FlexPriceClient
from flexprice_cli.cli.utils import get_client, get_credentials
from flexprice_cli.cli.utils.output import info, print_banner, print_detail, spinner, success, warning
from flexprice_cli.constants import APIConfig, Endpoints
from flexprice_cli.core.config import CredentialStore, Credentials
from flexprice_cli.core.exceptions import ConnectionCheckError, CredentialsNotFoundError
from flexprice_cli.models.auth import AuthResponse, LoginRequest

app = typer.Typer(help="Authenticate with FlexPrice")
console = Console()


def _print_identity(credentials: Credentials) -> None:
    info(f"API URL:    {credentials.api_url}")
    if credentials.tenant_id:
        info(f"Tenant ID:  {credentials.tenant_id}")
    if credentials.user_id:
        info(f"User ID:    {credentials.user_id}")
    if credentials.environment_id:
        info(f"Env ID:     {credentials.environment_id}")


@app.command("login")
def login(
    api_url: Annotated[str | None, typer.Option("--api-url", help="API endpoint URL")] = None,
) -> None:
    """Interactive login with email and password."""
    print_banner()

    if api_url is None:
        api_url = typer.prompt("  API Endpoint", default=APIConfig.DEFAULT_URL)
    email = typer.prompt("  Email")
    password = typer.prompt("  Password", hide_input=True)

    client = FlexPriceClient(Credentials(api_url=api_url))
    request = LoginRequest(email=email, password=password)
    with spinner("Authenticating..."):
        auth = client.post(Endpoints.LOGIN, json_data=request.model_dump(), model=AuthResponse)

    store = CredentialStore()
    store.persist(
        Credentials(
            api_url=api_url,
            auth_token=auth.token,
            tenant_id=auth.tenant_id,
            user_id=auth.user_id,
        )
    )

    console.print()
    success("Authenticated successfully!")
    success(f"Tenant: {auth.tenant_id}")
    success(f"User: {email} ({auth.user_id})")
    success(f"Credentials saved to {store.path}")
    console.print()


@app.command("set-api-key")
def set_api_key(
    key: Annotated[str, typer.Argument(help="The API key to store")],
    api_url: Annotated[
        str, typer.Option("--api-url", help="API endpoint URL")
    ] = APIConfig.DEFAULT_URL,
) -> None:
    """Set an API key directly (for CI/CD or pre-provisioned keys)."""
    store = CredentialStore()
    try:
        stored = store.load_persisted()
    except CredentialsNotFoundError:
        stored = Credentials()

    credentials = Credentials.model_validate({**dict(stored), "api_url": api_url, "api_key": key})

    with spinner("Validating API key..."):
        FlexPriceClient(credentials).health_check()

    store.persist(credentials)

    success("API key validated and saved!")
    success(f"API URL: {credentials.api_url}")
    success(f"Credentials saved to {store.path}")


@app.command("whoami")
def whoami(ctx: typer.Context) -> None:
    """Show the authenticated user and tenant."""
    credentials = get_credentials(ctx)
    client = get_client(ctx, credentials)

    with spinner("Fetching user info..."):
        user = client.get(Endpoints.CURRENT_USER)

    console.print()
    _print_identity(credentials)
    info(f"Auth:       {credentials.auth_kind}")
    console.print()
    print_detail(user)


@app.command("status")
def status() -> None:
    """Show the stored credentials and test the connection."""
    try:
        credentials = CredentialStore().load_persisted()
    except CredentialsNotFoundError:
        warning("Not authenticated.")
        info("Run `flexprice auth login` or `flexprice auth set-api-key <KEY>` to get started.")
        return

    success("Credentials found")
    info(f"API URL:    {credentials.api_url or APIConfig.DEFAULT_URL}")
    info(f"API Key:    {credentials.masked_api_key()}")
    info(f"Auth:       {credentials.auth_kind}")
    if credentials.tenant_id:
        info(f"Tenant ID:  {credentials.tenant_id}")
    if credentials.environment_id:
        info(f"Env ID:     {credentials.environment_id}")

    try:
        with spinner("Testing connection..."):
            FlexPriceClient(credentials).health_check()
    except ConnectionCheckError as e:
        warning(f"API unreachable: {e}")
        return
    success("API connection OK")


@app.command("logout")
def logout() -> None:
    """Remove stored credentials."""
    CredentialStore().erase()
    success("Credentials removed. You are now logged out.")
