"""
Main CLI entry point for flexprice-cli.

Provides the `flexprice` command with subcommands for:
- auth: Login, API keys and credential status
- customers: Customer management
- plans: Pricing plan management
- subscriptions: Subscription management
- invoices: Invoice lifecycle and PDFs
- meters: Usage meter management
- events: Usage event ingestion and queries
- wallets: Prepaid credit wallets
- features: Feature management
- entitlements: Plan entitlement management
- config: Show resolved configuration
- dashboard: Interactive terminal dashboard
"""

from __future__ import annotations

import logging
import sys
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from flexprice_cli import __version__
from flexprice_cli.cli.commands import (
    auth,
    customers,
    entitlements,
    events,
    features,
    invoices,
    meters,
    plans,
    subscriptions,
    wallets,
)
from flexprice_cli.cli.utils import CLIState, get_credentials
from flexprice_cli.cli.utils.output import error, info
from flexprice_cli.core.config import get_settings
from flexprice_cli.core.exceptions import FlexPriceError

# Main CLI app
app = typer.Typer(
    name="flexprice",
    help="FlexPrice CLI - Usage-based billing from the terminal",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Rich console for formatted output
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"flexprice version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            envvar="FLEXPRICE_DEBUG",
            help="Enable debug output",
        ),
    ] = False,
    api_url: Annotated[
        str | None,
        typer.Option("--api-url", help="Override the API endpoint URL"),
    ] = None,
    api_key: Annotated[
        str | None,
        typer.Option("--api-key", help="Override the API key"),
    ] = None,
) -> None:
    """
    FlexPrice CLI.

    Manage customers, plans, subscriptions, invoices, meters, events and
    wallets on a FlexPrice server, or browse them in the dashboard.
    """
    settings = get_settings()

    # Configure logging
    level = logging.DEBUG if debug else getattr(logging, settings.log_level)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=debug, rich_tracebacks=True)],
    )

    # Update settings with debug flag
    if debug:
        settings.debug = True

    ctx.obj = CLIState(api_url=api_url, api_key=api_key)


# Register command groups
app.add_typer(auth.app, name="auth", help="Authenticate with FlexPrice")
app.add_typer(customers.app, name="customers", help="Manage customers")
app.add_typer(plans.app, name="plans", help="Manage pricing plans")
app.add_typer(subscriptions.app, name="subscriptions", help="Manage subscriptions")
app.add_typer(invoices.app, name="invoices", help="Manage invoices")
app.add_typer(meters.app, name="meters", help="Manage usage meters")
app.add_typer(events.app, name="events", help="Ingest and query usage events")
app.add_typer(wallets.app, name="wallets", help="Manage customer wallets")
app.add_typer(features.app, name="features", help="Manage features")
app.add_typer(entitlements.app, name="entitlements", help="Manage plan entitlements")


@app.command()
def config(ctx: typer.Context) -> None:
    """Show the resolved configuration."""
    credentials = get_credentials(ctx, authenticated=False)
    settings = get_settings()

    console.print("\n[bold]Configuration:[/bold]")
    info(f"API URL:      {credentials.api_url}", console=console)
    info(f"API Key:      {credentials.masked_api_key()}", console=console)
    info(f"Auth:         {credentials.auth_kind}", console=console)
    if credentials.tenant_id:
        info(f"Tenant ID:    {credentials.tenant_id}", console=console)
    if credentials.environment_id:
        info(f"Env ID:       {credentials.environment_id}", console=console)
    info(f"Config path:  {settings.credentials_path}", console=console)
    info(f"Timeout:      {settings.timeout}s", console=console)
    console.print()


@app.command()
def dashboard(ctx: typer.Context) -> None:
    """Launch the interactive terminal dashboard."""
    credentials = get_credentials(ctx)

    from flexprice_cli.tui.app import run_dashboard

    run_dashboard(credentials, console=console)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]flexprice[/bold] version {__version__}")
    console.print("FlexPrice billing CLI")


def cli() -> None:
    """Entry point for the CLI."""
    try:
        app()
    except FlexPriceError as e:
        error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    cli()
