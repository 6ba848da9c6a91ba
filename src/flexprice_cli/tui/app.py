"""
Dashboard event loop.

Single-threaded: the loop waits up to 100 ms for a key, applies the bound
transition (fetches run synchronously inside it) and redraws.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.live import Live

from flexprice_cli.api.client import FlexPriceClient
from flexprice_cli.constants import DASHBOARD_POLL_INTERVAL
from flexprice_cli.core.config import Credentials, get_settings
from flexprice_cli.tui.dashboard import DashboardSession
from flexprice_cli.tui.keys import KeyReader, handle_key
from flexprice_cli.tui.view import render

logger = logging.getLogger(__name__)


def run_dashboard(credentials: Credentials, console: Console | None = None) -> None:
    """
    Run the dashboard until the user quits.

    Args:
        credentials: Resolved, authenticated credentials
        console: Console to draw on
    """
    console = console or Console()
    client = FlexPriceClient(credentials, timeout=get_settings().timeout)
    session = DashboardSession(client)

    with KeyReader() as keys, Live(
        render(session, credentials),
        console=console,
        screen=True,
        auto_refresh=False,
    ) as live:

        def redraw() -> None:
            live.update(render(session, credentials), refresh=True)

        session.on_change = redraw
        session.launch()

        while not session.should_quit:
            key = keys.read_key(timeout=DASHBOARD_POLL_INTERVAL)
            if key is not None:
                logger.debug(f"Dashboard key: {key}")
                handle_key(session, key)

    logger.debug("Dashboard closed")
