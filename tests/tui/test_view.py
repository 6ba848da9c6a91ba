"""
Tests for dashboard rendering.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any

from rich.console import Console

from flexprice_cli.core.config import Credentials
from flexprice_cli.core.exceptions import NetworkError
from flexprice_cli.tui.dashboard import DashboardSession
from flexprice_cli.tui.view import render, render_list


def _render_text(renderable: object, height: int = 30) -> str:
    console = Console(file=io.StringIO(), width=140, height=height, record=True)
    console.print(renderable)
    return console.export_text()


class TestRenderList:
    """Tests for the resource list panel."""

    def test_items_with_selection_marker(self, session: DashboardSession) -> None:
        text = _render_text(render_list(session))

        assert "Customers (3)" in text
        assert "▸ cus_1  Acme  [active]" in text
        assert "cus_2  -" in text

    def test_selection_moves(self, session: DashboardSession) -> None:
        session.next_item()

        text = _render_text(render_list(session))

        assert "▸ cus_2  -" in text

    def test_error_shown(
        self, make_session: Callable[[dict[str, Any]], DashboardSession]
    ) -> None:
        session = make_session({"/v1/customers": NetworkError("refused")})

        text = _render_text(render_list(session))

        assert "✗ refused" in text

    def test_loading_shown(self, session: DashboardSession) -> None:
        session.loading = True

        text = _render_text(render_list(session))

        assert "Loading..." in text
        assert "cus_1" not in text


class TestRender:
    """Tests for the full layout."""

    def test_full_layout(self, session: DashboardSession) -> None:
        creds = Credentials(api_url="http://api.test", api_key="fp_key")

        text = _render_text(render(session, creds), height=40)

        assert "FlexPrice" in text
        assert "http://api.test" in text
        assert "API Key" in text
        assert "Subscriptions" in text
        assert "q Quit" in text
