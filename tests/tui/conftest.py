"""
Pytest fixtures for dashboard tests.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest

from flexprice_cli.constants import DASHBOARD_TABS
from flexprice_cli.tui.dashboard import DashboardSession

CUSTOMERS_PAYLOAD: dict[str, Any] = {
    "items": [
        {"id": "cus_1", "name": "Acme", "status": "active"},
        {"id": "cus_2"},
        {"id": "cus_3", "email": "ops@example.com"},
    ],
    "total_count": 3,
}


class FakeClient:
    """Serves canned bodies (or raises canned errors) per endpoint."""

    def __init__(self, responses: dict[str, Any] | None = None):
        self.responses = responses or {}
        self.calls: list[str] = []

    def get_text(self, path: str) -> str:
        self.calls.append(path)
        response = self.responses.get(path, '{"items": []}')
        if isinstance(response, Exception):
            raise response
        if isinstance(response, str):
            return response
        return json.dumps(response)


@pytest.fixture
def customers_payload() -> dict[str, Any]:
    """The Customers tab payload."""
    return CUSTOMERS_PAYLOAD


@pytest.fixture
def make_session() -> Callable[[dict[str, Any]], DashboardSession]:
    """Factory for launched sessions over canned responses."""

    def _make(responses: dict[str, Any]) -> DashboardSession:
        session = DashboardSession(FakeClient(responses))
        session.launch()
        return session

    return _make


@pytest.fixture
def fake_client() -> FakeClient:
    """Client whose Customers tab returns three customers."""
    return FakeClient({DASHBOARD_TABS[0].endpoint: CUSTOMERS_PAYLOAD})


@pytest.fixture
def session(fake_client: FakeClient) -> DashboardSession:
    """A launched session on the Customers tab."""
    session = DashboardSession(fake_client)
    session.launch()
    return session
