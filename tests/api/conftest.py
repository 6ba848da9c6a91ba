"""
Pytest fixtures for API client tests.
"""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from flexprice_cli.api.client import FlexPriceClient
from flexprice_cli.core.config import Credentials


@pytest.fixture
def credentials() -> Credentials:
    """Create test credentials."""
    return Credentials(api_url="http://api.test/", api_key="fp_test_key")


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock requests.Session."""
    return MagicMock()


@pytest.fixture
def client(credentials: Credentials, mock_session: MagicMock) -> FlexPriceClient:
    """Create a FlexPriceClient with mocked session."""
    client = FlexPriceClient(credentials)
    client._session = mock_session
    return client


def _make_response(status_code: int = 200, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Factory for mock requests.Response objects."""
    return _make_response
