"""
Pytest fixtures for service tests.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock FlexPriceClient."""
    client = MagicMock()
    client.base_url = "http://api.test"
    return client
