"""
Pytest fixtures for CLI command tests.
"""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from flexprice_cli.core.config import CredentialStore, Credentials


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def store() -> CredentialStore:
    """Credential store under the isolated config directory."""
    return CredentialStore()


@pytest.fixture
def logged_in(store: CredentialStore) -> Credentials:
    """Persist an API key record."""
    credentials = Credentials(api_url="http://api.test", api_key="fp_live_abcd1234")
    store.persist(credentials)
    return credentials
