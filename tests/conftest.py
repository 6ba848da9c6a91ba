"""
Shared pytest fixtures.

Every test runs with FLEXPRICE_* variables cleared, the credential record
under a temporary directory, and the working directory moved away from any
.env file.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from flexprice_cli.core.config import reset_settings


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Isolate settings and the credential record from the real user config."""
    for name in list(os.environ):
        if name.startswith("FLEXPRICE_"):
            monkeypatch.delenv(name)
    config_dir = tmp_path / ".flexprice"
    monkeypatch.setenv("FLEXPRICE_CONFIG_DIR", str(config_dir))
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield config_dir
    reset_settings()
