"""
CLI module for flexprice-cli.

Provides the `flexprice` command-line interface.
"""

from __future__ import annotations

from flexprice_cli.cli.main import app, cli

__all__ = ["app", "cli"]
