"""
flexprice-cli: command-line client for the FlexPrice billing API.

This package provides:
- Credential resolution and storage (~/.flexprice/credentials.json)
- An authenticated REST client for the FlexPrice v1 API
- The `flexprice` CLI with per-resource commands
- An interactive terminal dashboard
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
