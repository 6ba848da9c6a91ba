"""
FlexPrice API client package.
"""

from __future__ import annotations

from flexprice_cli.api.client import FlexPriceClient

__all__ = ["FlexPriceClient"]
