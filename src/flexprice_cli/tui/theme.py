"""FlexPrice terminal theme: dark slate surfaces with indigo and emerald accents."""

from __future__ import annotations

from typing import Final


class Theme:
    """Colour palette for the dashboard (rich colour strings)."""

    # Brand
    PRIMARY: Final[str] = "#6366f1"
    ACCENT: Final[str] = "#10b981"
    WARNING: Final[str] = "#f59e0b"
    ERROR: Final[str] = "#f43f5e"
    INFO: Final[str] = "#38bdf8"

    # Surfaces
    SURFACE_HOVER: Final[str] = "#334155"
    BORDER: Final[str] = "#475569"

    # Text
    TEXT: Final[str] = "#e2e8f0"
    TEXT_DIM: Final[str] = "#94a3b8"
    TEXT_MUTED: Final[str] = "#64748b"
