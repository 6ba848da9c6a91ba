"""
Interactive dashboard session state.

DashboardSession is a small state machine over a fixed list of resource
tabs. Tab switches and refreshes fetch the tab's endpoint and rebuild the
item list and detail text; item navigation only re-derives the detail text
from the payload already fetched. Rendering and keyboard handling live in
``flexprice_cli.tui.view`` and ``flexprice_cli.tui.keys``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any, Protocol

from flexprice_cli.constants import DASHBOARD_TABS, ITEM_NAME_FIELDS, ITEM_STATUS_FIELDS, ResourceTab
from flexprice_cli.core.exceptions import FlexPriceError

logger = logging.getLogger(__name__)

NO_ITEMS = "(no items)"
RAW_RESPONSE = "(raw response)"


class TextFetcher(Protocol):
    """Anything that can GET a path and return the body text."""

    def get_text(self, path: str) -> str: ...


class SessionMode(str, Enum):
    """Render modes; exactly one is shown at a time."""

    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


# =============================================================================
# Payload Interpretation
# =============================================================================


def _first_str(item: dict[str, Any], fields: Sequence[str]) -> str | None:
    """Value of the first field present, or None when that value is not a string."""
    for name in fields:
        if name in item:
            value = item[name]
            return value if isinstance(value, str) else None
    return None


def format_item_line(item: Any) -> str:
    """
    Build the list line for one element of an ``items`` array.

    Format: ``"{id}  {name}"`` plus ``"  [{status}]"`` when a status-like
    field is present.

    Example:
        >>> format_item_line({"id": "cus_1", "name": "Acme", "status": "active"})
        'cus_1  Acme  [active]'
    """
    fields = item if isinstance(item, dict) else {}
    item_id = _first_str(fields, ("id",)) or "?"
    name = _first_str(fields, ITEM_NAME_FIELDS) or "-"
    status = _first_str(fields, ITEM_STATUS_FIELDS)
    if status:
        return f"{item_id}  {name}  [{status}]"
    return f"{item_id}  {name}"


def pretty_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def payload_items(payload: Any) -> list[Any] | None:
    """The top-level ``items`` array of a payload, if it has one."""
    if isinstance(payload, dict) and isinstance(payload.get("items"), list):
        return payload["items"]
    return None


def parse_body(body: str) -> tuple[Any | None, list[str], str]:
    """
    Interpret a fetched body.

    Tries the richest shape first: a JSON object with an ``items`` array,
    then any JSON value, then raw text.

    Args:
        body: Raw response text

    Returns:
        (parsed payload or None, list lines, detail text)
    """
    try:
        payload = json.loads(body)
    except ValueError:
        return None, [RAW_RESPONSE], body

    items = payload_items(payload)
    if items is not None:
        return payload, [format_item_line(item) for item in items], pretty_json(payload)
    return payload, [NO_ITEMS], pretty_json(payload)


# =============================================================================
# Session
# =============================================================================


class DashboardSession:
    """
    State of one dashboard run.

    Attributes:
        tabs: Ordered resource tabs
        active_tab: Index of the current tab
        items: List lines for the current tab
        selected_index: Selected line (None when the list is empty)
        detail: Detail text for the current selection
        loading: A fetch is in progress
        error: Message of the last failed fetch
        should_quit: The session has ended

    Usage:
        session = DashboardSession(client, on_change=redraw)
        session.launch()
        session.next_tab()
        session.next_item()
    """

    def __init__(
        self,
        client: TextFetcher,
        tabs: Sequence[ResourceTab] = DASHBOARD_TABS,
        on_change: Callable[[], None] | None = None,
    ):
        """
        Initialize the session.

        Args:
            client: API client used for fetches
            tabs: Resource tabs in display order
            on_change: Called whenever visible state changes (e.g. to redraw)
        """
        if not tabs:
            raise ValueError("Dashboard needs at least one tab")
        self.client = client
        self.tabs = tuple(tabs)
        self.on_change = on_change

        self.active_tab = 0
        self.items: list[str] = []
        self.selected_index: int | None = None
        self.detail = ""
        self.loading = False
        self.error: str | None = None
        self.should_quit = False
        self._payload: Any | None = None

    @property
    def tab(self) -> ResourceTab:
        return self.tabs[self.active_tab]

    @property
    def mode(self) -> SessionMode:
        """Loading wins over error, error over the list."""
        if self.loading:
            return SessionMode.LOADING
        if self.error is not None:
            return SessionMode.ERROR
        return SessionMode.READY

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _clear(self) -> None:
        self.items = []
        self.selected_index = None
        self.detail = ""
        self.error = None
        self._payload = None

    # =========================================================================
    # Transitions
    # =========================================================================

    def launch(self) -> None:
        """Fetch the initial tab."""
        self._load()

    def next_tab(self) -> None:
        self.active_tab = (self.active_tab + 1) % len(self.tabs)
        self._clear()
        self._load()

    def prev_tab(self) -> None:
        self.active_tab = (self.active_tab - 1 + len(self.tabs)) % len(self.tabs)
        self._clear()
        self._load()

    def next_item(self) -> None:
        """Select the next line, wrapping around. No-op on an empty list."""
        if not self.items:
            return
        current = self.selected_index or 0
        self._select((current + 1) % len(self.items))

    def prev_item(self) -> None:
        """Select the previous line, wrapping around. No-op on an empty list."""
        if not self.items:
            return
        current = self.selected_index or 0
        self._select((current - 1 + len(self.items)) % len(self.items))

    def refresh(self) -> None:
        """Re-fetch the current tab. Selection goes back to the first line."""
        self._load()

    def quit(self) -> None:
        self.should_quit = True
        self._notify()

    # =========================================================================
    # Fetch & Detail
    # =========================================================================

    def _select(self, index: int) -> None:
        self.selected_index = index
        self._update_detail()
        self._notify()

    def _update_detail(self) -> None:
        """Show the selected element when the payload has an items array."""
        items = payload_items(self._payload)
        if items is None or self.selected_index is None:
            return
        if 0 <= self.selected_index < len(items):
            self.detail = pretty_json(items[self.selected_index])

    def _load(self) -> None:
        """Fetch the current tab and rebuild items and detail."""
        self.loading = True
        self.error = None
        self._notify()

        endpoint = self.tab.endpoint
        try:
            body = self.client.get_text(endpoint)
        except FlexPriceError as e:
            logger.debug(f"Dashboard fetch of {endpoint} failed: {e}")
            self._clear()
            self.error = str(e)
        else:
            self._payload, self.items, self.detail = parse_body(body)
        finally:
            self.loading = False

        self.selected_index = 0 if self.items else None
        self._update_detail()
        self._notify()
