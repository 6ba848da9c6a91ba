"""
Keyboard input for the dashboard.

Reads single keypresses from a POSIX terminal in cbreak mode with a
bounded poll, and maps them onto DashboardSession transitions.
"""

from __future__ import annotations

import os
import select
import sys
import termios
import tty
from collections.abc import Callable
from typing import TextIO

from flexprice_cli.core.exceptions import FlexPriceError
from flexprice_cli.tui.dashboard import DashboardSession

# Escape sequence suffixes (after ESC) for the keys we care about
ESCAPE_SEQUENCES: dict[str, str] = {
    "[A": "up",
    "[B": "down",
    "[C": "right",
    "[D": "left",
    "OA": "up",
    "OB": "down",
    "OC": "right",
    "OD": "left",
    "[Z": "backtab",
}

SINGLE_KEYS: dict[str, str] = {
    "\t": "tab",
    "\r": "enter",
    "\n": "enter",
}

KEY_BINDINGS: dict[str, Callable[[DashboardSession], None]] = {
    "q": DashboardSession.quit,
    "esc": DashboardSession.quit,
    "tab": DashboardSession.next_tab,
    "l": DashboardSession.next_tab,
    "right": DashboardSession.next_tab,
    "backtab": DashboardSession.prev_tab,
    "h": DashboardSession.prev_tab,
    "left": DashboardSession.prev_tab,
    "down": DashboardSession.next_item,
    "j": DashboardSession.next_item,
    "up": DashboardSession.prev_item,
    "k": DashboardSession.prev_item,
    "r": DashboardSession.refresh,
}


def handle_key(session: DashboardSession, key: str) -> bool:
    """
    Apply the transition bound to a key.

    Args:
        session: Dashboard session
        key: Key name as returned by KeyReader.read_key

    Returns:
        True if the key was bound
    """
    action = KEY_BINDINGS.get(key)
    if action is None:
        return False
    action(session)
    return True


def decode_escape(sequence: str) -> str:
    """Name of the key for the bytes following ESC ("esc" when alone)."""
    if not sequence:
        return "esc"
    return ESCAPE_SEQUENCES.get(sequence, "unknown")


class KeyReader:
    """
    Context manager that puts the terminal in cbreak mode.

    Usage:
        with KeyReader() as keys:
            key = keys.read_key(timeout=0.1)
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdin
        self._fd: int | None = None
        self._saved: list | None = None

    def __enter__(self) -> KeyReader:
        fd = self.stream.fileno()
        if not os.isatty(fd):
            raise FlexPriceError("The dashboard needs an interactive terminal")
        self._fd = fd
        self._saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        return self

    def __exit__(self, *exc: object) -> None:
        if self._fd is not None and self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
        self._fd = None
        self._saved = None

    def _ready(self, timeout: float) -> bool:
        readable, _, _ = select.select([self._fd], [], [], timeout)
        return bool(readable)

    def _read_char(self) -> str:
        return os.read(self._fd, 1).decode("utf-8", errors="ignore")

    def read_key(self, timeout: float) -> str | None:
        """
        Wait up to ``timeout`` seconds for a keypress.

        Returns:
            Key name ("up", "tab", "q", ...) or None on timeout
        """
        if self._fd is None:
            raise RuntimeError("KeyReader used outside its context")
        if not self._ready(timeout):
            return None

        char = self._read_char()
        if char != "\x1b":
            return SINGLE_KEYS.get(char, char)

        sequence = ""
        while len(sequence) < 2 and self._ready(0.01):
            sequence += self._read_char()
        return decode_escape(sequence)
