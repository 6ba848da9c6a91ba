"""
Rich rendering of the dashboard.

Builds a full-screen layout from a DashboardSession: header with the
connection info, a tab sidebar, the resource list (or the loading / error
message), a detail panel and a footer with the key shortcuts.
"""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from flexprice_cli.core.config import Credentials
from flexprice_cli.tui.dashboard import DashboardSession, SessionMode
from flexprice_cli.tui.theme import Theme

SHORTCUTS: list[tuple[str, str]] = [
    ("←/→ Tab", Theme.PRIMARY),
    ("↑/↓ Navigate", Theme.TEXT_DIM),
    ("r Refresh", Theme.ACCENT),
    ("q Quit", Theme.ERROR),
]


def render_header(credentials: Credentials) -> RenderableType:
    brand = Text.assemble(
        ("  ⚡ ", Theme.WARNING),
        ("FlexPrice", Style(color=Theme.PRIMARY, bold=True)),
        (" Dashboard", Theme.TEXT_DIM),
        "\n",
        ("     Usage-based billing, visualized.", Theme.TEXT_MUTED),
    )
    info = Text.assemble(
        ("API: ", Theme.TEXT_DIM),
        (credentials.api_url, Theme.ACCENT),
        "\n",
        ("Auth: ", Theme.TEXT_DIM),
        ("API Key" if credentials.api_key is not None else "JWT", Theme.INFO),
    )
    header = Layout()
    header.split_row(
        Layout(Panel(brand, border_style=Theme.BORDER), name="brand"),
        Layout(Panel(info, border_style=Theme.BORDER), name="info", size=44),
    )
    return header


def render_sidebar(session: DashboardSession) -> RenderableType:
    lines = Text()
    for index, tab in enumerate(session.tabs):
        if index == session.active_tab:
            lines.append(" ▸ ", style=Theme.PRIMARY)
            lines.append(tab.name, style=Style(color=Theme.PRIMARY, bold=True))
        else:
            lines.append("   ")
            lines.append(tab.name, style=Theme.TEXT_DIM)
        lines.append("\n")
    return Panel(lines, title="Navigate", title_align="left", border_style=Theme.BORDER)


def render_list(session: DashboardSession) -> RenderableType:
    """Exactly one of: loading indicator, error message, item list."""
    mode = session.mode
    title = f"{session.tab.name}"

    if mode is SessionMode.LOADING:
        body: RenderableType = Text("⏳ Loading...", style=Theme.WARNING)
    elif mode is SessionMode.ERROR:
        body = Text(f"✗ {session.error}", style=Theme.ERROR)
    else:
        title = f"{session.tab.name} ({len(session.items)})"
        rows = []
        for index, line in enumerate(session.items):
            if index == session.selected_index:
                style = Style(color=Theme.PRIMARY, bgcolor=Theme.SURFACE_HOVER, bold=True)
                rows.append(Text(f"▸ {line}", style=style, no_wrap=True, overflow="ellipsis"))
            else:
                rows.append(Text(f"  {line}", style=Theme.TEXT, no_wrap=True, overflow="ellipsis"))
        body = Group(*rows)

    return Panel(
        body,
        title=Text(title, style=Style(color=Theme.PRIMARY, bold=True)),
        title_align="left",
        border_style=Theme.BORDER,
    )


def render_detail(session: DashboardSession) -> RenderableType:
    return Panel(
        Text(session.detail, style=Theme.TEXT_DIM),
        title=Text("Detail", style=Style(color=Theme.ACCENT, bold=True)),
        title_align="left",
        border_style=Theme.BORDER,
    )


def render_footer() -> RenderableType:
    footer = Text("  ")
    for index, (label, color) in enumerate(SHORTCUTS):
        if index:
            footer.append("  │  ", style=Theme.BORDER)
        footer.append(label, style=color)
    return Panel(footer, border_style=Theme.BORDER)


def render(session: DashboardSession, credentials: Credentials) -> Layout:
    """
    Build the full dashboard layout.

    Args:
        session: Current session state
        credentials: Credentials shown in the header

    Returns:
        Layout ready for rich.live.Live
    """
    root = Layout()
    root.split_column(
        Layout(render_header(credentials), name="header", size=4),
        Layout(name="body"),
        Layout(render_footer(), name="footer", size=3),
    )
    root["body"].split_row(
        Layout(render_sidebar(session), name="sidebar", size=22),
        Layout(render_list(session), name="list", ratio=2),
        Layout(render_detail(session), name="detail", ratio=3),
    )
    return root
