from __future__ import annotations

from typing import Mapping

RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}

INDICATOR_EXPANDED = "▾"
INDICATOR_COLLAPSED = "▸"
INDICATOR_LEAF = "•"
INDENT = "  "


def panel_title(text: str) -> str:
    return f"[{RICH_ACCENT_BOLD}]{text}[/{RICH_ACCENT_BOLD}]"


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)


def row_indicator(expandable: bool, expanded: bool) -> str:
    if not expandable:
        return INDICATOR_LEAF
    return INDICATOR_EXPANDED if expanded else INDICATOR_COLLAPSED


def prompt_toolkit_viewer_style() -> Mapping[str, str]:
    return {
        "selected": "bg:#aaaaaa fg:#000000 bold",
        "indicator": "fg:#0000aa",
        "row": "",
        "frame.border": "fg:#0000aa",
        "frame.label": "fg:#0000aa bold",
        "overlay": "bg:#222222 fg:#ffffff",
        "overlay.key": "fg:#00aaff bold",
        "status": "fg:#888888",
    }
