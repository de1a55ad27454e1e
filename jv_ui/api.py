"""Stable UI API surface."""

from __future__ import annotations

from jv_ui.cli import app, main
from jv_ui.presenters.tree import build_rich_tree
from jv_ui.tui.screens.viewer_screen import KEY_MAP, ViewerScreen

__all__ = [
    "KEY_MAP",
    "ViewerScreen",
    "app",
    "build_rich_tree",
    "main",
]
