"""
Command-line interface for jsontree-view.

Reads one JSON document from a file or stdin and opens it in a full-screen,
collapsible tree viewer.
"""

from __future__ import annotations

import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import Optional

import typer
from prompt_toolkit.input import Input, create_input
from rich.console import Console
from rich.markup import escape

from jv_app.api import ViewerSettings, load_settings, read_document_source
from jv_common.api import (
    JVError,
    TerminalUnavailableError,
    configure_logging,
    error_to_payload,
)
from jv_core.api import TreeNavigator, project
from jv_ui.presenters.tree import build_rich_tree
from jv_ui.tui.core import theme
from jv_ui.tui.screens.viewer_screen import ViewerScreen

logger = logging.getLogger(__name__)

TTY_DEVICE = "/dev/tty"

app = typer.Typer(
    help="Browse a JSON document as a navigable, collapsible tree.",
    add_completion=False,
)


def _error(message: str) -> None:
    Console(stderr=True).print(theme.presenter_message("error", escape(message)))


def _terminal_input(stack: ExitStack) -> Input | None:
    """Keyboard input for the viewer; stdin may already be consumed by the document."""
    if sys.stdin.isatty():
        return None
    try:
        tty = stack.enter_context(open(TTY_DEVICE, "r", encoding="utf-8"))
    except OSError as exc:
        raise TerminalUnavailableError(
            "No terminal available for keyboard input; use --print-tree in pipelines.",
            context={"device": TTY_DEVICE},
            cause=exc,
        ) from exc
    return create_input(stdin=tty)


def run_viewer(navigator: TreeNavigator, settings: ViewerSettings) -> int:
    """Run the interactive loop until the user quits; returns the exit status."""
    with ExitStack() as stack:
        screen = ViewerScreen(navigator, settings, input=_terminal_input(stack))
        logger.info("Viewer started (%d top-level rows)", len(navigator.hierarchy))
        exit_code = screen.run()
    logger.info("Viewer closed")
    return exit_code


@app.command()
def view(
    source: Optional[Path] = typer.Argument(
        None,
        help="JSON file to open; reads stdin when omitted or '-'.",
        show_default=False,
    ),
    title: Optional[str] = typer.Option(
        None, "--title", "-t", help="Frame title (env: JV_TITLE)."
    ),
    page_step: Optional[int] = typer.Option(
        None, "--page-step", help="Rows scrolled by PageUp/PageDown (env: JV_PAGE_STEP)."
    ),
    show_state: Optional[bool] = typer.Option(
        None,
        "--show-state/--no-show-state",
        help="Append the navigation state to the title (env: JV_SHOW_STATE).",
    ),
    mouse: Optional[bool] = typer.Option(
        None, "--mouse/--no-mouse", help="Map the mouse wheel to scrolling (env: JV_MOUSE)."
    ),
    print_tree: bool = typer.Option(
        False,
        "--print-tree",
        help="Print the fully expanded tree and exit instead of opening the viewer.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write logs to this file (env: JV_LOG_FILE)."
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Open a JSON document in the tree viewer."""
    configure_logging(
        debug=debug,
        log_file=str(log_file) if log_file else None,
        console=print_tree,
        force=True,
    )

    try:
        settings = load_settings(
            {
                "title": title,
                "page_step": page_step,
                "show_state": show_state,
                "mouse_support": mouse,
            }
        )
        document = read_document_source(source)
    except JVError as exc:
        logger.error("Startup failed: %s", exc, extra=error_to_payload(exc))
        _error(str(exc))
        raise typer.Exit(1)

    hierarchy = project(document)

    if print_tree:
        Console().print(build_rich_tree(hierarchy, title=settings.title))
        return

    try:
        exit_code = run_viewer(TreeNavigator(hierarchy), settings)
    except JVError as exc:
        logger.error("Viewer failed: %s", exc, extra=error_to_payload(exc))
        _error(str(exc))
        raise typer.Exit(1)
    raise typer.Exit(exit_code)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
