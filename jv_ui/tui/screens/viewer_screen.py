from __future__ import annotations

import logging
from typing import Any, Callable

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import (
    ConditionalContainer,
    Float,
    FloatContainer,
    HSplit,
    Layout,
    Window,
)
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.mouse_events import MouseEvent, MouseEventType
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame

from jv_app.api import ViewerSettings
from jv_core.api import (
    EventOutcome,
    Ignored,
    InputEvent,
    KeyPress,
    LogicalKey,
    PointerScroll,
    RenderView,
    ScrollDirection,
    TreeNavigator,
    apply_event,
    build_view,
)
from jv_ui.tui.core import theme

logger = logging.getLogger(__name__)

# prompt_toolkit key name -> logical key
KEY_MAP: dict[str, LogicalKey] = {
    "q": LogicalKey.QUIT,
    "c-c": LogicalKey.QUIT,
    "enter": LogicalKey.TOGGLE,
    "space": LogicalKey.TOGGLE,
    "left": LogicalKey.LEFT,
    "right": LogicalKey.RIGHT,
    "up": LogicalKey.UP,
    "down": LogicalKey.DOWN,
    "home": LogicalKey.HOME,
    "end": LogicalKey.END,
    "pageup": LogicalKey.PAGE_UP,
    "pagedown": LogicalKey.PAGE_DOWN,
    "c": LogicalKey.OVERLAY,
}

HELP_ENTRIES: tuple[tuple[str, str], ...] = (
    ("q", "quit"),
    ("Enter / Space", "expand or collapse"),
    ("← / →", "collapse or go to parent / expand or go to child"),
    ("↑ / ↓", "previous / next row"),
    ("Home / End", "first / last row"),
    ("PgUp / PgDn", "scroll"),
    ("mouse wheel", "scroll"),
    ("c", "close this help"),
)

# frame border rows around the tree list
_CHROME_ROWS = 2


class _TreeControl(FormattedTextControl):
    """FormattedTextControl that forwards wheel events before the Window sees them."""

    def __init__(
        self,
        text: Callable[[], list[tuple[str, str]]],
        on_scroll: Callable[[ScrollDirection], None],
    ) -> None:
        super().__init__(text, focusable=True)
        self._on_scroll = on_scroll

    def mouse_handler(self, mouse_event: MouseEvent) -> Any:
        if mouse_event.event_type == MouseEventType.SCROLL_DOWN:
            self._on_scroll(ScrollDirection.DOWN)
            return None
        if mouse_event.event_type == MouseEventType.SCROLL_UP:
            self._on_scroll(ScrollDirection.UP)
            return None
        return super().mouse_handler(mouse_event)


class ViewerScreen:
    """Full-screen tree viewer driven by a TreeNavigator."""

    def __init__(
        self,
        navigator: TreeNavigator,
        settings: ViewerSettings,
        *,
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self._navigator = navigator
        self._settings = settings

        self.list_control = _TreeControl(self._render_rows, self._on_scroll)
        self.help_control = FormattedTextControl(self._render_help)
        self._kb = self._bindings()

        tree_frame = Frame(
            Window(self.list_control, wrap_lines=False, always_hide_cursor=True),
            title=lambda: self.current_view().title,
        )
        overlay = ConditionalContainer(
            Frame(
                Window(self.help_control, wrap_lines=True),
                title="Available commands",
                style="class:overlay",
            ),
            filter=Condition(lambda: self._navigator.state.overlay_visible),
        )
        root_container = FloatContainer(
            content=HSplit([tree_frame]),
            floats=[
                Float(
                    content=overlay,
                    width=self._overlay_width,
                    height=self._overlay_height,
                )
            ],
        )

        self._app: Application[int] = Application(
            layout=Layout(root_container, focused_element=self.list_control),
            key_bindings=self._kb,
            style=_viewer_style(),
            full_screen=True,
            mouse_support=settings.mouse_support,
            refresh_interval=settings.refresh_interval,
            input=input,
            output=output,
        )

    @property
    def app(self) -> Application[int]:
        return self._app

    def run(self) -> int:
        result = self._app.run()
        return 0 if result is None else result

    def current_view(self) -> RenderView:
        return build_view(
            self._navigator,
            title=self._settings.title,
            show_state=self._settings.show_state,
        )

    def dispatch(self, event: InputEvent) -> EventOutcome:
        """Apply one event and request a redraw; quit exits the application."""
        outcome = apply_event(self._navigator, event, page_step=self._settings.page_step)
        if outcome is EventOutcome.QUIT:
            self._exit(0)
        else:
            self._app.invalidate()
        return outcome

    def _bindings(self) -> KeyBindings:
        kb = KeyBindings()

        for key_name, logical in KEY_MAP.items():
            kb.add(key_name)(self._key_handler(logical))

        @kb.add(Keys.Any)
        def _(event: Any) -> None:
            self.dispatch(Ignored())

        return kb

    def _key_handler(self, logical: LogicalKey) -> Callable[[Any], None]:
        def handler(event: Any) -> None:
            self.dispatch(KeyPress(logical))

        return handler

    def _on_scroll(self, direction: ScrollDirection) -> None:
        self.dispatch(PointerScroll(direction))

    def _viewport_rows(self) -> int:
        return max(1, self._app.output.get_size().rows - _CHROME_ROWS)

    def _overlay_width(self) -> int:
        columns = self._app.output.get_size().columns
        return max(1, columns * self._settings.overlay_width_pct // 100)

    def _overlay_height(self) -> int:
        rows = self._app.output.get_size().rows
        return max(3, rows * self._settings.overlay_height_pct // 100)

    def _render_rows(self) -> list[tuple[str, str]]:
        self._navigator.set_viewport_height(self._viewport_rows())
        view = self.current_view()
        frags: list[tuple[str, str]] = []
        for row in view.visible_rows:
            style = "class:selected" if row.selected else "class:row"
            indicator = theme.row_indicator(row.expandable, row.expanded)
            frags.append((style, f"{theme.INDENT * row.depth}"))
            frags.append((f"{style} class:indicator", f"{indicator} "))
            frags.append((style, f"{row.label}\n"))
        return frags

    def _render_help(self) -> list[tuple[str, str]]:
        frags: list[tuple[str, str]] = []
        for keys, action in HELP_ENTRIES:
            frags.append(("class:overlay.key", f" {keys:<14}"))
            frags.append(("class:overlay", f" {action}\n"))
        return frags

    def _exit(self, result: int) -> None:
        if not self._app.is_running or self._app.is_done:
            return
        self._app.exit(result=result)


def _viewer_style() -> Style:
    return Style.from_dict(dict(theme.prompt_toolkit_viewer_style()))
