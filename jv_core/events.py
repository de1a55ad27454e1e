"""Discrete input events and their effect on a TreeNavigator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from jv_core.navigation import TreeNavigator

logger = logging.getLogger(__name__)

DEFAULT_PAGE_STEP = 3


class LogicalKey(str, Enum):
    QUIT = "quit"
    TOGGLE = "toggle"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    OVERLAY = "overlay"


class ScrollDirection(str, Enum):
    UP = "up"
    DOWN = "down"


class EventOutcome(str, Enum):
    CONTINUE = "continue"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyPress:
    key: LogicalKey


@dataclass(frozen=True)
class PointerScroll:
    direction: ScrollDirection
    amount: int = 1


@dataclass(frozen=True)
class Ignored:
    """Any input the viewer does not react to."""


InputEvent = Union[KeyPress, PointerScroll, Ignored]


def apply_event(
    navigator: TreeNavigator,
    event: InputEvent,
    *,
    page_step: int = DEFAULT_PAGE_STEP,
) -> EventOutcome:
    """Apply one input event to the navigator.

    Returns EventOutcome.QUIT for the quit key; every other event, including
    unrecognized ones, continues the loop.
    """
    if isinstance(event, PointerScroll):
        if event.direction is ScrollDirection.DOWN:
            navigator.scroll_down(event.amount)
        else:
            navigator.scroll_up(event.amount)
        return EventOutcome.CONTINUE

    if not isinstance(event, KeyPress):
        return EventOutcome.CONTINUE

    key = event.key
    if key is LogicalKey.QUIT:
        logger.debug("Quit requested")
        return EventOutcome.QUIT

    handlers = {
        LogicalKey.TOGGLE: navigator.toggle_selected,
        LogicalKey.LEFT: navigator.move_left,
        LogicalKey.RIGHT: navigator.move_right,
        LogicalKey.UP: navigator.move_up,
        LogicalKey.DOWN: navigator.move_down,
        LogicalKey.HOME: navigator.select_first,
        LogicalKey.END: navigator.select_last,
        LogicalKey.PAGE_UP: lambda: navigator.scroll_up(page_step),
        LogicalKey.PAGE_DOWN: lambda: navigator.scroll_down(page_step),
        LogicalKey.OVERLAY: navigator.toggle_overlay,
    }
    handler = handlers.get(key)
    if handler is not None:
        handler()
    return EventOutcome.CONTINUE
