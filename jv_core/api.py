"""Public API surface for jv_core."""

from jv_core.events import (
    DEFAULT_PAGE_STEP,
    EventOutcome,
    Ignored,
    InputEvent,
    KeyPress,
    LogicalKey,
    PointerScroll,
    ScrollDirection,
    apply_event,
)
from jv_core.models import (
    ROOT,
    Address,
    ArrayIndex,
    Node,
    ObjectKey,
    Path,
    RootAddress,
    format_path,
)
from jv_core.navigation import FlatRow, NavigationState, TreeNavigator
from jv_core.projector import Hierarchy, JsonValue, iter_paths, project, render_scalar
from jv_core.view import RenderView, VisibleRow, build_view, describe_state

__all__ = [
    "Address",
    "ArrayIndex",
    "DEFAULT_PAGE_STEP",
    "EventOutcome",
    "FlatRow",
    "Hierarchy",
    "Ignored",
    "InputEvent",
    "JsonValue",
    "KeyPress",
    "LogicalKey",
    "NavigationState",
    "Node",
    "ObjectKey",
    "Path",
    "PointerScroll",
    "ROOT",
    "RenderView",
    "RootAddress",
    "ScrollDirection",
    "TreeNavigator",
    "VisibleRow",
    "apply_event",
    "build_view",
    "describe_state",
    "format_path",
    "iter_paths",
    "project",
    "render_scalar",
]
