"""Viewer settings resolved from explicit overrides, environment and defaults."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from jv_common.api import (
    ConfigurationError,
    parse_bool_env,
    parse_int_env,
    parse_str_env,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "JSON tree viewer"

# field name -> (environment variable, parser)
_ENV_FIELDS: dict[str, tuple[str, Callable[[str | None], Any]]] = {
    "title": ("JV_TITLE", parse_str_env),
    "page_step": ("JV_PAGE_STEP", parse_int_env),
    "refresh_interval_ms": ("JV_REFRESH_MS", parse_int_env),
    "show_state": ("JV_SHOW_STATE", parse_bool_env),
    "mouse_support": ("JV_MOUSE", parse_bool_env),
}


class ViewerSettings(BaseModel):
    """Presentation settings for the interactive viewer."""

    title: str = Field(default=DEFAULT_TITLE, description="Frame title")
    page_step: int = Field(default=3, ge=1, description="Rows scrolled by PageUp/PageDown")
    refresh_interval_ms: int = Field(
        default=50, ge=10, description="Upper bound between two redraws"
    )
    overlay_width_pct: int = Field(
        default=60, ge=10, le=100, description="Help overlay width (percent)"
    )
    overlay_height_pct: int = Field(
        default=30, ge=10, le=100, description="Help overlay height (percent)"
    )
    show_state: bool = Field(
        default=False, description="Append the navigation state to the title"
    )
    mouse_support: bool = Field(default=True, description="Map the mouse wheel to scrolling")

    model_config = {"extra": "ignore"}

    @field_validator("title")
    @classmethod
    def _validate_title(cls, value: str) -> str:
        return value.strip() or DEFAULT_TITLE

    @property
    def refresh_interval(self) -> float:
        return self.refresh_interval_ms / 1000.0


def _read_env(environ: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for name, (env_key, parser) in _ENV_FIELDS.items():
        raw = environ.get(env_key)
        parsed = parser(raw)
        if parsed is None:
            if raw is not None and raw.strip():
                logger.warning("Ignoring unparseable %s=%r", env_key, raw)
            continue
        values[name] = parsed
    return values


def load_settings(
    overrides: Mapping[str, Any] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> ViewerSettings:
    """Build ViewerSettings.

    Priority: explicit overrides > environment variables > defaults. Override
    values of None are treated as unset.
    """
    data = _read_env(os.environ if environ is None else environ)
    data.update({key: val for key, val in (overrides or {}).items() if val is not None})
    try:
        return ViewerSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid viewer settings",
            context={"errors": [err["msg"] for err in exc.errors()]},
            cause=exc,
        ) from exc
