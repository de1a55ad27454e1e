"""Public API surface for jv_common."""

from jv_common.config.env import parse_bool_env, parse_int_env, parse_str_env
from jv_common.errors import (
    ConfigurationError,
    DocumentLoadError,
    InvalidCursorError,
    JVError,
    TerminalUnavailableError,
    error_to_payload,
)
from jv_common.logging import configure_logging

__all__ = [
    "ConfigurationError",
    "DocumentLoadError",
    "InvalidCursorError",
    "JVError",
    "TerminalUnavailableError",
    "configure_logging",
    "error_to_payload",
    "parse_bool_env",
    "parse_int_env",
    "parse_str_env",
]
