"""Shared error taxonomy for jsontree-view."""

from __future__ import annotations

from typing import Any, Mapping


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class JVError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__


class DocumentLoadError(JVError):
    """Failure reading or decoding the input document."""


class ConfigurationError(JVError):
    """Failure due to invalid viewer settings."""


class TerminalUnavailableError(JVError):
    """No controlling terminal is available for keyboard input."""


class InvalidCursorError(JVError):
    """The cursor does not address a row of the visible list.

    Only a bookkeeping defect can produce this; user input cannot.
    """


def error_to_payload(error: JVError) -> dict[str, Any]:
    """Convert a JVError to a flat diagnostic payload."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
