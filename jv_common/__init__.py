"""Shared helpers for jsontree-view."""

from jv_common.api import JVError, configure_logging

__all__ = ["configure_logging", "JVError"]
