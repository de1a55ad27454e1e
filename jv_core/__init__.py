"""JSON-to-tree projection and navigation state machine."""

from jv_core.api import NavigationState, TreeNavigator, project

__all__ = ["NavigationState", "TreeNavigator", "project"]
