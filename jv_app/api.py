"""Public API surface for jv_app."""

from jv_app.document import STDIN_SOURCE, load_document, read_document_source
from jv_app.settings import DEFAULT_TITLE, ViewerSettings, load_settings

__all__ = [
    "DEFAULT_TITLE",
    "STDIN_SOURCE",
    "ViewerSettings",
    "load_document",
    "load_settings",
    "read_document_source",
]
