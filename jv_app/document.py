"""Read and decode the single JSON document shown by the viewer."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import IO

from jv_common.api import DocumentLoadError
from jv_core.api import JsonValue

logger = logging.getLogger(__name__)

STDIN_SOURCE = "<stdin>"


def _reject_constant(name: str) -> None:
    # NaN, Infinity and -Infinity are Python extensions, not JSON
    raise ValueError(f"{name} is not a valid JSON value")


def load_document(stream: IO[str], *, source: str = STDIN_SOURCE) -> JsonValue:
    """Read the whole stream and decode it as JSON.

    Raises:
        DocumentLoadError: If the stream cannot be read, is empty, or does not
            hold valid JSON text.
    """
    try:
        text = stream.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(
            f"Could not read {source}: {exc}",
            context={"source": source},
            cause=exc,
        ) from exc

    if not text.strip():
        raise DocumentLoadError(
            f"No JSON document in {source}", context={"source": source}
        )

    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(
            f"Invalid JSON in {source}: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            context={"source": source, "line": exc.lineno, "column": exc.colno},
            cause=exc,
        ) from exc
    except ValueError as exc:
        raise DocumentLoadError(
            f"Invalid JSON in {source}: {exc}",
            context={"source": source},
            cause=exc,
        ) from exc
    except RecursionError as exc:
        raise DocumentLoadError(
            f"Invalid JSON in {source}: document is nested too deeply to decode",
            context={"source": source},
            cause=exc,
        ) from exc

    logger.debug(
        "Loaded document from %s (%d chars, root=%s)",
        source,
        len(text),
        type(value).__name__,
    )
    return value


def read_document_source(path: Path | None) -> JsonValue:
    """Load from a file path, or from stdin when path is None or ``-``."""
    if path is None or str(path) == "-":
        return load_document(sys.stdin, source=STDIN_SOURCE)

    target = Path(path).expanduser()
    try:
        with target.open("r", encoding="utf-8") as handle:
            return load_document(handle, source=str(target))
    except FileNotFoundError as exc:
        raise DocumentLoadError(
            f"Input file not found: {target}",
            context={"source": str(target)},
            cause=exc,
        ) from exc
    except OSError as exc:
        raise DocumentLoadError(
            f"Could not open {target}: {exc.strerror or exc}",
            context={"source": str(target)},
            cause=exc,
        ) from exc
