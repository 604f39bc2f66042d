"""Loader: turns a path on disk into a decoded top-level JSON object.

Checks run in order and each failure raises its own InputError subclass:
existence, readability, emptiness, JSON syntax, object-shaped root. A file
without a ``.json`` suffix only produces a warning.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from json_shape.errors import (
    DocumentNotFoundError,
    DocumentReadError,
    EmptyDocumentError,
    InvalidDocumentError,
    NonObjectRootError,
)

__all__ = ["load_document"]

_log = logging.getLogger(__name__)


def _json_type_name(value: Any) -> str:
    # bool before int/float: bool subclasses int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    if value is None:
        return "null"
    return type(value).__name__


def load_document(path: str | Path) -> dict[str, Any]:
    """Read and decode the JSON object stored at ``path``.

    Args:
        path: File to read. Expected to hold UTF-8 JSON (a BOM is tolerated).

    Returns:
        The decoded top-level object.

    Raises:
        DocumentNotFoundError: The path is missing or not a regular file.
        DocumentReadError:     The file could not be read or is not UTF-8.
        EmptyDocumentError:    The file is empty or whitespace only.
        InvalidDocumentError:  The contents are not valid JSON.
        NonObjectRootError:    The top-level value is not an object.
    """
    path = Path(path)
    if path.suffix != ".json":
        _log.warning("file extension %r of %s is not standard", path.suffix, path)

    if not path.is_file():
        raise DocumentNotFoundError(path, "no such file")

    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DocumentReadError(path, f"cannot read file: {exc.strerror or exc}") from exc

    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DocumentReadError(path, f"not valid UTF-8: {exc.reason}") from exc

    if not text.strip():
        raise EmptyDocumentError(path, "file is empty")

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})"
        raise InvalidDocumentError(path, msg) from exc

    if not isinstance(document, dict):
        msg = f"top-level value must be a JSON object, got {_json_type_name(document)}"
        raise NonObjectRootError(path, msg)

    _log.debug("loaded %s (%d bytes, %d top-level keys)", path, len(raw), len(document))
    return document
