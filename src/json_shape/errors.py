"""Exception types raised by json-shape.

Input errors cover everything that can go wrong between a path on disk and a
decoded JSON object. KindConflictError is raised during aggregation when the
ERROR conflict policy is active.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_shape.tree.nodes import NodeKind

__all__ = [
    "DocumentNotFoundError",
    "DocumentReadError",
    "EmptyDocumentError",
    "InputError",
    "InvalidDocumentError",
    "KindConflictError",
    "NonObjectRootError",
]


class InputError(Exception):
    """Base class for failures to turn a file into a JSON object."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class DocumentNotFoundError(InputError):
    """The path does not exist or is not a regular file."""


class DocumentReadError(InputError):
    """The file exists but could not be read or is not valid UTF-8."""


class EmptyDocumentError(InputError):
    """The file is empty or contains only whitespace."""


class InvalidDocumentError(InputError):
    """The file contents are not valid JSON."""


class NonObjectRootError(InputError):
    """The decoded document is valid JSON but its top level is not an object."""


class KindConflictError(ValueError):
    """One name was observed with two different kinds in the same scope.

    Attributes:
        path:     Slash-joined path of the conflicting node.
        existing: Kind the node was created with.
        observed: Kind of the value that did not match.
    """

    def __init__(self, path: str, existing: NodeKind, observed: NodeKind) -> None:
        self.path = path
        self.existing = existing
        self.observed = observed
        super().__init__(
            f"kind conflict at {path or '/'!r}: first seen as {existing}, "
            f"now seen as {observed}"
        )
