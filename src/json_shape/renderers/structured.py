"""StructuredRenderer: machine-readable JSON rendering of a schema tree."""

from __future__ import annotations

import json
from typing import Any

from json_shape.tree.nodes import SchemaNode

__all__ = ["StructuredRenderer", "to_dict"]


def to_dict(node: SchemaNode) -> dict[str, Any]:
    """Convert ``node`` and its subtree to plain JSON-compatible dicts.

    ``items`` is only present on arrays that held nested arrays, and
    ``conflicts`` only on nodes that recorded any.
    """
    out: dict[str, Any] = {
        "name": node.name,
        "kind": str(node.kind),
        "depth": node.depth,
        "count": node.count,
        "children": [to_dict(child) for child in node.children],
    }
    if node.items is not None:
        out["items"] = to_dict(node.items)
    if node.conflicts:
        out["conflicts"] = {str(kind): times for kind, times in node.conflicts.items()}
    return out


class StructuredRenderer:
    """Renders the tree as a JSON document, one object per node.

    Args:
        indent: Passed to ``json.dumps``. None produces a single line.
    """

    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    def render(self, root: SchemaNode) -> str:
        return json.dumps(to_dict(root), indent=self._indent, ensure_ascii=False) + "\n"
