"""TextRenderer: indented, human-readable listing of a schema tree.

Output shape for ``{"a": 1, "items": [{"id": 1}, {"id": 2}]}``::

    {
      a: 1
      items: [
        id: 2
      ]
    }

Containers print an opening marker line and a matching closing line; fields
print ``name: count``. The root and the items container of a nested array
print bare markers; a real empty key prints as ``"": ``. Indentation is
``node.depth * indent`` spaces.
"""

from __future__ import annotations

from json_shape.config import RenderConfig
from json_shape.tree.nodes import NodeKind, SchemaNode

__all__ = ["TextRenderer"]

_BRACKETS = {NodeKind.OBJECT: ("{", "}"), NodeKind.ARRAY: ("[", "]")}


class TextRenderer:
    """Depth-first, pre-order text rendering in stored child order.

    Example::

        renderer = TextRenderer(RenderConfig(indent=1, show_container_counts=True))
        print(renderer.render(root), end="")
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config: RenderConfig = config if config is not None else RenderConfig()

    def render(self, root: SchemaNode) -> str:
        """Render ``root`` and its subtree; the result ends with a newline."""
        lines: list[str] = []
        self._render_node(root, "", lines)
        return "\n".join(lines) + "\n"

    def _render_node(self, node: SchemaNode, label: str, lines: list[str]) -> None:
        pad = " " * (node.depth * self._config.indent)
        suffix = _conflict_suffix(node)

        if node.kind is NodeKind.FIELD:
            lines.append(f"{pad}{label}{node.count}{suffix}")
            return

        opening, closing = _BRACKETS[node.kind]
        count = f" {node.count}" if self._config.show_container_counts else ""
        lines.append(f"{pad}{label}{opening}{count}{suffix}")
        for child in node.children:
            self._render_node(child, _label(child.name), lines)
        if node.items is not None:
            self._render_node(node.items, "", lines)
        lines.append(f"{pad}{closing}")


def _label(name: str) -> str:
    return f"{name}: " if name else '"": '


def _conflict_suffix(node: SchemaNode) -> str:
    if not node.conflicts:
        return ""
    seen = ", ".join(f"{kind} x{times}" for kind, times in node.conflicts.items())
    return f" (also seen as: {seen})"
