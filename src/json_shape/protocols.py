"""SchemaRenderer Protocol for json-shape output formats.

Defines the structural interface all renderers must satisfy. Users can plug
in custom output formats without inheriting from any base class: any class
with a conformant ``render`` method passes ``isinstance`` checks.

Example::

    from json_shape.protocols import SchemaRenderer
    from json_shape.tree import SchemaNode

    class PathListRenderer:
        def render(self, root: SchemaNode) -> str:
            return "\\n".join(f"{p} {c}" for p, c in root.field_counts().items())

    assert isinstance(PathListRenderer(), SchemaRenderer)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_shape.tree.nodes import SchemaNode


@runtime_checkable
class SchemaRenderer(Protocol):
    """Structural protocol for schema tree renderers.

    The ``render`` method must:
    - Accept the root SchemaNode of a finished tree.
    - Return the complete rendering as a string.
    - Leave the tree unmodified, so repeated calls give identical output.
    """

    def render(self, root: SchemaNode) -> str: ...
