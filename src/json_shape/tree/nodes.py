"""SchemaNode dataclass and NodeKind StrEnum for the aggregated schema tree.

A schema tree collapses every occurrence of a field path in one or more JSON
documents into a single node that carries an occurrence count. Children are
kept in first-seen order and are unique by name within their parent; a
name -> child side table makes lookups O(1) without disturbing that order.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto

__all__ = ["ITEMS_SEGMENT", "NodeKind", "SchemaNode", "escape_segment"]

# Path segment for the anonymous items container of an array. Escaped key
# segments never contain a "~" that is not followed by "0" or "1".
ITEMS_SEGMENT = "~[]"


def escape_segment(name: str) -> str:
    """Escape a key for use as one path segment ("~" -> "~0", "/" -> "~1")."""
    return name.replace("~", "~0").replace("/", "~1")


class NodeKind(StrEnum):
    """Enumeration of the three schema node kinds.

    - FIELD  -> "field"  : a key whose value was a scalar or null (leaf)
    - OBJECT -> "object" : a key whose value was a JSON object
    - ARRAY  -> "array"  : a key whose value was a JSON array
    """

    FIELD = auto()
    OBJECT = auto()
    ARRAY = auto()


@dataclass(slots=True)
class SchemaNode:
    """A node in the aggregated schema tree.

    Attributes:
        kind:       Which kind of node this is (see NodeKind). Never changes.
        name:       Key under which the node appears in its parent; empty for
                    the root and for anonymous items containers. An empty
                    name on a child is a real ``""`` key.
        depth:      Distance from the root (root = 0).
        count:      Number of times this node was observed in its parent scope.
        children:   Child nodes in first-seen order, unique by name. Only
                    OBJECT and ARRAY nodes may have children.
        items:      Anonymous ARRAY node aggregating arrays that appeared
                    directly as elements of this array. Kept apart from
                    ``children`` so it never shares a name with a key.
        conflicts:  Observations of this name whose kind differed from
                    ``kind``, tallied per observed kind. Only populated when
                    conflicts are recorded rather than rejected.
    """

    kind: NodeKind
    name: str = ""
    depth: int = 0
    count: int = 0
    children: list[SchemaNode] = field(default_factory=list)
    items: SchemaNode | None = None
    conflicts: dict[NodeKind, int] = field(default_factory=dict)
    _index: dict[str, SchemaNode] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.children and self.kind is NodeKind.FIELD:
            msg = f"FIELD node {self.name!r} cannot have children"
            raise TypeError(msg)
        if self.items is not None and self.kind is not NodeKind.ARRAY:
            msg = f"only ARRAY nodes have items, not {self.kind} {self.name!r}"
            raise TypeError(msg)
        for child in self.children:
            if child.name in self._index:
                msg = f"duplicate child name {child.name!r} under {self.name!r}"
                raise ValueError(msg)
            self._index[child.name] = child

    @property
    def is_container(self) -> bool:
        """True for OBJECT and ARRAY nodes."""
        return self.kind is not NodeKind.FIELD

    def find(self, name: str) -> SchemaNode | None:
        """Return the child called ``name``, or None if there is none."""
        return self._index.get(name)

    def add_child(self, child: SchemaNode) -> SchemaNode:
        """Append ``child`` after all existing children and return it.

        Raises:
            TypeError:  If this node is a FIELD.
            ValueError: If a child with the same name already exists.
        """
        if not self.is_container:
            msg = f"FIELD node {self.name!r} cannot have children"
            raise TypeError(msg)
        if child.name in self._index:
            msg = f"duplicate child name {child.name!r} under {self.name!r}"
            raise ValueError(msg)
        self.children.append(child)
        self._index[child.name] = child
        return child

    def record_conflict(self, observed: NodeKind, times: int = 1) -> None:
        self.conflicts[observed] = self.conflicts.get(observed, 0) + times

    def ensure_items(self) -> SchemaNode:
        """Return the items container, creating it (count 0) on first use.

        Raises:
            TypeError: If this node is not an ARRAY.
        """
        if self.kind is not NodeKind.ARRAY:
            msg = f"only ARRAY nodes have items, not {self.kind} {self.name!r}"
            raise TypeError(msg)
        if self.items is None:
            self.items = SchemaNode(kind=NodeKind.ARRAY, depth=self.depth + 1)
        return self.items

    def iter_children(self) -> Iterator[tuple[str, SchemaNode]]:
        """Yield ``(segment, child)`` for every child, then for the items node.

        Key segments are escaped with ``escape_segment``; the items container
        uses ``ITEMS_SEGMENT``.
        """
        for child in self.children:
            yield escape_segment(child.name), child
        if self.items is not None:
            yield ITEMS_SEGMENT, self.items

    def walk(self, path: str = "") -> Iterator[tuple[str, SchemaNode]]:
        """Yield ``(path, node)`` pairs in depth-first pre-order.

        Paths join escaped segments with "/" in the manner of JSON Pointer, so
        ``{"a/b": 1}`` gives "/a~1b" and never collides with ``{"a": {"b": 1}}``.
        The node this is called on gets ``path`` (the root defaults to "").
        """
        yield path, self
        for segment, child in self.iter_children():
            yield from child.walk(f"{path}/{segment}")

    def field_counts(self) -> dict[str, int]:
        """Map every descendant path to its occurrence count."""
        return {path: node.count for path, node in self.walk() if node is not self}
