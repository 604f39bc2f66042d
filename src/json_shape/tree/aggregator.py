"""SchemaAggregator: folds decoded JSON documents into a SchemaNode tree.

Uses recursive dispatch over JSON objects and arrays. Every key of an object
becomes a child node of the current container (found by name or created on
first sight) and its count is incremented. Arrays are the interesting case:
each object element is aggregated on its own into a detached scratch node,
whose children are then merged into the array node so that a field shared
by N elements ends up as one child with count N.

Paths used in error messages are the ones ``SchemaNode.walk`` yields: root is
"", each level appends "/" plus the escaped key, and the items container of
an array appends ``ITEMS_SEGMENT``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from json_shape.config import AggregatorConfig, KindConflictPolicy
from json_shape.errors import KindConflictError
from json_shape.tree.nodes import ITEMS_SEGMENT, NodeKind, SchemaNode, escape_segment

__all__ = ["JsonValue", "SchemaAggregator"]

_log = logging.getLogger(__name__)

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


def _kind_of(value: Any) -> NodeKind:
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, list):
        return NodeKind.ARRAY
    return NodeKind.FIELD


@dataclass
class SchemaAggregator:
    """Builds and updates schema trees from decoded JSON objects.

    The aggregator holds no tree state of its own: every call works on the
    node it is given, so one instance can serve any number of sessions.
    Calls into the same tree must be sequential.

    Example::

        aggregator = SchemaAggregator()
        root = aggregator.summarize({"items": [{"id": 1}, {"id": 2}, {"name": "x"}]})
        # root OBJECT -> ARRAY("items", count=1) -> [FIELD("id", 2), FIELD("name", 1)]
    """

    config: AggregatorConfig = field(default_factory=AggregatorConfig)

    def new_root(self) -> SchemaNode:
        """Create the root of a new aggregation session (count 1, depth 0)."""
        return SchemaNode(kind=NodeKind.OBJECT, name="", depth=0, count=1)

    def summarize(self, document: dict[str, Any]) -> SchemaNode:
        """Aggregate a single document into a fresh root and return it."""
        root = self.new_root()
        self.aggregate(document, root)
        return root

    def summarize_many(self, documents: Iterable[dict[str, Any]]) -> SchemaNode:
        """Aggregate documents one after another into one cumulative root.

        The root's count ends up equal to the number of documents, so
        aggregating the same document twice doubles every count in the tree.
        An empty iterable yields a bare root.
        """
        root = self.new_root()
        seen = 0
        for document in documents:
            if seen:
                root.count += 1
            self.aggregate(document, root)
            seen += 1
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(
                "aggregated %d document(s) into %d node(s)",
                seen,
                sum(1 for _ in root.walk()),
            )
        return root

    def aggregate(self, value: dict[str, Any], into: SchemaNode, path: str = "") -> None:
        """Walk ``value`` and update ``into`` and its descendants in place.

        Args:
            value: A decoded JSON object (Python dict).
            into:  The container node to aggregate into, usually a root from
                   ``new_root()``. Its own count is left to the caller.
            path:  Path of ``into``, used in conflict messages. Defaults to "".

        Raises:
            TypeError:         If ``value`` is not a dict or ``into`` is a FIELD.
            KindConflictError: Under the ERROR policy, when a name is seen with
                               a kind different from its existing node.

        A KindConflictError is raised at the first mismatch, after earlier
        members of ``value`` were already counted. The tree under ``into`` is
        left partly updated and should be discarded.
        """
        if not isinstance(value, dict):
            msg = f"aggregate() expects a JSON object, got {type(value).__name__}"
            raise TypeError(msg)
        if not into.is_container:
            msg = f"cannot aggregate into FIELD node {into.name!r}"
            raise TypeError(msg)
        self._walk_object(value, into, path)

    # ------------------------------------------------------------------
    # Walk
    # ------------------------------------------------------------------

    def _may_descend(self, container: SchemaNode) -> bool:
        max_depth = self.config.max_depth
        return max_depth is None or container.depth < max_depth

    def _walk_object(self, obj: dict[str, Any], container: SchemaNode, path: str) -> None:
        if not self._may_descend(container):
            return
        for key, value in obj.items():
            child_path = f"{path}/{escape_segment(key)}"
            child = self._observe(container, key, _kind_of(value), child_path)
            if child is None:
                continue
            if child.kind is NodeKind.OBJECT:
                self._walk_object(value, child, child_path)
            elif child.kind is NodeKind.ARRAY:
                self._walk_array(value, child, child_path)

    def _walk_array(self, arr: list[Any], container: SchemaNode, path: str) -> None:
        if not self._may_descend(container):
            return
        for item in arr:
            if isinstance(item, dict):
                # Same depth as the container: adopted children must sit one
                # level below the array node.
                scratch = SchemaNode(kind=NodeKind.OBJECT, depth=container.depth)
                self._walk_object(item, scratch, path)
                self._merge(container, scratch, path)
            elif isinstance(item, list):
                nested = container.ensure_items()
                nested.count += 1
                self._walk_array(item, nested, f"{path}/{ITEMS_SEGMENT}")
            # scalar elements carry no fields

    def _observe(
        self, container: SchemaNode, name: str, kind: NodeKind, path: str
    ) -> SchemaNode | None:
        """Find-or-create ``name`` under ``container`` and count one observation.

        Returns the node to descend into, or None when the observation was a
        recorded kind conflict.
        """
        node = container.find(name)
        if node is None:
            node = container.add_child(
                SchemaNode(kind=kind, name=name, depth=container.depth + 1)
            )
        elif node.kind is not kind:
            self._conflict(node, kind, path)
            node.count += 1
            return None
        node.count += 1
        return node

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------

    def _merge(self, target: SchemaNode, scratch: SchemaNode, path: str) -> None:
        """Fold the children of a detached scratch node into ``target``.

        Names already present gain the scratch node's count (1 for a direct
        child of one element) and container pairs of the same kind merge
        recursively. New names are adopted as-is, appended after the existing
        children in scratch order.
        Items containers of nested arrays merge the same way.
        """
        for incoming in scratch.children:
            child_path = f"{path}/{escape_segment(incoming.name)}"
            existing = target.find(incoming.name)
            if existing is None:
                target.add_child(incoming)
                continue
            if existing.kind is not incoming.kind:
                self._conflict(existing, incoming.kind, child_path, incoming.count)
                existing.count += incoming.count
                continue
            existing.count += incoming.count
            for kind, times in incoming.conflicts.items():
                existing.record_conflict(kind, times)
            if existing.is_container:
                self._merge(existing, incoming, child_path)
        if scratch.items is not None:
            self._merge_items(target, scratch.items, f"{path}/{ITEMS_SEGMENT}")

    def _merge_items(self, target: SchemaNode, incoming: SchemaNode, path: str) -> None:
        if target.items is None:
            target.items = incoming
            return
        target.items.count += incoming.count
        self._merge(target.items, incoming, path)

    def _conflict(
        self, node: SchemaNode, observed: NodeKind, path: str, times: int = 1
    ) -> None:
        if self.config.on_kind_conflict is KindConflictPolicy.ERROR:
            raise KindConflictError(path, node.kind, observed)
        _log.debug("kind conflict at %r: %s seen as %s", path, node.kind, observed)
        node.record_conflict(observed, times)
