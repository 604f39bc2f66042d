"""Tree subpackage for schema aggregation primitives.

Re-exports the public API for the tree module:
- SchemaNode: dataclass representing one node of the aggregated schema tree
- NodeKind: StrEnum of the three node kinds (FIELD, OBJECT, ARRAY)
- SchemaAggregator: folds decoded JSON objects into a SchemaNode tree
"""

from json_shape.tree.aggregator import JsonValue, SchemaAggregator
from json_shape.tree.nodes import NodeKind, SchemaNode

__all__ = ["JsonValue", "NodeKind", "SchemaAggregator", "SchemaNode"]
