"""json-shape - occurrence-counted structure summaries for JSON documents."""

from __future__ import annotations

from json_shape.api import render, summarize, summarize_files, summarize_many
from json_shape.config import AggregatorConfig, KindConflictPolicy, RenderConfig
from json_shape.errors import InputError, KindConflictError
from json_shape.tree import NodeKind, SchemaAggregator, SchemaNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "AggregatorConfig",
    "InputError",
    "KindConflictError",
    "KindConflictPolicy",
    "NodeKind",
    "RenderConfig",
    "SchemaAggregator",
    "SchemaNode",
    "render",
    "summarize",
    "summarize_files",
    "summarize_many",
]
