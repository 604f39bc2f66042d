"""Public API functions for json-shape.

This module provides the user-facing functions: summarize, summarize_many,
summarize_files, and render. Each call creates a fresh SchemaAggregator (or
renderer) so no state is shared between calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Literal

from json_shape.config import AggregatorConfig, RenderConfig
from json_shape.loader import load_document
from json_shape.renderers import StructuredRenderer, TextRenderer
from json_shape.tree.aggregator import SchemaAggregator
from json_shape.tree.nodes import SchemaNode

__all__ = ["render", "summarize", "summarize_files", "summarize_many"]

OutputFormat = Literal["text", "json"]


def _aggregator(config: AggregatorConfig | None) -> SchemaAggregator:
    return SchemaAggregator(config=config if config is not None else AggregatorConfig())


def summarize(
    document: dict[str, Any],
    config: AggregatorConfig | None = None,
) -> SchemaNode:
    """Return the schema tree of a single decoded JSON object.

    Args:
        document: Top-level JSON object (Python dict).
        config:   Aggregation settings. Defaults to ``AggregatorConfig()`` when None.

    Returns:
        The root SchemaNode (OBJECT, depth 0, count 1).
    """
    return _aggregator(config).summarize(document)


def summarize_many(
    documents: Iterable[dict[str, Any]],
    config: AggregatorConfig | None = None,
) -> SchemaNode:
    """Return one cumulative schema tree for several decoded JSON objects.

    The root count equals the number of documents.
    """
    return _aggregator(config).summarize_many(documents)


def summarize_files(
    paths: Iterable[str | Path],
    config: AggregatorConfig | None = None,
) -> SchemaNode:
    """Load each file with ``load_document`` and aggregate them in order.

    Files are read lazily, so an input error in a later file surfaces only
    after the earlier ones were aggregated.

    Raises:
        InputError: From ``load_document`` for the first unusable file.
    """
    return summarize_many((load_document(path) for path in paths), config=config)


def render(
    root: SchemaNode,
    fmt: OutputFormat = "text",
    config: RenderConfig | None = None,
) -> str:
    """Render a schema tree.

    Args:
        root:   Root of the tree to render.
        fmt:    "text" for the indented listing, "json" for structured output.
        config: Text rendering settings; also supplies the JSON indent.

    Raises:
        ValueError: If ``fmt`` is not a known format.
    """
    config = config if config is not None else RenderConfig()
    if fmt == "text":
        return TextRenderer(config).render(root)
    if fmt == "json":
        return StructuredRenderer(indent=config.indent).render(root)
    msg = f"unknown output format {fmt!r}, expected 'text' or 'json'"
    raise ValueError(msg)
