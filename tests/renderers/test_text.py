"""Tests for TextRenderer: markers, indentation, counts and purity."""

from __future__ import annotations

import pytest

from json_shape.config import AggregatorConfig, KindConflictPolicy, RenderConfig
from json_shape.protocols import SchemaRenderer
from json_shape.renderers import TextRenderer, to_dict
from json_shape.tree import SchemaAggregator, SchemaNode


@pytest.fixture
def renderer() -> TextRenderer:
    return TextRenderer()


def _summarize(document: dict) -> SchemaNode:  # type: ignore[type-arg]
    return SchemaAggregator().summarize(document)


class TestMarkers:
    """Opening/closing lines for containers and name: count for fields."""

    def test_flat_and_nested_object(self, renderer: TextRenderer) -> None:
        out = renderer.render(_summarize({"a": 1, "b": {"c": 2}}))
        assert out == "{\n  a: 1\n  b: {\n    c: 1\n  }\n}\n"

    def test_empty_object_has_only_markers(self, renderer: TextRenderer) -> None:
        out = renderer.render(_summarize({}))
        assert out.splitlines() == ["{", "}"]

    def test_array_uses_square_brackets(self, renderer: TextRenderer) -> None:
        out = renderer.render(_summarize({"items": [{"id": 1}, {"id": 2}, {"name": "x"}]}))
        assert out.splitlines() == [
            "{",
            "  items: [",
            "    id: 2",
            "    name: 1",
            "  ]",
            "}",
        ]

    def test_anonymous_nested_array_is_bare(self, renderer: TextRenderer) -> None:
        out = renderer.render(_summarize({"m": [[{"a": 1}]]}))
        assert out.splitlines() == [
            "{",
            "  m: [",
            "    [",
            "      a: 1",
            "    ]",
            "  ]",
            "}",
        ]

    def test_empty_key_is_quoted(self, renderer: TextRenderer) -> None:
        out = renderer.render(_summarize({"": {"x": 1}, "f": {"": 2}}))
        assert out.splitlines() == [
            "{",
            '  "": {',
            "    x: 1",
            "  }",
            "  f: {",
            '    "": 1',
            "  }",
            "}",
        ]

    def test_nested_array_follows_element_fields(self, renderer: TextRenderer) -> None:
        out = renderer.render(_summarize({"m": [[{"a": 1}], {"": 1}, {"b": 1}]}))
        assert out.splitlines() == [
            "{",
            "  m: [",
            '    "": 1',
            "    b: 1",
            "    [",
            "      a: 1",
            "    ]",
            "  ]",
            "}",
        ]

    def test_ends_with_single_newline(self, renderer: TextRenderer) -> None:
        out = renderer.render(_summarize({"a": 1}))
        assert out.endswith("}\n")
        assert not out.endswith("\n\n")


class TestIndentation:
    """Indentation is node.depth * indent spaces."""

    def test_custom_indent(self) -> None:
        out = TextRenderer(RenderConfig(indent=4)).render(_summarize({"a": {"b": 1}}))
        assert out.splitlines() == ["{", "    a: {", "        b: 1", "    }", "}"]

    def test_zero_indent(self) -> None:
        out = TextRenderer(RenderConfig(indent=0)).render(_summarize({"a": {"b": 1}}))
        assert out.splitlines() == ["{", "a: {", "b: 1", "}", "}"]

    def test_every_line_matches_depth(self, renderer: TextRenderer) -> None:
        root = _summarize({"x": [{"y": {"z": [[{"w": 1}]]}}]})
        lines = renderer.render(root).splitlines()
        max_depth = max(node.depth for _, node in root.walk())
        widths = {len(line) - len(line.lstrip(" ")) for line in lines}
        assert widths == {2 * d for d in range(max_depth + 1)}


class TestCounts:
    """Optional container counts and recorded kind conflicts."""

    def test_container_counts(self) -> None:
        renderer = TextRenderer(RenderConfig(indent=1, show_container_counts=True))
        root = SchemaAggregator().summarize_many(
            [{"items": [{"id": 1}, {"id": 2}]}, {"items": []}]
        )
        assert renderer.render(root).splitlines() == [
            "{ 2",
            " items: [ 2",
            "  id: 2",
            " ]",
            "}",
        ]

    def test_conflicts_are_annotated(self, renderer: TextRenderer) -> None:
        aggregator = SchemaAggregator(
            AggregatorConfig(on_kind_conflict=KindConflictPolicy.RECORD)
        )
        root = aggregator.summarize_many([{"a": 1}, {"a": {"b": 1}}, {"a": []}])
        assert renderer.render(root).splitlines() == [
            "{",
            "  a: 3 (also seen as: object x1, array x1)",
            "}",
        ]


class TestPurity:
    """Rendering never changes the tree and is repeatable."""

    def test_idempotent(self, renderer: TextRenderer) -> None:
        root = _summarize({"items": [{"a": {"x": 1}}, {"a": {"y": 2}}]})
        assert renderer.render(root) == renderer.render(root)

    def test_does_not_mutate(self, renderer: TextRenderer) -> None:
        root = _summarize({"items": [{"a": {"x": 1}}, {"a": {"y": 2}}], "n": None})
        before = to_dict(root)
        renderer.render(root)
        assert to_dict(root) == before

    def test_satisfies_protocol(self, renderer: TextRenderer) -> None:
        assert isinstance(renderer, SchemaRenderer)
