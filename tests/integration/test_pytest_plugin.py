"""Integration tests for the json-shape pytest plugin.

These tests verify that the assert_json_shape fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-shape to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from json_shape import AggregatorConfig, KindConflictPolicy, RenderConfig


def test_fixture_passes_matching_shape(assert_json_shape: Any) -> None:
    assert_json_shape(
        {"items": [{"id": 1}, {"id": 2}, {"name": "x"}]},
        """
        {
          items: [
            id: 2
            name: 1
          ]
        }
        """,
    )


def test_fixture_fails_on_different_counts(assert_json_shape: Any) -> None:
    with pytest.raises(AssertionError, match="JSON shape does not match"):
        assert_json_shape({"items": [{"id": 1}]}, "{\n  items: [\n    id: 2\n  ]\n}")


def test_fixture_accepts_document_list(assert_json_shape: Any) -> None:
    assert_json_shape([{"a": 1}, {"a": 2, "b": None}], "{\n  a: 2\n  b: 1\n}")


def test_fixture_custom_configs(assert_json_shape: Any) -> None:
    assert_json_shape(
        [{"a": 1}, {"a": {}}],
        "{ 2\n a: 2 (also seen as: object x1)\n}",
        config=AggregatorConfig(on_kind_conflict=KindConflictPolicy.RECORD),
        render_config=RenderConfig(indent=1, show_container_counts=True),
    )


def test_fixture_error_message_contents(assert_json_shape: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_json_shape({"a": 1}, "{\n  b: 1\n}")
    message = str(exc_info.value)
    assert "--- expected" in message
    assert "--- actual" in message
    assert "a: 1" in message
    assert "b: 1" in message


def test_fixture_returns_callable(assert_json_shape: Any) -> None:
    assert callable(assert_json_shape)


def test_plugin_discovery() -> None:
    """Verify assert_json_shape appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_json_shape" in result.stdout, (
        f"assert_json_shape not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
