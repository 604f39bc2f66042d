"""pytest plugin for json-shape.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import textwrap
from typing import Any

import pytest

from json_shape import AggregatorConfig, RenderConfig, render, summarize_many


@pytest.fixture(scope="session")
def assert_json_shape() -> Any:
    """Fixture that returns a callable shape asserter.

    The fixture is session-scoped because the returned callable is stateless
    (every call builds a fresh schema tree).

    Usage in tests::

        def test_payload_shape(assert_json_shape):
            assert_json_shape(
                {"items": [{"id": 1}, {"id": 2}]},
                '''
                {
                  items: [
                    id: 2
                  ]
                }
                ''',
            )

    Returns:
        A callable ``_assert(documents, expected, config=None, render_config=None) -> None``
        that raises ``AssertionError`` when the text rendering differs.
    """

    def _assert(
        documents: dict[str, Any] | list[dict[str, Any]],
        expected: str,
        config: AggregatorConfig | None = None,
        render_config: RenderConfig | None = None,
    ) -> None:
        """Assert that the documents summarize to the expected text rendering.

        Args:
            documents:     One decoded JSON object, or a list of them to be
                           aggregated into one cumulative schema.
            expected:      Expected text rendering. Common leading indentation
                           and surrounding blank lines are ignored.
            config:        Optional AggregatorConfig.
            render_config: Optional RenderConfig; the expected text must use
                           the same indent.

        Raises:
            AssertionError: When the renderings differ, with both shown.
        """
        docs = [documents] if isinstance(documents, dict) else documents
        root = summarize_many(docs, config=config)
        actual = render(root, config=render_config).strip()
        wanted = textwrap.dedent(expected).strip()
        if actual != wanted:
            raise AssertionError(
                f"JSON shape does not match\n"
                f"--- expected\n{wanted}\n"
                f"--- actual\n{actual}"
            )

    return _assert
