"""renderers subpackage: text and structured output for schema trees.

Both renderers satisfy ``json_shape.protocols.SchemaRenderer``.
"""

from __future__ import annotations

from json_shape.renderers.structured import StructuredRenderer, to_dict
from json_shape.renderers.text import TextRenderer

__all__ = ["StructuredRenderer", "TextRenderer", "to_dict"]
