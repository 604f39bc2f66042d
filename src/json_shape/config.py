"""AggregatorConfig, RenderConfig and KindConflictPolicy.

Both configs are frozen (immutable) dataclasses validated on construction.
KindConflictPolicy selects what happens when one name is observed with two
different kinds in the same scope: reject it, or record it on the node.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["AggregatorConfig", "KindConflictPolicy", "RenderConfig"]


class KindConflictPolicy(StrEnum):
    """How to treat a name seen as, say, an object once and a scalar later.

    - ERROR:  Raise ``KindConflictError`` at the first mismatch.
    - RECORD: Keep the first-seen kind, count the observation, and tally the
              mismatching kind in ``SchemaNode.conflicts``.
    """

    ERROR = auto()
    RECORD = auto()


@dataclass(frozen=True, slots=True)
class AggregatorConfig:
    """Immutable configuration for SchemaAggregator.

    Attributes:
        on_kind_conflict: Policy for kind mismatches under one name.
        max_depth: When set, no node deeper than this is created. Containers
            at exactly ``max_depth`` are still counted, their contents are not
            walked. None means unlimited.
    """

    on_kind_conflict: KindConflictPolicy = KindConflictPolicy.ERROR
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.on_kind_conflict, KindConflictPolicy):
            msg = f"on_kind_conflict must be a KindConflictPolicy, got {self.on_kind_conflict!r}"
            raise ValueError(msg)
        if self.max_depth is not None and self.max_depth < 0:
            msg = f"max_depth must be >= 0, got {self.max_depth}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable configuration for TextRenderer.

    Attributes:
        indent: Spaces per depth level (>= 0).
        show_container_counts: Append the occurrence count to the opening
            line of OBJECT and ARRAY nodes (``items: [ 3``).
    """

    indent: int = 2
    show_container_counts: bool = False

    def __post_init__(self) -> None:
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
