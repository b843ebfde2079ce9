# ccviz/traversal/snapshot.py
"""Observable traversal steps handed to observers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from ccviz.graph.store import VertexSnapshot


class StepKind(str, Enum):
    """Which transition produced a step."""

    START = "start"
    VISIT = "visit"
    SETTLE = "settle"
    COMPONENT_DONE = "component_done"
    COMPLETE = "complete"


@dataclass(frozen=True)
class Step:
    """One emitted frame: every vertex plus the cumulative run log.

    Attributes:
        index: 0-based position of this step in the run
        kind: Transition that produced the step
        vertices: Copy of all vertices, ordered by id
        log: Run log so far; strictly longer than the previous step's log
            except after a settle, which adds no line
        pause: Whether the driver waits the step delay after emitting
        vertex_id: Vertex the step is about, if any
    """

    index: int
    kind: StepKind
    vertices: Tuple[VertexSnapshot, ...]
    log: Tuple[str, ...]
    pause: bool = True
    vertex_id: Optional[int] = None


@dataclass(frozen=True)
class TraversalResult:
    """Terminal output of a run."""

    components: Tuple[Tuple[int, ...], ...] = field(default_factory=tuple)

    @property
    def total_components(self) -> int:
        return len(self.components)

    def as_dict(self) -> dict:
        return {
            "components": [list(component) for component in self.components],
            "totalComponents": self.total_components,
        }


StepCallback = Callable[[Sequence[VertexSnapshot], Sequence[str]], None]

__all__ = ["Step", "StepCallback", "StepKind", "TraversalResult"]
