"""Connected-components visualizer: observable depth-first search over a small graph."""

from __future__ import annotations

from ccviz.config import Settings, VisitState, get_settings
from ccviz.graph.store import Edge, GraphStore, VertexSnapshot
from ccviz.traversal.engine import TraversalEngine
from ccviz.traversal.snapshot import Step, StepKind, TraversalResult

__all__ = [
    "Edge",
    "GraphStore",
    "Settings",
    "Step",
    "StepKind",
    "TraversalEngine",
    "TraversalResult",
    "VertexSnapshot",
    "VisitState",
    "get_settings",
]
