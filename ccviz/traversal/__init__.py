"""Observable depth-first traversal."""

from ccviz.traversal.engine import TraversalEngine, format_component
from ccviz.traversal.snapshot import Step, StepCallback, StepKind, TraversalResult

__all__ = [
    "Step",
    "StepCallback",
    "StepKind",
    "TraversalEngine",
    "TraversalResult",
    "format_component",
]
