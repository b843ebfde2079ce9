# ccviz/traversal/engine.py
"""Stepwise connected-components discovery by depth-first search."""

from __future__ import annotations

import asyncio
from typing import Generator, Iterator, List, Optional, Sequence, Tuple

from ccviz.config import TraversalConfig, VisitState
from ccviz.graph.store import GraphStore
from ccviz.traversal.snapshot import Step, StepCallback, StepKind, TraversalResult
from ccviz.utils.logger import get_logger

_log = get_logger("ccviz.traversal")

BANNER_START = "=== Starting Connected Components Algorithm ==="
BANNER_COMPLETE = "=== Algorithm Complete ==="


def format_component(index: int, members: Sequence[int]) -> str:
    """Log line for the component at 0-based ``index``."""
    return f"Component {index + 1}: [{', '.join(str(m) for m in members)}]"


class TraversalEngine:
    """Find connected components of a store while exposing every step.

    The store's topology is read-only for the engine; only vertex traversal
    state is written. Roots are taken in ascending id order and neighbors
    are explored in ascending index order, so the step sequence and the run
    log depend only on the vertex count and the edge set.
    """

    def __init__(self, store: GraphStore, config: TraversalConfig | None = None) -> None:
        self._store = store
        self._config = config or TraversalConfig()
        self._log_lines: List[str] = []
        self._step_index = 0

    @property
    def store(self) -> GraphStore:
        return self._store

    @property
    def log(self) -> Tuple[str, ...]:
        """Run log of the current (or latest) run."""
        return tuple(self._log_lines)

    # ────────────── step production ──────────────
    def _append(self, line: str) -> None:
        self._log_lines.append(line)
        _log.tag("DFS", line.strip(), level="debug")

    def _snapshot(self, kind: StepKind, *, pause: bool, vertex_id: Optional[int] = None) -> Step:
        step = Step(
            index=self._step_index,
            kind=kind,
            vertices=self._store.vertices,
            log=tuple(self._log_lines),
            pause=pause,
            vertex_id=vertex_id,
        )
        self._step_index += 1
        return step

    def _next_unvisited(self, index: int, cursor: int) -> Optional[int]:
        row = self._store.matrix[index]
        for j in range(cursor, self._store.n):
            if row[j] and self._store.vertex(j).visit_state is VisitState.UNVISITED:
                return j
        return None

    def _visit(self, index: int, component: List[int]) -> Step:
        self._store.mark_visiting(index)
        component.append(index + 1)
        self._append(f"  Visiting node {index + 1}")
        return self._snapshot(StepKind.VISIT, pause=True, vertex_id=index + 1)

    def _descend(
        self, root: int, component_index: int, component: List[int]
    ) -> Iterator[Step]:
        # frames are (vertex index, next neighbor index to examine)
        stack: List[Tuple[int, int]] = [(root, 0)]
        yield self._visit(root, component)
        while stack:
            index, cursor = stack[-1]
            nxt = self._next_unvisited(index, cursor)
            if nxt is None:
                stack.pop()
                self._store.settle(index, component_index)
                yield self._snapshot(
                    StepKind.SETTLE, pause=self._config.pause_on_settle, vertex_id=index + 1
                )
                continue
            stack[-1] = (index, nxt + 1)
            yield self._visit(nxt, component)
            stack.append((nxt, 0))

    def iter_steps(self) -> Generator[Step, None, TraversalResult]:
        """Run the search synchronously, yielding each observable step.

        Resets the store and the run log first. The generator's return value
        is the :class:`TraversalResult`.
        """
        self._store.reset()
        self._log_lines = []
        self._step_index = 0
        components: List[Tuple[int, ...]] = []

        self._append(BANNER_START)
        yield self._snapshot(StepKind.START, pause=True)

        for root in range(self._store.n):
            if self._store.vertex(root).visit_state is not VisitState.UNVISITED:
                continue
            component_index = len(components)
            members: List[int] = []
            self._append(f"Starting new component from node {root + 1}:")
            yield from self._descend(root, component_index, members)
            components.append(tuple(members))
            self._append(format_component(component_index, members))
            yield self._snapshot(StepKind.COMPONENT_DONE, pause=True)

        self._append(BANNER_COMPLETE)
        self._append(f"Total Connected Components: {len(components)}")
        for index, members in enumerate(components):
            self._append(format_component(index, members))
        yield self._snapshot(StepKind.COMPLETE, pause=False)

        return TraversalResult(components=tuple(components))

    # ────────────── drivers ──────────────
    async def find_components(
        self, on_step: StepCallback | None = None, delay_ms: float | None = None
    ) -> TraversalResult:
        """Drive :meth:`iter_steps`, pausing with ``asyncio.sleep`` between steps.

        ``on_step`` receives the vertex snapshot and the run log of every
        step, in order. Pausing steps are followed by a ``delay_ms`` sleep.
        """
        delay = self._config.delay_ms if delay_ms is None else float(delay_ms)
        if delay < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay}")

        steps = self.iter_steps()
        while True:
            try:
                step = next(steps)
            except StopIteration as stop:
                result: TraversalResult = stop.value
                break
            if on_step is not None:
                on_step(step.vertices, step.log)
            if step.pause:
                await asyncio.sleep(delay / 1000.0)

        _log.tag(
            "DFS",
            f"done: {result.total_components} components, {self._step_index} steps",
            level="debug",
        )
        return result

    def run(
        self, on_step: StepCallback | None = None, delay_ms: float | None = None
    ) -> TraversalResult:
        """Blocking wrapper around :meth:`find_components` for synchronous hosts."""
        return asyncio.run(self.find_components(on_step, delay_ms))

    def components(self) -> TraversalResult:
        """Run to completion without observers or pauses."""
        steps = self.iter_steps()
        while True:
            try:
                next(steps)
            except StopIteration as stop:
                return stop.value


__all__ = [
    "BANNER_COMPLETE",
    "BANNER_START",
    "TraversalEngine",
    "format_component",
]
