# ccviz/graph/store.py
"""Graph store: vertex set, symmetric adjacency and per-vertex traversal state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from numbers import Integral
from typing import List, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from ccviz.config import Settings, VisitState, get_settings
from ccviz.graph.layout import Position, place_nodes
from ccviz.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class VertexSnapshot:
    """Immutable copy of one vertex at a single instant."""

    id: int
    position: Position
    visit_state: VisitState = VisitState.UNVISITED
    component_index: Optional[int] = None

    @property
    def settled(self) -> bool:
        return self.visit_state is VisitState.SETTLED


@dataclass(frozen=True, slots=True, eq=False)
class Edge:
    """Undirected edge between two distinct 1-based vertex ids.

    ``u``/``v`` keep the insertion orientation for display; equality and
    hashing use the unordered :attr:`key`.
    """

    u: int
    v: int

    @property
    def key(self) -> Tuple[int, int]:
        return (self.u, self.v) if self.u < self.v else (self.v, self.u)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.u, self.v)


def _check_size(n: object) -> int:
    if isinstance(n, bool) or not isinstance(n, Integral) or n <= 0:
        raise ValueError(f"vertex count must be a positive integer, got {n!r}")
    return int(n)


class GraphStore:
    """Owns vertices, the deduplicated edge set and the adjacency matrix.

    Topology changes only through :meth:`add_edge` and :meth:`generate_random`.
    Traversal state changes only through :meth:`mark_visiting`,
    :meth:`settle` and :meth:`reset`, which keep ``component_index`` set
    exactly when a vertex is settled.
    """

    def __init__(
        self,
        n: int,
        *,
        positions: Sequence[Position] | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._n = _check_size(n)
        if positions is None:
            positions = [(0.0, 0.0)] * self._n
        elif len(positions) != self._n:
            raise ValueError(f"expected {self._n} positions, got {len(positions)}")
        self._rng = rng if rng is not None else np.random.default_rng()
        self._vertices: List[VertexSnapshot] = [
            VertexSnapshot(id=i + 1, position=(float(x), float(y)))
            for i, (x, y) in enumerate(positions)
        ]
        self._matrix: npt.NDArray[np.int8] = np.zeros((self._n, self._n), dtype=np.int8)
        self._edges: List[Edge] = []
        self._edge_keys: set[Tuple[int, int]] = set()

    @classmethod
    def create(
        cls,
        n: int,
        *,
        settings: Settings | None = None,
        rng: np.random.Generator | None = None,
    ) -> "GraphStore":
        """Build a store with laid-out positions and a seeded random source."""
        cfg = settings or get_settings()
        size = _check_size(n)
        rng = rng if rng is not None else cfg.graph.make_rng()
        positions = place_nodes(size, rng, cfg.layout)
        return cls(size, positions=positions, rng=rng)

    # ────────────── read views ──────────────
    @property
    def n(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    @property
    def vertices(self) -> Tuple[VertexSnapshot, ...]:
        return tuple(self._vertices)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def matrix(self) -> npt.NDArray[np.int8]:
        """Read-only view of the adjacency matrix."""
        view = self._matrix.view()
        view.flags.writeable = False
        return view

    def vertex(self, index: int) -> VertexSnapshot:
        return self._vertices[index]

    def neighbors(self, index: int) -> List[int]:
        """0-based indices adjacent to ``index``, ascending."""
        return [int(j) for j in np.flatnonzero(self._matrix[index])]

    def is_consistent(self) -> bool:
        """Matrix symmetric, zero diagonal and in agreement with the edge set."""
        expected = np.zeros_like(self._matrix)
        for a, b in self._edge_keys:
            expected[a - 1, b - 1] = expected[b - 1, a - 1] = 1
        return bool(np.array_equal(expected, self._matrix))

    # ────────────── topology ──────────────
    def _valid_id(self, vertex_id: object) -> bool:
        return (
            isinstance(vertex_id, Integral)
            and not isinstance(vertex_id, bool)
            and 1 <= vertex_id <= self._n
        )

    def add_edge(self, u: int, v: int) -> bool:
        """Add edge {u, v}; out-of-range ids and self-loops are ignored.

        Returns True when a new edge was recorded.
        """
        if not (self._valid_id(u) and self._valid_id(v)) or u == v:
            return False
        u, v = int(u), int(v)
        self._matrix[u - 1, v - 1] = 1
        self._matrix[v - 1, u - 1] = 1
        key = (u, v) if u < v else (v, u)
        if key in self._edge_keys:
            return False
        self._edge_keys.add(key)
        self._edges.append(Edge(u, v))
        return True

    def clear_edges(self) -> None:
        self._matrix.fill(0)
        self._edges.clear()
        self._edge_keys.clear()

    def generate_random(self, rng: np.random.Generator | None = None) -> int:
        """Replace the edge set with a random one; returns the edge count.

        The target count is drawn uniformly from ``[n - 1, min(n(n-1)/2, 2n)]``
        and that many distinct pairs are taken from a shuffled list of all
        pairs. Connectivity is not enforced.
        """
        rng = rng if rng is not None else self._rng
        self.clear_edges()
        n = self._n
        min_edges = n - 1
        max_edges = min(n * (n - 1) // 2, 2 * n)
        target = int(rng.integers(min_edges, max_edges + 1))

        pairs = [(i, j) for i in range(1, n + 1) for j in range(i + 1, n + 1)]
        rng.shuffle(pairs)
        for u, v in pairs[:target]:
            self.add_edge(u, v)
        LOGGER.debug(
            "Generated {} random edges for n={} (range {}..{})",
            len(self._edges),
            n,
            min_edges,
            max_edges,
        )
        return len(self._edges)

    # ────────────── traversal state ──────────────
    def mark_visiting(self, index: int) -> None:
        self._vertices[index] = replace(
            self._vertices[index], visit_state=VisitState.VISITING, component_index=None
        )

    def settle(self, index: int, component_index: int) -> None:
        self._vertices[index] = replace(
            self._vertices[index],
            visit_state=VisitState.SETTLED,
            component_index=component_index,
        )

    def reset(self) -> None:
        """Return every vertex to unvisited; topology is left untouched."""
        self._vertices = [
            replace(vertex, visit_state=VisitState.UNVISITED, component_index=None)
            for vertex in self._vertices
        ]


__all__ = ["Edge", "GraphStore", "VertexSnapshot"]
