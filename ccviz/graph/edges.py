# ccviz/graph/edges.py
"""Edge input: text parsing, graph definition files and store construction."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from ccviz.config import GenerationMode, GraphConfig, Settings, get_settings
from ccviz.graph.store import GraphStore
from ccviz.utils.error_tracker import ErrorTracker
from ccviz.utils.io import load_document
from ccviz.utils.logger import get_logger

_log = get_logger("ccviz.edges")

EdgePair = Tuple[int, int]


def clamp_node_count(n: int, config: GraphConfig | None = None) -> int:
    """Clamp a requested vertex count into the supported range."""
    cfg = config or GraphConfig()
    return max(cfg.min_nodes, min(cfg.max_nodes, int(n)))


def parse_edge_text(
    text: str, n: int, tracker: ErrorTracker | None = None
) -> List[EdgePair]:
    """Parse ``u v`` lines into pairs, rejecting anything the store would drop.

    Blank lines are skipped. Lines that are not exactly two integers, that
    name an id outside ``[1, n]`` or that form a self-loop are recorded in
    ``tracker`` and left out.
    """
    edges: List[EdgePair] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) != 2:
            _reject(tracker, "malformed", lineno, line)
            continue
        try:
            u, v = int(parts[0]), int(parts[1])
        except ValueError:
            _reject(tracker, "malformed", lineno, line)
            continue
        if not (1 <= u <= n and 1 <= v <= n):
            _reject(tracker, "out_of_range", lineno, line)
            continue
        if u == v:
            _reject(tracker, "self_loop", lineno, line)
            continue
        edges.append((u, v))
    return edges


def _reject(tracker: ErrorTracker | None, key: str, lineno: int, line: str) -> None:
    if tracker is not None:
        tracker.record(key, f"line {lineno}: {line!r}")
    else:
        _log.tag("EDGES", f"skipping line {lineno} ({key}): {line!r}", level="warning")


@dataclass(frozen=True)
class GraphSpec:
    """What to build: vertex count plus random or explicit edges."""

    nodes: int
    mode: GenerationMode = GenerationMode.RANDOM
    edges: Tuple[EdgePair, ...] = field(default_factory=tuple)
    seed: Optional[int] = None

    @property
    def random(self) -> bool:
        return self.mode is GenerationMode.RANDOM


def _pairs_from(items: Sequence[Any], n: int, tracker: ErrorTracker | None) -> List[EdgePair]:
    text = "\n".join(
        " ".join(str(part) for part in item) if isinstance(item, (list, tuple)) else str(item)
        for item in items
    )
    return parse_edge_text(text, n, tracker)


def spec_from_mapping(
    data: dict, *, config: GraphConfig | None = None, tracker: ErrorTracker | None = None
) -> GraphSpec:
    """Build a spec from a parsed document with ``nodes``/``mode``/``edges`` keys."""
    cfg = config or GraphConfig()
    nodes = clamp_node_count(data.get("nodes", cfg.node_count), cfg)
    explicit = "edges" in data or "edges_text" in data
    default_mode = GenerationMode.MANUAL if explicit else GenerationMode.RANDOM
    mode = GenerationMode(str(data.get("mode", default_mode.value)).lower())

    edges: List[EdgePair] = []
    if mode is GenerationMode.MANUAL:
        edges.extend(_pairs_from(data.get("edges") or [], nodes, tracker))
        edges.extend(parse_edge_text(data.get("edges_text") or "", nodes, tracker))
    elif explicit:
        message = "explicit edges ignored in random mode"
        _log.tag("GRAPH", message, level="warning")
        if tracker is not None:
            tracker.record("ignored_edges", message)

    seed = data.get("seed", cfg.seed)
    return GraphSpec(
        nodes=nodes,
        mode=mode,
        edges=tuple(edges),
        seed=None if seed is None else int(seed),
    )


def load_graph_spec(
    path: Path, *, config: GraphConfig | None = None, tracker: ErrorTracker | None = None
) -> GraphSpec:
    data = load_document(Path(path))
    if not isinstance(data, dict):
        raise ValueError(f"graph definition must be a mapping, got {type(data).__name__}")
    spec = spec_from_mapping(data, config=config, tracker=tracker)
    _log.tag("GRAPH", f"loaded {path}: n={spec.nodes} mode={spec.mode.value}")
    return spec


def build_store(spec: GraphSpec, settings: Settings | None = None) -> GraphStore:
    """Create a store for ``spec`` and populate its edges."""
    cfg = settings or get_settings()
    seed = spec.seed if spec.seed is not None else cfg.graph.seed
    store = GraphStore.create(spec.nodes, settings=cfg, rng=np.random.default_rng(seed))
    if spec.random:
        store.generate_random()
    else:
        for u, v in spec.edges:
            store.add_edge(u, v)
    _log.tag("GRAPH", f"n={store.n} edges={len(store.edges)}")
    return store


__all__ = [
    "EdgePair",
    "GraphSpec",
    "build_store",
    "clamp_node_count",
    "load_graph_spec",
    "parse_edge_text",
    "spec_from_mapping",
]
