# ccviz/cli/visualize_runner.py
"""Entry point: build a graph and animate its connected components in the console."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import List, Optional

from ccviz.config import Settings, get_settings
from ccviz.graph.edges import GraphSpec, build_store, clamp_node_count, load_graph_spec
from ccviz.graph.store import GraphStore, VertexSnapshot
from ccviz.render.console import ConsoleObserver
from ccviz.traversal.engine import TraversalEngine
from ccviz.traversal.snapshot import StepCallback, TraversalResult
from ccviz.utils.error_tracker import ErrorTracker, error_scope
from ccviz.utils.format import format_matrix
from ccviz.utils.logger import configure, get_logger, to_file_from_env

_log = get_logger("ccviz.runner")


def _log_launch_banner(settings: Settings, spec: GraphSpec) -> None:
    _log.tag(
        "START",
        f"connected components n={spec.nodes} mode={spec.mode.value} "
        f"seed={spec.seed if spec.seed is not None else settings.graph.seed}",
    )
    _log.tag(
        "CFG",
        f"delay={settings.traversal.delay_ms}ms "
        f"pause_on_settle={settings.traversal.pause_on_settle} "
        f"frames={settings.render.save_frames}",
    )


def _default_spec(settings: Settings) -> GraphSpec:
    return GraphSpec(
        nodes=clamp_node_count(settings.graph.node_count, settings.graph),
        seed=settings.graph.seed,
    )


def _observers(store: GraphStore, settings: Settings, tracker: ErrorTracker) -> List[StepCallback]:
    observers: List[StepCallback] = [ConsoleObserver()]
    if settings.render.save_frames:
        from ccviz.render.draw import FrameRecorder

        recorder = FrameRecorder(
            store.edges,
            settings.paths.frames_root,
            config=settings.render,
            layout=settings.layout,
        )

        def _record(vertices: Sequence[VertexSnapshot], log: Sequence[str]) -> None:
            with error_scope("frames", tracker):
                recorder(vertices, log)

        observers.append(_record)
    return observers


async def run_visualization(
    store: GraphStore,
    settings: Settings | None = None,
    *,
    observers: Sequence[StepCallback] = (),
) -> TraversalResult:
    """Wait the start delay, then run the engine with every observer attached."""
    cfg = settings or get_settings()
    _log.tag("GRAPH", f"adjacency matrix:\n{format_matrix(store.matrix)}")
    await asyncio.sleep(cfg.traversal.start_delay_ms / 1000.0)

    def _fan_out(vertices: Sequence[VertexSnapshot], log: Sequence[str]) -> None:
        for observer in observers:
            observer(vertices, log)

    engine = TraversalEngine(store, cfg.traversal)
    result = await engine.find_components(_fan_out)
    _log.tag("RESULT", f"{result.as_dict()}")
    return result


def run(graph_file: Optional[Path] = None, settings: Settings | None = None) -> TraversalResult:
    cfg = settings or get_settings()
    tracker = ErrorTracker(context="ccviz.runner")
    if graph_file is not None:
        spec = load_graph_spec(graph_file, config=cfg.graph, tracker=tracker)
    else:
        spec = _default_spec(cfg)
    _log_launch_banner(cfg, spec)

    store = build_store(spec, cfg)
    result = asyncio.run(
        run_visualization(store, cfg, observers=_observers(store, cfg, tracker))
    )
    tracker.summary()
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Module entry point for ``python -m ccviz.cli.visualize_runner [graph.yaml]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        raise SystemExit("Usage: python -m ccviz.cli.visualize_runner [graph.yaml]")
    configure(to_file=to_file_from_env(default=True))
    run(Path(args[0]) if args else None)
    return 0


__all__ = ["main", "run", "run_visualization"]


if __name__ == "__main__":
    sys.exit(main())
