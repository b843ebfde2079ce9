# ccviz/render/palette.py
"""Vertex colors derived from traversal state."""

from __future__ import annotations

from ccviz.config import RenderConfig, VisitState
from ccviz.graph.store import VertexSnapshot


def component_color(component_index: int, config: RenderConfig | None = None) -> str:
    """Palette color for a component, cycling past the palette size."""
    cfg = config or RenderConfig()
    return cfg.palette[component_index % len(cfg.palette)]


def color_for(vertex: VertexSnapshot, config: RenderConfig | None = None) -> str:
    cfg = config or RenderConfig()
    if vertex.visit_state is VisitState.SETTLED and vertex.component_index is not None:
        return component_color(vertex.component_index, cfg)
    if vertex.visit_state is VisitState.VISITING:
        return cfg.visiting_color
    return cfg.unvisited_color


__all__ = ["color_for", "component_color"]
