# ccviz/render/draw.py
"""Drawing utilities for traversal frames."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from ccviz.config import FILENAME_FRAME_FMT, LayoutConfig, RenderConfig
from ccviz.graph.store import Edge, VertexSnapshot
from ccviz.render.palette import color_for
from ccviz.utils.io import ensure_directory
from ccviz.utils.logger import get_logger

LOGGER = get_logger(__name__)


def draw_step(
    vertices: Sequence[VertexSnapshot],
    edges: Sequence[Edge],
    *,
    config: RenderConfig | None = None,
    layout: LayoutConfig | None = None,
    title: str | None = None,
) -> plt.Figure:
    """Render one snapshot: edges first, then filled and labelled nodes."""
    cfg = config or RenderConfig()
    lay = layout or LayoutConfig()
    fig = plt.figure(figsize=cfg.figsize, dpi=cfg.dpi)
    ax = fig.add_subplot(111)
    by_id = {vertex.id: vertex for vertex in vertices}

    for edge in edges:
        a, b = by_id.get(edge.u), by_id.get(edge.v)
        if a is None or b is None:
            continue
        ax.plot(
            [a.position[0], b.position[0]],
            [a.position[1], b.position[1]],
            color=cfg.edge_color,
            linewidth=2,
            zorder=1,
        )

    for vertex in vertices:
        ax.add_patch(
            Circle(
                vertex.position,
                lay.node_radius,
                facecolor=color_for(vertex, cfg),
                edgecolor=cfg.outline_color,
                linewidth=3,
                zorder=2,
            )
        )
        ax.text(
            vertex.position[0],
            vertex.position[1],
            str(vertex.id),
            color=cfg.label_color,
            fontweight="bold",
            ha="center",
            va="center",
            zorder=3,
        )

    ax.set_xlim(0, lay.canvas_width)
    # canvas coordinates grow downwards
    ax.set_ylim(lay.canvas_height, 0)
    ax.set_aspect("equal")
    ax.axis("off")
    if title:
        ax.set_title(title)
    return fig


def save_figure(fig: plt.Figure, path: Path) -> None:
    ensure_directory(path.parent)
    fig.savefig(path)
    plt.close(fig)
    LOGGER.debug("Saved figure to {}", path)


class FrameRecorder:
    """Step callback that writes one PNG per step."""

    def __init__(
        self,
        edges: Sequence[Edge],
        out_dir: Path,
        *,
        config: RenderConfig | None = None,
        layout: LayoutConfig | None = None,
    ) -> None:
        self._edges = tuple(edges)
        self._out_dir = Path(out_dir)
        self._config = config or RenderConfig()
        self._layout = layout or LayoutConfig()
        self.frames: list[Path] = []

    def __call__(self, vertices: Sequence[VertexSnapshot], log: Sequence[str]) -> None:
        index = len(self.frames)
        title = log[-1].strip() if log else None
        fig = draw_step(
            vertices, self._edges, config=self._config, layout=self._layout, title=title
        )
        path = self._out_dir / FILENAME_FRAME_FMT.format(index=index)
        save_figure(fig, path)
        self.frames.append(path)


__all__ = ["FrameRecorder", "draw_step", "save_figure"]
