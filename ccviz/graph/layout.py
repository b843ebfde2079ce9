# ccviz/graph/layout.py
"""Random node placement for drawing."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from ccviz.config import LayoutConfig
from ccviz.utils.logger import get_logger

LOGGER = get_logger(__name__)

Position = Tuple[float, float]


def _is_clear(placed: np.ndarray, candidate: np.ndarray, min_distance: float) -> bool:
    if placed.shape[0] == 0:
        return True
    distances = np.linalg.norm(placed - candidate, axis=1)
    return bool(np.min(distances) >= min_distance)


def place_nodes(
    n: int, rng: np.random.Generator, config: LayoutConfig | None = None
) -> List[Position]:
    """Scatter ``n`` positions over the canvas, keeping nodes apart when possible.

    Each node gets up to ``max_attempts`` draws; if none is clear of the nodes
    already placed, the last draw is kept.
    """
    cfg = config or LayoutConfig()
    low = np.array([cfg.margin, cfg.margin], dtype=np.float64)
    span = np.array(
        [cfg.canvas_width - 2 * cfg.margin, cfg.canvas_height - 2 * cfg.margin],
        dtype=np.float64,
    )
    placed = np.empty((0, 2), dtype=np.float64)
    crowded = 0
    for _ in range(n):
        candidate = low + rng.random(2) * span
        attempts = 1
        while not _is_clear(placed, candidate, cfg.min_distance) and attempts < cfg.max_attempts:
            candidate = low + rng.random(2) * span
            attempts += 1
        if not _is_clear(placed, candidate, cfg.min_distance):
            crowded += 1
        placed = np.vstack([placed, candidate])
    if crowded:
        LOGGER.debug("Placed {} nodes, {} overlapping after retries", n, crowded)
    return [(float(x), float(y)) for x, y in placed]


__all__ = ["Position", "place_nodes"]
