# tests/conftest.py
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterable, Tuple

import numpy as np
import pytest

# keep the suite from writing log files; must run before ccviz is imported
os.environ.setdefault("CCVIZ_LOG_TO_FILE", "0")

if TYPE_CHECKING:
    from ccviz.config import Settings
    from ccviz.graph.store import GraphStore


@pytest.fixture
def rng() -> np.random.Generator:
    """Deterministic random source."""
    return np.random.default_rng(1234)


@pytest.fixture
def temp_data_dir(tmp_path: Path) -> Path:
    """Temporary directory for frames and logs."""
    data = tmp_path / "data"
    data.mkdir()
    return data


@pytest.fixture
def test_settings(temp_data_dir: Path) -> Settings:
    """Settings with temporary directories and no pauses."""
    from ccviz.config import (
        GraphConfig,
        LayoutConfig,
        PathsConfig,
        RenderConfig,
        Settings,
        TraversalConfig,
    )

    paths = PathsConfig(
        data_root=temp_data_dir,
        frames_root=temp_data_dir / "frames",
        logs_root=temp_data_dir / "logs",
    )

    return Settings(
        paths=paths,
        graph=GraphConfig(seed=7),
        layout=LayoutConfig(),
        traversal=TraversalConfig(delay_ms=0.0, start_delay_ms=0.0),
        render=RenderConfig(),
    )


@pytest.fixture
def make_store() -> Callable[..., GraphStore]:
    """Factory building a store of size ``n`` with the given edges."""
    from ccviz.graph.store import GraphStore

    def _make(n: int, edges: Iterable[Tuple[int, int]] = ()) -> GraphStore:
        store = GraphStore(n, rng=np.random.default_rng(0))
        for u, v in edges:
            store.add_edge(u, v)
        return store

    return _make
