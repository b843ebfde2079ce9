# tests/test_config.py
"""Tests for centralized configuration module."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from ccviz.config import (
    COMPONENT_PALETTE,
    FILENAME_FRAME_FMT,
    GRAPH_DEFAULT_NODES,
    GRAPH_MAX_NODES,
    GRAPH_MIN_NODES,
    GraphConfig,
    LayoutConfig,
    Settings,
    TraversalConfig,
    VisitState,
    get_settings,
)


def test_constants_are_immutable() -> None:
    """Verify that constants are defined and have expected types."""
    assert isinstance(GRAPH_MIN_NODES, int)
    assert isinstance(GRAPH_MAX_NODES, int)
    assert GRAPH_MIN_NODES <= GRAPH_DEFAULT_NODES <= GRAPH_MAX_NODES
    assert isinstance(FILENAME_FRAME_FMT, str)


def test_palette_has_eight_distinct_colors() -> None:
    assert len(COMPONENT_PALETTE) == 8
    assert len(set(COMPONENT_PALETTE)) == 8


def test_visit_state_values() -> None:
    assert {state.value for state in VisitState} == {"unvisited", "visiting", "settled"}


def test_layout_min_distance() -> None:
    layout = LayoutConfig(node_radius=10.0, overlap_factor=2.0)
    assert layout.min_distance == 20.0


def test_seeded_rng_is_reproducible() -> None:
    cfg = GraphConfig(seed=99)
    assert cfg.make_rng().integers(0, 1_000_000) == cfg.make_rng().integers(0, 1_000_000)


def test_settings_are_frozen() -> None:
    settings = get_settings()
    with pytest.raises(AttributeError):
        settings.traversal = TraversalConfig()  # type: ignore[misc]


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CCVIZ_DATA_ROOT", str(tmp_path))
    monkeypatch.setenv("CCVIZ_NODE_COUNT", "10")
    monkeypatch.setenv("CCVIZ_SEED", "42")
    monkeypatch.setenv("CCVIZ_DELAY_MS", "25")
    monkeypatch.setenv("CCVIZ_PAUSE_ON_SETTLE", "true")
    monkeypatch.setenv("CCVIZ_SAVE_FRAMES", "1")

    settings = get_settings()

    assert isinstance(settings, Settings)
    assert settings.paths.data_root == tmp_path
    assert settings.paths.frames_root == tmp_path / "frames"
    assert settings.graph.node_count == 10
    assert settings.graph.seed == 42
    assert settings.traversal.delay_ms == 25.0
    assert settings.traversal.pause_on_settle is True
    assert settings.render.save_frames is True


def test_empty_seed_means_unseeded(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CCVIZ_SEED", "")
    settings = get_settings()
    assert settings.graph.seed is None
    assert isinstance(settings.graph.make_rng(), np.random.Generator)
