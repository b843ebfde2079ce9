# ccviz/config.py
"""Centralized configuration for the connected-components visualizer.

All constants, settings, and configuration dataclasses are defined here.
Modules should import from this single source of truth.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final, Optional, Tuple

import numpy as np

# ============================================================================
# PROJECT PATHS
# ============================================================================


def _env_path(key: str, default: Path) -> Path:
    """Resolve path from environment variable with fallback."""
    value = os.getenv(key)
    return Path(value).expanduser() if value else default


def _env_int(key: str, default: int) -> int:
    """Resolve integer from environment variable with fallback."""
    value = os.getenv(key)
    return int(value) if value is not None else default


def _env_optional_int(key: str, default: Optional[int]) -> Optional[int]:
    """Resolve optional integer; an empty value means unset."""
    value = os.getenv(key)
    if value is None:
        return default
    return int(value) if value.strip() else None


def _env_float(key: str, default: float) -> float:
    """Resolve float from environment variable with fallback."""
    value = os.getenv(key)
    return float(value) if value is not None else default


def _env_bool(key: str, default: bool) -> bool:
    """Resolve boolean from environment variable with fallback."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# ============================================================================
# GRAPH CONSTANTS
# ============================================================================

GRAPH_MIN_NODES: Final[int] = 6
GRAPH_MAX_NODES: Final[int] = 12
GRAPH_DEFAULT_NODES: Final[int] = 8

# ============================================================================
# TRAVERSAL TIMING CONSTANTS
# ============================================================================

TRAVERSAL_DELAY_MS_DEFAULT: Final[float] = 500.0
TRAVERSAL_START_DELAY_MS_DEFAULT: Final[float] = 500.0

# ============================================================================
# LAYOUT CONSTANTS
# ============================================================================

LAYOUT_CANVAS_WIDTH: Final[float] = 800.0
LAYOUT_CANVAS_HEIGHT: Final[float] = 600.0
LAYOUT_NODE_RADIUS: Final[float] = 30.0
LAYOUT_MARGIN: Final[float] = 80.0
LAYOUT_OVERLAP_FACTOR: Final[float] = 2.5
LAYOUT_MAX_ATTEMPTS: Final[int] = 100

# ============================================================================
# RENDER CONSTANTS
# ============================================================================

COLOR_UNVISITED: Final[str] = "#9CA3AF"
COLOR_VISITING: Final[str] = "#FCD34D"
COMPONENT_PALETTE: Final[Tuple[str, ...]] = (
    "#10B981",
    "#3B82F6",
    "#EF4444",
    "#8B5CF6",
    "#F59E0B",
    "#EC4899",
    "#14B8A6",
    "#F97316",
)
COLOR_EDGE: Final[str] = "#374151"
COLOR_OUTLINE: Final[str] = "#1F2937"
COLOR_LABEL: Final[str] = "#FFFFFF"

# ============================================================================
# FILE NAMING CONSTANTS
# ============================================================================

FILENAME_FRAME_FMT: Final[str] = "frame_{index:04d}.png"
FILENAME_LOG_PREFIX: Final[str] = "ccviz"

# ============================================================================
# ENUMS
# ============================================================================


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class VisitState(str, Enum):
    """Per-vertex traversal state."""

    UNVISITED = "unvisited"
    VISITING = "visiting"
    SETTLED = "settled"


class GenerationMode(str, Enum):
    """How the edge set of a new graph is produced."""

    RANDOM = "random"
    MANUAL = "manual"


# ============================================================================
# DATACLASSES - Configuration Sections
# ============================================================================


@dataclass(frozen=True)
class PathsConfig:
    """File system paths configuration."""

    data_root: Path
    frames_root: Path
    logs_root: Path


@dataclass(frozen=True)
class GraphConfig:
    """Graph construction configuration."""

    node_count: int = GRAPH_DEFAULT_NODES
    min_nodes: int = GRAPH_MIN_NODES
    max_nodes: int = GRAPH_MAX_NODES
    seed: Optional[int] = None

    def make_rng(self) -> np.random.Generator:
        """Return a generator seeded from this config (fresh entropy if unset)."""
        return np.random.default_rng(self.seed)


@dataclass(frozen=True)
class LayoutConfig:
    """Node placement on the drawing canvas."""

    canvas_width: float = LAYOUT_CANVAS_WIDTH
    canvas_height: float = LAYOUT_CANVAS_HEIGHT
    node_radius: float = LAYOUT_NODE_RADIUS
    margin: float = LAYOUT_MARGIN
    overlap_factor: float = LAYOUT_OVERLAP_FACTOR
    max_attempts: int = LAYOUT_MAX_ATTEMPTS

    @property
    def min_distance(self) -> float:
        return self.node_radius * self.overlap_factor


@dataclass(frozen=True)
class TraversalConfig:
    """Traversal pacing configuration."""

    delay_ms: float = TRAVERSAL_DELAY_MS_DEFAULT
    start_delay_ms: float = TRAVERSAL_START_DELAY_MS_DEFAULT
    pause_on_settle: bool = False


@dataclass(frozen=True)
class RenderConfig:
    """Frame rendering configuration."""

    unvisited_color: str = COLOR_UNVISITED
    visiting_color: str = COLOR_VISITING
    palette: Tuple[str, ...] = COMPONENT_PALETTE
    edge_color: str = COLOR_EDGE
    outline_color: str = COLOR_OUTLINE
    label_color: str = COLOR_LABEL
    figsize: Tuple[float, float] = (8.0, 6.0)
    dpi: int = 100
    save_frames: bool = False


# ============================================================================
# MAIN CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class Settings:
    """Main application configuration.

    All subsystem configurations are aggregated here.
    Instances are immutable (frozen=True) to prevent accidental mutation.
    """

    paths: PathsConfig
    graph: GraphConfig
    layout: LayoutConfig
    traversal: TraversalConfig
    render: RenderConfig


def get_settings() -> Settings:
    """Factory function to create Settings with environment variable overrides.

    Environment variables:
        CCVIZ_DATA_ROOT: Base data directory (default: ./data under the working dir)
        CCVIZ_FRAMES_ROOT: Directory for rendered frames
        CCVIZ_LOGS_ROOT: Logs directory
        CCVIZ_NODE_COUNT: Number of vertices for generated graphs
        CCVIZ_SEED: Seed for edge sampling and layout (empty = random)
        CCVIZ_DELAY_MS: Pause after each traversal step
        CCVIZ_START_DELAY_MS: Pause before the traversal starts
        CCVIZ_PAUSE_ON_SETTLE: Also pause after settling a vertex
        CCVIZ_SAVE_FRAMES: Render one PNG per traversal step
    """
    data_root = _env_path("CCVIZ_DATA_ROOT", Path.cwd() / "data")
    paths = PathsConfig(
        data_root=data_root,
        frames_root=_env_path("CCVIZ_FRAMES_ROOT", data_root / "frames"),
        logs_root=_env_path("CCVIZ_LOGS_ROOT", data_root / "logs"),
    )

    graph = GraphConfig(
        node_count=_env_int("CCVIZ_NODE_COUNT", GRAPH_DEFAULT_NODES),
        seed=_env_optional_int("CCVIZ_SEED", None),
    )

    traversal = TraversalConfig(
        delay_ms=_env_float("CCVIZ_DELAY_MS", TRAVERSAL_DELAY_MS_DEFAULT),
        start_delay_ms=_env_float("CCVIZ_START_DELAY_MS", TRAVERSAL_START_DELAY_MS_DEFAULT),
        pause_on_settle=_env_bool("CCVIZ_PAUSE_ON_SETTLE", False),
    )

    render = RenderConfig(save_frames=_env_bool("CCVIZ_SAVE_FRAMES", False))

    return Settings(
        paths=paths,
        graph=graph,
        layout=LayoutConfig(),
        traversal=traversal,
        render=render,
    )


# ============================================================================
# MODULE EXPORTS
# ============================================================================

__all__ = [
    # Factory
    "get_settings",
    # Main config
    "Settings",
    # Config sections
    "PathsConfig",
    "GraphConfig",
    "LayoutConfig",
    "TraversalConfig",
    "RenderConfig",
    # Enums
    "LogLevel",
    "VisitState",
    "GenerationMode",
    # Constants (selected for external use)
    "GRAPH_MIN_NODES",
    "GRAPH_MAX_NODES",
    "GRAPH_DEFAULT_NODES",
    "TRAVERSAL_DELAY_MS_DEFAULT",
    "COLOR_UNVISITED",
    "COLOR_VISITING",
    "COMPONENT_PALETTE",
    "FILENAME_FRAME_FMT",
]
