# ccviz/render/console.py
"""Console presentation of the run log."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Sequence

from ccviz.graph.store import VertexSnapshot
from ccviz.utils.logger import get_logger

_log = get_logger("ccviz.console")


class LineStyle(str, Enum):
    BANNER = "banner"
    TOTAL = "total"
    COMPONENT = "component"
    NEW_COMPONENT = "new_component"
    PLAIN = "plain"


_TAGS: Dict[LineStyle, str] = {
    LineStyle.BANNER: "===",
    LineStyle.TOTAL: "TOTAL",
    LineStyle.COMPONENT: "COMP",
    LineStyle.NEW_COMPONENT: "ROOT",
    LineStyle.PLAIN: "STEP",
}


def classify_line(line: str) -> LineStyle:
    """Cosmetic style of a log line, keyed on marker substrings."""
    if "===" in line:
        return LineStyle.BANNER
    if "Total" in line:
        return LineStyle.TOTAL
    if "Component" in line:
        return LineStyle.COMPONENT
    if "Starting new" in line:
        return LineStyle.NEW_COMPONENT
    return LineStyle.PLAIN


class ConsoleObserver:
    """Step callback that logs only the lines added since its previous call."""

    def __init__(self) -> None:
        self._seen = 0
        self.lines: List[str] = []

    def __call__(self, vertices: Sequence[VertexSnapshot], log: Sequence[str]) -> None:
        if len(log) < self._seen:
            # a new run started with a fresh log
            self._seen = 0
        for line in log[self._seen :]:
            style = classify_line(line)
            _log.tag(_TAGS[style], line.strip())
            self.lines.append(line)
        self._seen = len(log)


__all__ = ["ConsoleObserver", "LineStyle", "classify_line"]
