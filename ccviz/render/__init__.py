"""Presentation of traversal steps: colors, console log and frames."""

from ccviz.render.console import ConsoleObserver, LineStyle, classify_line
from ccviz.render.palette import color_for, component_color

__all__ = [
    "ConsoleObserver",
    "LineStyle",
    "classify_line",
    "color_for",
    "component_color",
]
