"""Utility package re-exporting shared helpers for ccviz."""

from ccviz.utils.error_tracker import ErrorTracker, error_scope
from ccviz.utils.format import format_matrix
from ccviz.utils.io import ensure_directory, load_document, load_json, load_yaml
from ccviz.utils.logger import get_logger

__all__ = [
    "ErrorTracker",
    "ensure_directory",
    "error_scope",
    "format_matrix",
    "get_logger",
    "load_document",
    "load_json",
    "load_yaml",
]
