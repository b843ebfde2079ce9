# utils/io.py
"""File readers for graph definition files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from ccviz.utils.logger import get_logger

LOGGER = get_logger(__name__)


def load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def load_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def load_document(path: Path) -> Any:
    """Load a JSON or YAML document, chosen by file suffix."""
    if not path.exists():
        raise FileNotFoundError(f"graph definition not found: {path}")
    if path.suffix.lower() == ".json":
        data = load_json(path)
    else:
        data = load_yaml(path)
    LOGGER.debug("Loaded document {}", path)
    return data


def ensure_directory(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


__all__ = ["ensure_directory", "load_document", "load_json", "load_yaml"]
