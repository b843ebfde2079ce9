# utils/error_tracker.py
"""Collect rejected inputs and contain failures of optional stages."""

from __future__ import annotations

import traceback
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from ccviz.utils.logger import get_logger


@dataclass(slots=True)
class ErrorTracker:
    """Collect problems and contextual information during execution."""

    context: str = "ErrorTracker"
    errors: dict[str, list[str]] = field(default_factory=dict)

    # ────────────── collection API ──────────────
    def record(self, key: str, message: str) -> None:
        logger = get_logger(self.context)
        logger.error(f"{key}: {message}")
        self.errors.setdefault(key, []).append(message)

    def count(self, key: str | None = None) -> int:
        if key is not None:
            return len(self.errors.get(key, []))
        return sum(len(messages) for messages in self.errors.values())

    def summary(self) -> dict[str, list[str]]:
        logger = get_logger(self.context)
        if not self.errors:
            logger.info("No errors recorded")
            return {}
        for key, messages in self.errors.items():
            logger.warning(f"Encountered {len(messages)} issues for {key}")
        return {key: list(messages) for key, messages in self.errors.items()}


# ────────────── context manager API ──────────────


@contextmanager
def error_scope(name: str = "scope", tracker: ErrorTracker | None = None) -> Iterator[None]:
    """Wrap an optional stage: log the traceback and keep going."""
    logger = get_logger("ErrorScope")
    try:
        yield
    except Exception as exc:
        logger.error(f"{name} failed, traceback:\n{traceback.format_exc()}")
        if tracker is not None:
            tracker.record(name, f"{type(exc).__name__}: {exc}")


__all__ = ["ErrorTracker", "error_scope"]
