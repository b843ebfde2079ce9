# utils/logger.py
"""Single-source Loguru setup: console sink plus an optional per-run file sink."""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from loguru import logger as _root_logger

from ccviz.config import FILENAME_LOG_PREFIX, LogLevel, get_settings


# ---------- options ----------
def to_file_from_env(default: bool = False) -> bool:
    """Read ``CCVIZ_LOG_TO_FILE``; unset falls back to ``default``."""
    value = os.environ.get("CCVIZ_LOG_TO_FILE")
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off")


@dataclass(slots=True)
class _LogOptions:
    level: str = field(default_factory=lambda: os.environ.get("CCVIZ_LOG_LEVEL", "INFO"))
    # off unless an entry point opts in
    to_file: bool = field(default_factory=to_file_from_env)


_CONFIGURED = False
_LOGGER = None
_LOG_FILE: Optional[Path] = None
_LOG_HANDLE: Optional[TextIO] = None


def _resolve_log_dir() -> Path:
    try:
        return get_settings().paths.logs_root
    except Exception:
        return Path.cwd() / "logs"


# ---------- sinks as callables ----------
def _console_sink(msg) -> None:
    r = msg.record
    module = r["extra"].get("module", r.get("name", "unknown"))
    # one record == one line
    print(f"{r['time']:%H:%M:%S} | {r['level'].name: <3.3} | {module} | {r['message']}")


def _make_file_sink(fh: TextIO):
    def _file_sink(msg) -> None:
        r = msg.record
        module = r["extra"].get("module", r.get("name", "unknown"))
        fh.write(f"{r['time'].isoformat()} | {r['level'].name} | {module} | {r['message']}\n")
        fh.flush()

    return _file_sink


def _configure_logger(level: str | None = None, to_file: bool | None = None) -> None:
    global _CONFIGURED, _LOGGER, _LOG_FILE, _LOG_HANDLE

    options = _LogOptions()
    level = LogLevel((level or options.level).upper()).value
    to_file = options.to_file if to_file is None else to_file

    # drop every existing handler, including loguru's default stderr one
    _root_logger.remove()
    if _LOG_HANDLE is not None:
        _LOG_HANDLE.close()
        _LOG_HANDLE = None
        _LOG_FILE = None

    def _inject_extras(record):
        record["extra"].setdefault("module", record.get("name", "unknown"))

    logger = _root_logger.patch(_inject_extras)
    logger.add(_console_sink, level=level, catch=True)

    if to_file:
        log_dir = _resolve_log_dir()
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = log_dir / f"{FILENAME_LOG_PREFIX}_{timestamp}.log"
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            _LOG_HANDLE = path.open("a", encoding="utf-8")
        except OSError as exc:
            logger.warning(f"File logging disabled, cannot write {path}: {exc}")
        else:
            _LOG_FILE = path
            logger.add(_make_file_sink(_LOG_HANDLE), level=level, catch=True)

    _LOGGER = logger
    _CONFIGURED = True


def get_logger(name: str | None = None):
    """Return a loguru logger bound to ``name`` (or the caller's module)."""
    if not _CONFIGURED:
        _configure_logger()

    module_name = name
    frame = inspect.currentframe()
    if module_name is None and frame is not None and frame.f_back is not None:
        module = inspect.getmodule(frame.f_back)
        if module is not None and module.__name__ != "__main__":
            module_name = module.__name__

    bound = _LOGGER.bind(module=module_name or "unknown")

    def _tag(label: str, msg: str | None = None, *args, level: str = "info") -> None:
        text = f"[{label}] " + (msg or "")
        if args:
            text = text.format(*args)
        getattr(bound, level, bound.info)(text)

    setattr(bound, "tag", _tag)
    return bound


def log_file() -> Optional[Path]:
    """Path of the active file sink, if any."""
    return _LOG_FILE


def configure(level: str | None = None, to_file: bool | None = None) -> None:
    _configure_logger(level=level, to_file=to_file)


__all__ = ["get_logger", "configure", "log_file", "to_file_from_env"]
