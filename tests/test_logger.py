# tests/test_logger.py
"""Tests for logging and error tracking helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from ccviz.utils import logger as logger_module
from ccviz.utils.error_tracker import ErrorTracker, error_scope


@pytest.fixture
def file_logging(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("CCVIZ_LOGS_ROOT", str(tmp_path / "logs"))
    logger_module.configure(level="DEBUG", to_file=True)
    yield tmp_path / "logs"
    logger_module.configure(to_file=False)


def test_file_sink_receives_tagged_lines(file_logging: Path) -> None:
    log = logger_module.get_logger("ccviz.test")
    log.tag("DFS", "Visiting node 3")

    path = logger_module.log_file()
    assert path is not None and path.parent == file_logging
    text = path.read_text(encoding="utf-8")
    assert "ccviz.test" in text
    assert "[DFS] Visiting node 3" in text


def test_unknown_level_rejected() -> None:
    with pytest.raises(ValueError):
        logger_module.configure(level="chatty", to_file=False)


def test_tracker_summary() -> None:
    tracker = ErrorTracker(context="test")
    assert tracker.summary() == {}
    tracker.record("malformed", "line 1")
    tracker.record("malformed", "line 2")
    assert tracker.summary() == {"malformed": ["line 1", "line 2"]}
    assert tracker.count() == 2


def test_error_scope_contains_and_records() -> None:
    tracker = ErrorTracker(context="test")
    with error_scope("frames", tracker):
        raise RuntimeError("disk full")
    assert tracker.errors == {"frames": ["RuntimeError: disk full"]}


def test_file_sink_is_off_unless_requested(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CCVIZ_LOG_TO_FILE", raising=False)
    assert logger_module.to_file_from_env() is False
    assert logger_module.to_file_from_env(default=True) is True
    monkeypatch.setenv("CCVIZ_LOG_TO_FILE", "off")
    assert logger_module.to_file_from_env(default=True) is False

    monkeypatch.delenv("CCVIZ_LOG_TO_FILE")
    logger_module.configure()
    assert logger_module.log_file() is None


def test_unwritable_log_dir_keeps_console_logging(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")
    monkeypatch.setenv("CCVIZ_LOGS_ROOT", str(blocker / "logs"))

    logger_module.configure(to_file=True)
    try:
        assert logger_module.log_file() is None
        logger_module.get_logger("ccviz.test").tag("DFS", "still logging")
    finally:
        logger_module.configure(to_file=False)


def test_default_data_root_follows_working_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    from ccviz.config import get_settings

    monkeypatch.delenv("CCVIZ_DATA_ROOT", raising=False)
    monkeypatch.delenv("CCVIZ_LOGS_ROOT", raising=False)
    monkeypatch.chdir(tmp_path)
    assert get_settings().paths.logs_root == tmp_path / "data" / "logs"
