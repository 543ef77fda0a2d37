"""Logging service tests."""

import logging
from datetime import date

import pytest

from src.services.logging_service import (
    get_logger,
    log_file_path,
    parse_log_level,
    prune_old_logs,
    reset_logging,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_logging():
    level = logging.getLogger().level
    yield
    reset_logging()
    logging.getLogger().setLevel(level)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        (logging.ERROR, logging.ERROR),
        ("chatty", logging.INFO),
    ],
)
def test_parse_log_level(value, expected):
    assert parse_log_level(value) == expected


def test_log_file_named_by_day(tmp_path):
    assert log_file_path(tmp_path, date(2024, 3, 9)) == tmp_path / "stipple_20240309.log"


def test_file_handler_writes_todays_log(tmp_path):
    setup_logging("DEBUG", log_to_file=True, log_dir=tmp_path)

    get_logger("stipple.test").debug("tool switched")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "tool switched" in log_file_path(tmp_path).read_text(encoding="utf-8")
    assert logging.getLogger().level == logging.DEBUG


def test_setup_replaces_its_own_handlers_only(tmp_path):
    foreign = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(foreign)
    try:
        setup_logging("INFO", log_to_file=False)
        setup_logging("INFO", log_to_file=True, log_dir=tmp_path)

        file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert foreign in root.handlers

        reset_logging()
        assert not [h for h in root.handlers if isinstance(h, logging.FileHandler)]
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)


def test_prune_keeps_newest_files(tmp_path):
    for day in range(1, 6):
        log_file_path(tmp_path, date(2024, 1, day)).write_text("", encoding="utf-8")
    unrelated = tmp_path / "notes.txt"
    unrelated.write_text("", encoding="utf-8")

    removed = prune_old_logs(tmp_path, keep=2)

    assert [p.name for p in removed] == [
        "stipple_20240101.log",
        "stipple_20240102.log",
        "stipple_20240103.log",
    ]
    assert sorted(p.name for p in tmp_path.iterdir()) == [
        "notes.txt",
        "stipple_20240104.log",
        "stipple_20240105.log",
    ]


def test_prune_missing_directory(tmp_path):
    assert prune_old_logs(tmp_path / "absent") == []
