import logging
from logging.handlers import RotatingFileHandler

from courtpairing.models import Match, Round
from courtpairing.utils import (
    format_round,
    format_schedule,
    set_console_level,
    setup_logger,
)


def test_format_round_uses_display_names():
    round_data = Round(2, [Match(1, ("a", "b"), ("c", "d"))], ["e"])

    text = format_round(round_data, {"a": "Ann", "e": "Eve"})

    assert text.splitlines() == [
        "Round 2",
        "  Court 1: Ann & b  vs  c & d",
        "  Sitting: Eve",
    ]


def test_format_empty_schedule():
    assert format_schedule([]) == "No rounds scheduled"


def test_logger_writes_file_when_directory_set(tmp_path, monkeypatch):
    monkeypatch.setenv("COURT_PAIRING_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("COURT_PAIRING_LOG_LEVEL", "debug")

    lgr = setup_logger("courtpairing.tests.file_logger")
    lgr.info("hello from the test")
    for handler in lgr.handlers:
        handler.flush()

    assert lgr.level == logging.DEBUG
    assert any(isinstance(h, RotatingFileHandler) for h in lgr.handlers)
    assert "hello from the test" in (tmp_path / "logs" / "court-pairing.log").read_text(
        encoding="utf-8"
    )
    for handler in lgr.handlers:
        handler.close()


def test_logger_console_only_by_default(monkeypatch):
    monkeypatch.delenv("COURT_PAIRING_LOG_DIR", raising=False)
    monkeypatch.setenv("COURT_PAIRING_LOG_LEVEL", "nonsense")

    lgr = setup_logger("courtpairing.tests.console_logger")

    assert lgr.level == logging.INFO
    assert len(lgr.handlers) == 1


def test_set_console_level_leaves_file_handlers(tmp_path, monkeypatch):
    monkeypatch.setenv("COURT_PAIRING_LOG_DIR", str(tmp_path))
    lgr = setup_logger("courtpairing.tests.quiet_logger")

    set_console_level(logging.WARNING)

    levels = {type(h): h.level for h in lgr.handlers}
    assert levels[logging.StreamHandler] == logging.WARNING
    assert levels[RotatingFileHandler] == logging.NOTSET
    for handler in lgr.handlers:
        handler.close()
    set_console_level(logging.INFO)
