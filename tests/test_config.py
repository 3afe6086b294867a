import logging

import pytest

from campus_library import LibraryConfig, configure_logging


def test_defaults():
    config = LibraryConfig()
    assert config.transaction_prefix == "TRX"
    assert config.transaction_id_width == 6
    assert config.in_reminder_window(1)
    assert config.in_reminder_window(3)
    assert not config.in_reminder_window(0)
    assert not config.in_reminder_window(4)


def test_from_env(monkeypatch):
    monkeypatch.setenv("LIBRARY_TRANSACTION_PREFIX", "LN")
    monkeypatch.setenv("LIBRARY_REMINDER_MAX_DAYS", "5")
    monkeypatch.setenv("LIBRARY_LOG_LEVEL", "debug")
    config = LibraryConfig.from_env()
    assert config.transaction_prefix == "LN"
    assert config.reminder_min_days == 1
    assert config.reminder_max_days == 5
    assert config.log_level == "DEBUG"


def test_configure_logging_sets_root_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    configure_logging(LibraryConfig(log_level="WARNING"))
    assert calls["level"] == logging.WARNING


def test_from_env_reads_id_width(monkeypatch):
    monkeypatch.setenv("LIBRARY_TRANSACTION_ID_WIDTH", "8")
    assert LibraryConfig.from_env().transaction_id_width == 8


def test_from_env_rejects_non_integer(monkeypatch):
    monkeypatch.setenv("LIBRARY_REMINDER_MIN_DAYS", "soon")
    with pytest.raises(ValueError, match="LIBRARY_REMINDER_MIN_DAYS"):
        LibraryConfig.from_env()
