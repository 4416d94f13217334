"""
Tests for root logger configuration.
"""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from meetup_api.app.core.config import Settings
from meetup_api.app.core.db import Database
from meetup_api.app.core.logging_config import (
    CONSOLE_HANDLER_NAME,
    FILE_HANDLER_NAME,
    setup_logging,
)
from meetup_api.app.main import create_app


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    try:
        yield root
    finally:
        for handler in root.handlers:
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)


def _named(root: logging.Logger, name: str) -> list:
    return [h for h in root.handlers if h.get_name() == name]


def test_level_is_reapplied_on_every_call(root_logger) -> None:
    setup_logging("INFO")
    setup_logging("warning")

    assert root_logger.level == logging.WARNING
    assert len(_named(root_logger, CONSOLE_HANDLER_NAME)) == 1


def test_unknown_level_falls_back_to_info(root_logger) -> None:
    setup_logging("chatty")

    assert root_logger.level == logging.INFO


def test_file_handler_is_added_once(root_logger, tmp_path) -> None:
    logfile = tmp_path / "meetups.log"

    setup_logging("INFO", str(logfile))
    setup_logging("INFO", str(logfile))
    logging.getLogger("meetup_api.test").warning("written to file")
    for handler in _named(root_logger, FILE_HANDLER_NAME):
        handler.flush()

    assert len(_named(root_logger, FILE_HANDLER_NAME)) == 1
    assert "written to file" in logfile.read_text(encoding="utf-8")


def test_create_app_applies_settings_level(root_logger) -> None:
    setup_logging("INFO")
    settings = Settings(log_level="ERROR", log_file=None, database_url="sqlite://")

    create_app(settings, database=Database(settings.database_url))

    assert root_logger.level == logging.ERROR
