"""
Basic logging configuration for the application.

``setup_logging`` attaches a console handler and, optionally, a file
handler to the root logger.  Handlers are added once per process; the
level is applied on every call so that each ``create_app`` gets the
level from its own settings.
"""

import logging
from pathlib import Path
from typing import Optional

CONSOLE_HANDLER_NAME = "meetup_api.console"
FILE_HANDLER_NAME = "meetup_api.file"

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _add_handler(logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    handler.set_name(name)
    handler.setFormatter(_FORMATTER)
    logger.addHandler(handler)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"WARNING"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to log to as well.  Only the first file passed
        in a process gets a handler.
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    installed = {h.get_name() for h in logger.handlers}
    if CONSOLE_HANDLER_NAME not in installed:
        _add_handler(logger, logging.StreamHandler(), CONSOLE_HANDLER_NAME)
    if logfile and FILE_HANDLER_NAME not in installed:
        log_path = Path(logfile).resolve()
        _add_handler(logger, logging.FileHandler(log_path, encoding="utf-8"), FILE_HANDLER_NAME)
