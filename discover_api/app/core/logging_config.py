"""
Logging configuration for the discover server.

Everything is logged through the root logger with one format, uvicorn
included: its ``uvicorn``, ``uvicorn.error`` and ``uvicorn.access``
loggers lose their own handlers and propagate to the root instead.
The root handlers carry a fixed name so that repeated calls (every
``create_app`` goes through here) attach them only once, even when
some other tool has already put handlers on the root logger.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "discover-console"
FILE_HANDLER_NAME = "discover-file"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def build_formatter() -> logging.Formatter:
    return logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)


def route_uvicorn_to_root() -> None:
    """Drop uvicorn's own handlers so its records reach the root handlers."""
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        for handler in list(uvicorn_logger.handlers):
            uvicorn_logger.removeHandler(handler)
        uvicorn_logger.propagate = True


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and fold uvicorn's loggers into it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of an additional log file.  If omitted or empty, only the
        console is used.
    """
    route_uvicorn_to_root()

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(build_formatter())
        root.addHandler(console_handler)

    if logfile and not _has_handler(root, FILE_HANDLER_NAME):
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(build_formatter())
        root.addHandler(file_handler)
