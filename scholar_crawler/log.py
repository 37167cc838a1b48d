from __future__ import annotations

import logging
import os
from typing import Optional

from rich.logging import RichHandler


FILE_FORMAT = "%(asctime)s [%(levelname)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "scholar_crawler.console"
FILE_HANDLER = "scholar_crawler.file"
HANDLER_NAMES = (CONSOLE_HANDLER, FILE_HANDLER)

LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level(level: Optional[str] = None) -> int:
    """Resolve a level name, falling back to LOG_LEVEL and then INFO."""
    level_str = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    return LOG_LEVEL_MAP.get(level_str, logging.INFO)


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = "crawler.log") -> logging.Logger:
    """Configure the root logger with a console handler and an optional log file.

    Safe to call more than once; handlers installed by a previous call are
    replaced rather than duplicated.
    """
    root = logging.getLogger()
    root.setLevel(get_log_level(level))

    for handler in list(root.handlers):
        if handler.get_name() in HANDLER_NAMES:
            root.removeHandler(handler)
            handler.close()

    console = RichHandler(rich_tracebacks=True, show_path=False, log_time_format=f"[{DATE_FORMAT}]")
    console.set_name(CONSOLE_HANDLER)
    root.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        file_handler.set_name(FILE_HANDLER)
        root.addHandler(file_handler)

    return root
