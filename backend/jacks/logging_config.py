"""
Logging setup shared by the terminal UI, the CLI and the HTTP API.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    console: bool = True,
) -> None:
    """
    Configure the root logger.

    The curses UI owns the terminal, so it calls this with ``console=False``;
    without a log file all records are then discarded.
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    handlers = []
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if not handlers:
        handlers.append(logging.NullHandler())

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
