# utils/logging_utils.py

"""
Lightweight logging utilities for the twister-rng project.

The library itself only emits DEBUG records (construction, reseeding,
ownership transfer); sampling never logs. This helper gives you:

    - a single place to configure log format / level,
    - automatic creation of a log directory,
    - a simple `get_logger(__name__)` function.

Usage:

    from utils.logging_utils import get_logger

    logger = get_logger(__name__)
    logger.debug("Reseeded engine")
"""

from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path
from typing import Optional

from config import LOG_DATEFMT, LOG_FILENAME, LOG_FORMAT, LOGS_DIR


# Multiple calls with the same name return the same logger instance.
_LOGGER_CACHE: dict[str, Logger] = {}


def _ensure_log_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def configure_root_logger(
    level: int = logging.INFO,
    log_to_file: bool = False,
    log_to_stdout: bool = True,
    filename: str = LOG_FILENAME,
    logs_dir: Optional[Path] = None,
) -> None:
    """
    Configure the root logger for the host program.

    This is a library, so nothing calls this for you. Call it once near
    program start if you want the DEBUG records emitted by utils.rng to
    show up somewhere.

    Args:
        level:
            Logging level (e.g., logging.INFO, logging.DEBUG).
        log_to_file:
            If True, write logs to logs_dir / filename.
        log_to_stdout:
            If True, also log to stderr via a StreamHandler.
        filename:
            Name of the log file inside logs_dir.
        logs_dir:
            Directory for the log file; defaults to config.LOGS_DIR.
    """
    handlers: list[logging.Handler] = []

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if log_to_file:
        target_dir = logs_dir or LOGS_DIR
        _ensure_log_dir(target_dir)
        fh = logging.FileHandler(target_dir / filename, encoding="utf-8")
        fh.setFormatter(formatter)
        handlers.append(fh)

    if log_to_stdout:
        sh = logging.StreamHandler()
        sh.setFormatter(formatter)
        handlers.append(sh)

    # If root already has handlers, avoid duplicating them
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    logging.basicConfig(level=level, handlers=handlers)


def get_logger(
    name: Optional[str] = None,
    level: Optional[int] = None,
) -> Logger:
    """
    Get a named logger, cached per name.

    Unlike an application entry point, a library module must not install
    handlers on import, so we only attach a NullHandler to the logger.
    Records propagate to whatever the host program configured.

    Args:
        name:
            Logger name (usually __name__ in the caller).
        level:
            Optional explicit level for this logger; None leaves it
            inheriting from its parents.

    Returns:
        logging.Logger instance.
    """
    if name is None:
        name = "__main__"

    if name in _LOGGER_CACHE:
        return _LOGGER_CACHE[name]

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    logger.addHandler(logging.NullHandler())

    _LOGGER_CACHE[name] = logger
    return logger
