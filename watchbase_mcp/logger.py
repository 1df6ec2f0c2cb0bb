"""
Logger for the stdio server: file + stderr, NEVER stdout (would corrupt MCP protocol)
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import Config

_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def _secure_handler(log_path: Path, level: int, fmt: str) -> RotatingFileHandler:
    """Create a rotating file handler with restricted permissions."""
    handler = RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))

    # Log files may contain request arguments
    try:
        os.chmod(log_path, 0o600)
    except OSError:
        pass  # file may not exist yet on first call

    return handler


class _StderrHandler(logging.StreamHandler):
    """Looks up sys.stderr at emit time, so a redirected stderr is honoured."""

    def __init__(self):
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr


def _stderr_handler(level: int) -> logging.StreamHandler:
    handler = _StderrHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger that writes to file and stderr only"""
    Config.ensure_dirs()

    logger = logging.getLogger(f"watchbase.{name}")
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    logger.addHandler(_secure_handler(Config.LOG_FILE, logging.DEBUG, _FORMAT))

    # Separate error log
    logger.addHandler(_secure_handler(
        Config.ERROR_LOG,
        logging.ERROR,
        _FORMAT,
    ))

    logger.addHandler(_stderr_handler(logging.INFO))

    # Never propagate to root (which might have stdout handlers)
    logger.propagate = False

    return logger
