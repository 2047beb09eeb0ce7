"""Defines the :class:`.Logger` class."""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

ROOT_LOGGER_NAME: str = "iersconv"
"""``str``: name of the package-level logger that the one-liner helpers write to."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: format shared by every handler the :class:`.Logger` creates."""


def _buildHandler(name: str, path: str) -> logging.Handler:
    """Return a stdout handler when `path` is "stdout", a rotating file handler under `path` otherwise."""
    if path == "stdout":
        return logging.StreamHandler(sys.stdout)

    log_dir = Path(path)
    log_dir.mkdir(parents=True, exist_ok=True)

    config = BehavioralConfig.getConfig().logging
    return RotatingFileHandler(
        log_dir / f"{name}_{pathSafeTime()}.log",
        maxBytes=config.MaxFileSize,
        backupCount=config.MaxFileCount,
    )


class Logger:
    """Extended logger wraps the standard Python logging package.

    Log files are named after the logger and the time it was created, so consecutive runs never
    write to the same file.

    Attributes:
        logger (:class:`logging.Logger`): wrapped logger, every other attribute is forwarded to it.
        filename (``str``): log file path, or "stdout".
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``string``): Name of the the logger instance
            level (``logging.LOG_LEVEL``): Determines what level of log messages are published
            path (``string``): Path to where the log file will be stored
            allow_multiple_handlers (``bool``, optional): whether multiple log handlers are permitted
        """
        config = BehavioralConfig.getConfig().logging
        level = level or config.Level
        path = path or config.OutputLocation
        allow_multiple_handlers = allow_multiple_handlers or config.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename = "stdout"
        if self.logger.handlers and allow_multiple_handlers is not True:
            return

        handler = _buildHandler(name, path)
        if isinstance(handler, RotatingFileHandler):
            self.filename = handler.baseFilename
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Forward everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _iersconvLog(message: str, level: int):
    """Log a message to the top-level log record.

    This provides a simple, easy one-liner that doesn't require pre-initializing a logger object.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logging.getLogger(ROOT_LOGGER_NAME).log(msg=message, level=level)


def iersconvLogError(message: str):
    """Log a ERROR message to the top-level log record.

    See Also:
        :func:`._iersconvLog`
    """
    _iersconvLog(message, level=logging.ERROR)


def iersconvLogWarning(message: str):
    """Log a WARNING message to the top-level log record.

    See Also:
        :func:`._iersconvLog`
    """
    _iersconvLog(message, level=logging.WARNING)


def iersconvLogInfo(message: str):
    """Log a INFO message to the top-level log record.

    See Also:
        :func:`._iersconvLog`
    """
    _iersconvLog(message, level=logging.INFO)


def iersconvLogDebug(message: str):
    """Log a DEBUG message to the top-level log record.

    See Also:
        :func:`._iersconvLog`
    """
    _iersconvLog(message, level=logging.DEBUG)
