# cppscaffold/log_manager.py
"""
Centralized logger factory for cppscaffold.

:func:`get_logger` returns a configured :class:`logging.Logger`:
- Colored console logs (stderr) via `colorlog` when stderr is a TTY
- Plain console logs otherwise
- Optional file logging (UTF-8)
- Idempotent handler attachment (prevents duplicate handlers)

Environment variables
---------------------
CPPSCAFFOLD_FORCE_COLOR=true|false
    Force colored logging on or off regardless of whether stderr is a TTY.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, Optional

import colorlog

__all__ = ["get_logger"]

ROOT_LOGGER_NAME = "cppscaffold"

_LEVEL_COLORS: Dict[str, str] = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

_PLAIN_FMT = "[%(levelname)s] %(asctime)s - [%(name)s] %(message)s"
_PLAIN_DATEFMT = "%Y-%m-%d %H:%M:%S"
_COLOR_FMT = (
    "%(log_color)s[%(levelname)s]%(reset)s %(asctime)s - "
    "[%(name)s] %(message)s"
)


def _should_use_color() -> bool:
    """Return True if colorized logs should be used."""
    env = os.getenv("CPPSCAFFOLD_FORCE_COLOR")
    if env is not None:
        return env.strip().lower() in {"1", "true", "yes", "on"}
    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


class _StderrHandler(logging.StreamHandler):
    """StreamHandler that writes to whatever ``sys.stderr`` is at emit time.

    Click's CliRunner and pytest's capsys swap ``sys.stderr`` after the
    handler exists; binding the stream at construction would keep writing to
    the original one. :meth:`setStream` pins an explicit stream instead.
    """

    def __init__(self) -> None:
        super().__init__()
        self._pinned = None

    @property
    def stream(self):
        return self._pinned if self._pinned is not None else sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        self._pinned = value


def _build_stream_handler() -> logging.Handler:
    # Logs go to stderr so they never mix with the progress lines on stdout.
    handler = _StderrHandler()
    if _should_use_color():
        handler.setFormatter(
            colorlog.ColoredFormatter(
                fmt=_COLOR_FMT,
                datefmt=_PLAIN_DATEFMT,
                log_colors=_LEVEL_COLORS,
            )
        )
        return handler

    handler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_PLAIN_DATEFMT))
    return handler


def _attach_stream_handler(logger: logging.Logger) -> None:
    if getattr(logger, "_cppscaffold_stream_handler_attached", False):
        return
    logger.addHandler(_build_stream_handler())
    logger._cppscaffold_stream_handler_attached = True  # type: ignore[attr-defined]


def _attach_file_handler(logger: logging.Logger, log_to_file: str) -> None:
    """Attach one FileHandler per absolute path."""
    log_file_path = os.path.abspath(log_to_file)
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == log_file_path:
            return

    try:
        fhandler = logging.FileHandler(log_file_path, encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to open log file '%s': %s", log_file_path, exc)
        return

    fhandler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_PLAIN_DATEFMT))
    logger.addHandler(fhandler)


def get_logger(
    name: str = ROOT_LOGGER_NAME,
    level: Optional[int] = None,
    log_to_file: Optional[str] = None,
) -> logging.Logger:
    """
    Return a configured, reusable :class:`logging.Logger`.

    Parameters
    ----------
    name : str, default "cppscaffold"
        Logger name. Child names (``cppscaffold.toolchain``) share the
        handlers of the package logger through propagation.
    level : Optional[int]
        Level to set. ``None`` leaves the current level untouched.
    log_to_file : Optional[str]
        Optional filesystem path for file logging.

    Notes
    -----
    Only the package logger gets handlers and ``propagate = False``; module
    loggers propagate to it, so configuring it once in the CLI is enough.
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)

    if name == ROOT_LOGGER_NAME:
        _attach_stream_handler(logger)
        if log_to_file:
            _attach_file_handler(logger, log_to_file)
        logger.propagate = False
    return logger
