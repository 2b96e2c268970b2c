"""
utils/logger.py — Project-wide logging configuration
=====================================================
A single `get_logger(name)` factory so every module logs with the same
colour-coded console format.  The default level comes from
`config.LOG_LEVEL` (env: STRESS_LOG_LEVEL).
"""

import logging
import sys

from config import LOG_LEVEL

_COLOURS = {
    logging.DEBUG:    "\033[36m",   # cyan
    logging.INFO:     "\033[32m",   # green
    logging.WARNING:  "\033[33m",   # yellow
    logging.ERROR:    "\033[31m",   # red
    logging.CRITICAL: "\033[35m",   # magenta
}
_RESET = "\033[0m"

_BASE_FMT = "%(asctime)s  %(levelname)s  %(name)-20s  %(message)s"
_DATE_FMT = "%H:%M:%S"

_loggers: dict[str, logging.Logger] = {}


class _ColourFormatter(logging.Formatter):
    """Wrap the level tag in an ANSI colour, leaving the record untouched."""

    def format(self, record: logging.LogRecord) -> str:
        colour = _COLOURS.get(record.levelno, _RESET)
        original = record.levelname
        record.levelname = f"{colour}{original:<8}{_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def resolve_level(level: int | str | None = None) -> int:
    """Turn a level name ("debug", "INFO") or number into a logging level."""
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str, level: int | str | None = None) -> logging.Logger:
    """
    Return (or create) a named logger.

    Parameters
    ----------
    name  : str               Component name shown in log lines.
    level : int | str | None  Minimum severity (default: config.LOG_LEVEL).
    """
    if name in _loggers:
        return _loggers[name]

    numeric_level = resolve_level(level)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)
    logger.propagate = False          # Avoid duplicate lines via the root logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(_ColourFormatter(fmt=_BASE_FMT, datefmt=_DATE_FMT))
    logger.addHandler(handler)

    _loggers[name] = logger
    return logger
