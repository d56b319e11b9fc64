"""Package loggers, silent below WARNING until an application opts in."""

from __future__ import annotations

import logging
import sys
from typing import Optional

_PACKAGE = "strongwolfe"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_level = logging.WARNING

_loggers: dict[str, logging.Logger] = {}


def _as_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _attach_handler(logger: logging.Logger, stream: object, fmt: str) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setLevel(_level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached ``strongwolfe.<name>`` logger, creating it on first use.

    Pass ``__name__``; names already under the package are kept as they are.
    """
    if name is None:
        name = _PACKAGE
    if name != _PACKAGE and not name.startswith(_PACKAGE + "."):
        name = f"{_PACKAGE}.{name}"

    logger = _loggers.get(name)
    if logger is None:
        logger = logging.getLogger(name)
        if not logger.handlers:
            logger.setLevel(_level)
            _attach_handler(logger, sys.stderr, _FORMAT)
            logger.propagate = False
        _loggers[name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Change the level of every package logger, including ones created later."""
    global _level
    _level = _as_level(level)
    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Route every package logger to ``stream`` (stderr by default) at ``level``."""
    global _level
    _level = _as_level(level)
    for logger in _loggers.values():
        logger.setLevel(_level)
        _attach_handler(
            logger, sys.stderr if stream is None else stream, format_string or _FORMAT
        )


__all__ = ["configure_logging", "get_logger", "set_log_level"]
