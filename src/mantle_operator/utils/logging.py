"""
Structured logging for the mantle-operator package.

Modules obtain loggers with ``get_logger(__name__)`` and attach context
through ``extra={...}``. The package installs a NullHandler only; call
``configure_logging()`` from an application to see output.

Example:
    >>> from mantle_operator.utils.logging import configure_logging, get_logger
    >>> configure_logging("DEBUG")
    >>> get_logger(__name__).info("Balance read", extra={"address": "0x..."})
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union

ROOT_LOGGER_NAME = "mantle_operator"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord has; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not extras:
            return base
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} | {rendered}"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger inside the package namespace.

    Args:
        name: Module name (usually ``__name__``). Names outside the package
            namespace are nested under it.

    Returns:
        Configured ``logging.Logger``
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling this again replaces the handler installed by a previous call.

    Args:
        level: Log level name or number
        fmt: ``logging`` format string
        stream: Output stream (defaults to stderr)

    Returns:
        The package root logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_mantle_operator", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ExtraFieldsFormatter(fmt))
    handler._mantle_operator = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    set_level(level)
    logger.disabled = False
    return logger


def set_level(level: Union[int, str]) -> None:
    """Set the package log level."""
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)


def disable_logging() -> None:
    """Silence all package logging."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.CRITICAL + 1)
    logger.disabled = True


def enable_debug() -> None:
    """Shortcut for ``configure_logging(logging.DEBUG)``."""
    configure_logging(logging.DEBUG)
