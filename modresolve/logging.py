"""Logging for modresolve lookups.

Each resolver module logs under ``modresolve.<component>`` (``locator``,
``roots``, ``compiler``, ``hashing``). Console lines are tagged with that
component so a verbose run shows which lookup probed which directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "modresolve"
_CONSOLE_FORMAT = "[%(component)s] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(component)s: %(message)s"


class ComponentFormatter(logging.Formatter):
    """Adds ``component``: the logger name relative to the modresolve root."""

    def format(self, record: logging.LogRecord) -> str:
        prefix = f"{_LOGGER_NAME}."
        if record.name.startswith(prefix):
            record.component = f"{_LOGGER_NAME}:{record.name[len(prefix):]}"
        else:
            record.component = record.name
        return super().format(record)


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the logger of one resolver component."""
    return logging.getLogger(f"{_LOGGER_NAME}.{component}" if component else _LOGGER_NAME)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route modresolve records to stderr and, when given, append them to ``log_file``.

    Verbose mode enables the DEBUG records emitted for every directory and
    compiler candidate probed. Calling this again replaces earlier handlers.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    handlers[0].setFormatter(ComponentFormatter(_CONSOLE_FORMAT))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(ComponentFormatter(_FILE_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    return logger


__all__ = ["ComponentFormatter", "configure_logging", "get_logger"]
