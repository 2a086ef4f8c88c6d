"""Tests for modresolve.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from modresolve.logging import ComponentFormatter, configure_logging, get_logger


def test_get_logger_nests_under_package() -> None:
    assert get_logger().name == "modresolve"
    assert get_logger("locator").name == "modresolve.locator"


def test_configure_logging_is_idempotent(tmp_path: Path) -> None:
    log_file = tmp_path / "resolve.log"

    configure_logging(verbose=True)
    logger = configure_logging(verbose=True, log_file=log_file)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    get_logger("locator").debug("probing %s", "node_modules")
    for handler in logger.handlers:
        handler.flush()

    assert "modresolve:locator: probing node_modules" in log_file.read_text(encoding="utf-8")

    configure_logging()
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_component_formatter_tags_records_outside_the_hierarchy() -> None:
    formatter = ComponentFormatter("[%(component)s] %(message)s")
    inside = logging.LogRecord("modresolve.roots", logging.DEBUG, __file__, 1, "found", None, None)
    outside = logging.LogRecord("other", logging.DEBUG, __file__, 1, "skipped", None, None)

    assert formatter.format(inside) == "[modresolve:roots] found"
    assert formatter.format(outside) == "[other] skipped"
