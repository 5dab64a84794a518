"""
Tests for diagnostic logging setup.
"""

import logging

import pytest

from sqladminlog.infrastructure.logging_config import ColoredFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_colored_formatter_restores_record():
    formatter = ColoredFormatter("%(levelname)s [%(name)s] %(message)s")
    record = logging.LogRecord("sqladminlog.test", logging.WARNING, __file__, 1, "hello", None, None)

    output = formatter.format(record)

    assert "\033[" in output
    assert "hello" in output
    assert record.levelname == "WARNING"
    assert record.name == "sqladminlog.test"


def test_colored_formatter_plain_mode():
    formatter = ColoredFormatter("%(levelname)s %(message)s", use_colors=False)
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "plain", None, None)
    assert formatter.format(record) == "INFO plain"


def test_setup_logging_writes_debug_to_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "diag" / "sqladminlog.log"

    setup_logging(level=logging.WARNING, log_file=str(log_file), use_colors=False)
    logging.getLogger("sqladminlog.application.dispatch_loop").debug("cycle detail")

    console_handler, file_handler = restore_root_logger.handlers
    assert console_handler.level == logging.WARNING
    assert file_handler.level == logging.DEBUG
    file_handler.flush()
    assert "cycle detail" in log_file.read_text(encoding="utf-8")
