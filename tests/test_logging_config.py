"""
Logging Config Tests
====================
Console formatter colouring and root logger setup.
"""
import logging

import pytest

from app.utils.logging_config import ColoredFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def _record(level):
    return logging.LogRecord("app.test", level, __file__, 10, "hello %s", ("world",), None)


def test_colored_formatter_wraps_line_in_level_color():
    line = ColoredFormatter(use_color=True).format(_record(logging.ERROR))
    assert line.startswith(ColoredFormatter.red)
    assert line.endswith(ColoredFormatter.reset)
    assert "ERROR" in line and "app.test:10 - hello world" in line


def test_colored_formatter_plain_when_disabled():
    line = ColoredFormatter(use_color=False).format(_record(logging.INFO))
    assert "\x1b[" not in line


def test_setup_logging_console_only(restore_root_logger):
    setup_logging(level="DEBUG")
    assert len(restore_root_logger.handlers) == 1
    assert restore_root_logger.level == logging.DEBUG
    assert logging.getLogger("app").level == logging.DEBUG


def test_setup_logging_with_file(restore_root_logger, tmp_path):
    log_dir = tmp_path / "logs"
    setup_logging(level=logging.INFO, log_dir=str(log_dir))

    assert any(isinstance(h, logging.FileHandler) for h in restore_root_logger.handlers)
    logging.getLogger("app.test").info("written to file")
    for handler in restore_root_logger.handlers:
        handler.flush()
    files = list(log_dir.glob("builds_*.log"))
    assert len(files) == 1
    assert "written to file" in files[0].read_text(encoding="utf-8")
