import logging
import sys
from unittest.mock import patch

import pytest

from wsschema.logger import (
    DEBUG,
    ERROR,
    INFO,
    WARNING,
    WsCustomFormatter,
    get_logger,
    package_logger,
    set_level,
)
from wsschema.logger import handler as ws_global_handler


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Restore the package logger and handler levels after each test."""
    original_package_level = package_logger.level
    original_handler_level = ws_global_handler.level
    yield
    package_logger.setLevel(original_package_level)
    ws_global_handler.setLevel(original_handler_level)


# --- Test set_level --- #


def test_set_level_updates_package_logger_and_handler():
    set_level(WARNING)
    assert package_logger.level == WARNING
    assert ws_global_handler.level == WARNING

    set_level(DEBUG)
    assert package_logger.level == DEBUG
    assert ws_global_handler.level == DEBUG


def test_root_logger_is_left_alone():
    root_handlers = list(logging.getLogger().handlers)
    get_logger("wsschema.test")
    assert ws_global_handler not in root_handlers


# --- Test get_logger --- #


def test_get_logger_returns_logger_instance():
    logger = get_logger("wsschema.test_instance")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "wsschema.test_instance"


def test_get_logger_without_name_returns_package_logger():
    assert get_logger() is package_logger


@patch("wsschema.logger.log.wsschema_config")
def test_get_logger_sets_level_from_argument(mock_config):
    mock_config.dev_mode = False
    mock_config.log_level = "WARNING"
    _ = get_logger("wsschema.test_arg_level", level=ERROR)
    assert package_logger.level == ERROR
    assert ws_global_handler.level == ERROR


@patch("wsschema.logger.log.wsschema_config")
def test_get_logger_accepts_level_names(mock_config):
    mock_config.dev_mode = False
    _ = get_logger("wsschema.test_level_name", level="info")
    assert package_logger.level == INFO


@patch("wsschema.logger.log.wsschema_config")
def test_get_logger_dev_mode_forces_debug(mock_config):
    mock_config.dev_mode = True
    mock_config.log_level = "ERROR"
    _ = get_logger("wsschema.test_dev_mode", level=ERROR)
    assert package_logger.level == DEBUG
    assert ws_global_handler.level == DEBUG


@patch("wsschema.logger.log.wsschema_config")
def test_get_logger_uses_config_level(mock_config):
    mock_config.dev_mode = False
    mock_config.log_level = "INFO"
    _ = get_logger("wsschema.test_config_level")
    assert package_logger.level == INFO


# --- Test WsCustomFormatter --- #


def make_record(level=WARNING, exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="wsschema.test",
        level=level,
        pathname="receiver.py",
        lineno=42,
        msg="Dropping %s",
        args=("frame",),
        exc_info=exc_info,
        func="__call__",
    )


def test_formatter_plain_line():
    output = WsCustomFormatter(use_color=False).format(make_record())
    assert "\033[" not in output
    assert output.endswith("WARNING  wsschema.test: Dropping frame [receiver.py:42]")


def test_formatter_colors_level_column():
    output = WsCustomFormatter(use_color=True).format(make_record(level=ERROR))
    assert "\033[31mERROR   \033[0m" in output
    assert "Dropping frame" in output


def test_formatter_appends_traceback():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = make_record(exc_info=sys.exc_info())
    output = WsCustomFormatter(use_color=False).format(record)
    first_line, rest = output.split("\n", 1)
    assert first_line.endswith("[receiver.py:42]")
    assert "RuntimeError: boom" in rest
