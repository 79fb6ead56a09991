"""Tests for logging configuration."""

import json
import logging

from notevault.config import Settings
from notevault.core.logging import (
    ColoredFormatter,
    JSONFormatter,
    build_logging_config,
    get_log_level,
    get_logger,
)


def make_record(**extra):
    record = logging.LogRecord("notevault.test", logging.INFO, __file__, 10, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    entry = json.loads(JSONFormatter().format(make_record(user_id="u1")))

    assert entry["message"] == "hello world"
    assert entry["level"] == "INFO"
    assert entry["extra"] == {"user_id": "u1"}


def test_colored_formatter_leaves_record_untouched():
    record = make_record()
    output = ColoredFormatter("%(levelname)s %(message)s").format(record)

    assert "hello world" in output
    assert record.levelname == "INFO"


def test_get_log_level():
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("nonsense") == logging.INFO


def test_console_only_without_log_dir():
    config = build_logging_config(Settings(_env_file=None, log_dir=None))
    assert set(config["handlers"]) == {"console"}


def test_file_handlers_with_log_dir(tmp_path):
    config = build_logging_config(Settings(_env_file=None, log_dir=str(tmp_path / "logs")))

    assert {"file", "error_file"} <= set(config["handlers"])
    assert (tmp_path / "logs").is_dir()


def test_get_logger_is_namespaced():
    assert get_logger("http").name == "notevault.http"
