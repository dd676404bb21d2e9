"""Tests for logging setup."""

from __future__ import annotations

import json
import logging

from logging_utils import JsonFormatter, configure_logging


def test_configure_logging_installs_single_handler(restore_root_logging) -> None:
    configure_logging("DEBUG")
    configure_logging("WARNING")
    root = restore_root_logging
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)


def test_json_logs(restore_root_logging) -> None:
    configure_logging("INFO", json_logs=True)
    formatter = restore_root_logging.handlers[0].formatter
    assert isinstance(formatter, JsonFormatter)

    record = logging.LogRecord("neural.engine", logging.INFO, __file__, 1, "hidden %s", ("ok",), None)
    record.extra_fields = {"step": 2}
    payload = json.loads(formatter.format(record))
    assert payload["message"] == "hidden ok"
    assert payload["logger"] == "neural.engine"
    assert payload["level"] == "INFO"
    assert payload["step"] == 2
