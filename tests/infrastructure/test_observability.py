"""Structured logging — JSONFormatter fields and setup_logging idempotence."""

import json
import logging

from object_tasks.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "object_tasks.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "object_tasks.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_json_formatter_surfaces_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(operation="selector.build", error_code="SELECTOR_ORDER", item_count=3),
    ))
    assert log["operation"] == "selector.build"
    assert log["error_code"] == "SELECTOR_ORDER"
    assert log["item_count"] == 3
    assert "path" not in log


def test_setup_logging_replaces_its_handler():
    before = list(logging.root.handlers)
    first = setup_logging("DEBUG", "json")
    second = setup_logging("INFO", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert isinstance(second.formatter, logging.Formatter)
        assert not isinstance(second.formatter, JSONFormatter)
        assert logging.root.level == logging.INFO
    finally:
        logging.root.removeHandler(second)
        for handler in before:
            if handler not in logging.root.handlers:
                logging.root.addHandler(handler)
