"""JSON logging: formatter output and setup."""

import json
import logging
import sys

from exercise_tracker.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "exercise_tracker.test", logging.INFO, __file__, 1, "User created: %s", ("u1",), None,
    )
    record.__dict__.update(extra)
    return record


def test_formats_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "exercise_tracker.test"
    assert log["message"] == "User created: u1"
    assert "timestamp" in log


def test_surfaces_known_extra_fields_only():
    log = json.loads(JSONFormatter().format(_record(user_id="u1", count=3, secret="x")))
    assert log["user_id"] == "u1"
    assert log["count"] == 3
    assert "secret" not in log


def test_includes_exception_text():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in log["exception"]


def test_setup_logging_installs_single_handler():
    original = logging.root.handlers[:], logging.root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "json")
        assert len(logging.root.handlers) == 1
        assert isinstance(logging.root.handlers[0].formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.handlers, level = original
        logging.root.setLevel(level)
