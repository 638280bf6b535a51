"""Unit tests for log record context and formatting."""

import json
import logging

import pytest

from museum_archive.logging_config import (
    JsonFormatter,
    RequestContextFilter,
    configure_logging,
    request_id_var,
    session_user_var,
)


def make_record(msg: str = "Artifact added", **extra) -> logging.LogRecord:
    record = logging.LogRecord("museum_archive.test", logging.INFO, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def request_context():
    """Run inside a request served for session user 2."""
    request_token = request_id_var.set("req-42")
    user_token = session_user_var.set("2")
    yield
    session_user_var.reset(user_token)
    request_id_var.reset(request_token)


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestRequestContextFilter:

    def test_outside_a_request(self):
        record = make_record()
        RequestContextFilter().filter(record)

        assert record.request_id == "-"
        assert record.user_id == "-"

    def test_stamps_request_and_session_user(self, request_context):
        record = make_record()
        RequestContextFilter().filter(record)

        assert record.request_id == "req-42"
        assert record.user_id == "2"

    def test_explicit_user_id_is_kept(self, request_context):
        record = make_record("Competition entry submitted", user_id="4")
        RequestContextFilter().filter(record)

        assert record.user_id == "4"


class TestJsonFormatter:

    def test_includes_context_and_extras(self, request_context):
        record = make_record(entity_type="artifact", entity_id="17", stats={"total": 6})
        RequestContextFilter().filter(record)

        entry = json.loads(JsonFormatter().format(record))

        assert entry["message"] == "Artifact added"
        assert entry["level"] == "INFO"
        assert entry["request_id"] == "req-42"
        assert entry["user_id"] == "2"
        assert entry["entity_type"] == "artifact"
        assert entry["stats"] == {"total": 6}
        assert "lineno" not in entry

    def test_unset_context_is_omitted(self):
        record = make_record()
        RequestContextFilter().filter(record)

        entry = json.loads(JsonFormatter().format(record))

        assert "request_id" not in entry
        assert "user_id" not in entry

    def test_non_json_values_are_stringified(self):
        entry = json.loads(JsonFormatter().format(make_record(role=object)))
        assert entry["role"] == str(object)


class TestConfigureLogging:

    def test_reconfiguring_keeps_one_handler(self, root_logger):
        configure_logging(log_level="INFO")
        configure_logging(log_level="WARNING", environment="production")

        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, JsonFormatter)
        assert root_logger.level == logging.WARNING

    def test_debug_overrides_level(self, root_logger):
        configure_logging(log_level="ERROR", debug=True)
        assert root_logger.level == logging.DEBUG
