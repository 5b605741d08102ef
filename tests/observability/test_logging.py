"""Tests for structured logging."""

import json
import logging

from seqsync.observability.logging import (
    JSONFormatter,
    ContextLogger,
    configure_logging,
    get_logger,
)


def _record(msg="Test message"):
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_format_basic_message(self):
        """Formats basic log message as JSON."""
        data = json.loads(JSONFormatter().format(_record()))

        assert data["message"] == "Test message"
        assert data["level"] == "INFO"
        assert data["logger"] == "test"
        assert "timestamp" in data

    def test_format_with_trace_extras(self):
        """Includes trace event fields in JSON output."""
        record = _record("edit-applied")
        record.event = "edit-applied"
        record.action = "insert"
        record.position = 3

        data = json.loads(JSONFormatter().format(record))

        assert data["event"] == "edit-applied"
        assert data["action"] == "insert"
        assert data["position"] == 3

    def test_format_list_extra(self):
        record = _record()
        record.state = [0, 8, 0]

        data = json.loads(JSONFormatter().format(record))

        assert data["state"] == [0, 8, 0]

    def test_format_without_timestamp(self):
        """Can exclude timestamp."""
        data = json.loads(JSONFormatter(include_timestamp=False).format(_record()))

        assert "timestamp" not in data

    def test_reserved_attributes_not_copied(self):
        data = json.loads(JSONFormatter().format(_record()))

        assert "lineno" not in data
        assert "msg" not in data


class TestContextLogger:
    """Tests for ContextLogger."""

    def test_with_context(self):
        """Can add context to logger."""
        logger = ContextLogger(logging.getLogger("test_context"))

        ctx_logger = logger.with_context(case="scenario-1")

        assert ctx_logger is not logger
        assert ctx_logger.context == {"case": "scenario-1"}
        assert logger.context == {}

    def test_context_chaining(self):
        """Can chain context additions."""
        logger = ContextLogger(logging.getLogger("test_chain"))

        ctx = logger.with_context(case="scenario-1").with_context(phase="trim")

        assert ctx.context == {"case": "scenario-1", "phase": "trim"}

    def test_context_reaches_record(self, caplog):
        logger = ContextLogger(logging.getLogger("test_record")).with_context(case="c1")

        with caplog.at_level(logging.INFO, logger="test_record"):
            logger.info("hello", phase="fix")

        record = caplog.records[-1]
        assert record.case == "c1"
        assert record.phase == "fix"

    def test_reserved_keys_are_prefixed(self, caplog):
        logger = ContextLogger(logging.getLogger("test_reserved")).with_context(name="pair-1")

        with caplog.at_level(logging.INFO, logger="test_reserved"):
            logger.info("hello", module="cli")

        record = caplog.records[-1]
        assert record.name == "test_reserved"
        assert record.ctx_name == "pair-1"
        assert record.ctx_module == "cli"

    def test_disabled_level_is_skipped(self, caplog):
        logger = ContextLogger(logging.getLogger("test_disabled"))

        with caplog.at_level(logging.WARNING, logger="test_disabled"):
            logger.debug("quiet")

        assert caplog.records == []


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configure_json_format(self):
        logger = configure_logging(log_format="json", log_level="INFO", logger_name="test_json")

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.level == logging.INFO

    def test_configure_text_format(self):
        logger = configure_logging(log_format="text", log_level="DEBUG", logger_name="test_text")

        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.level == logging.DEBUG

    def test_reconfigure_replaces_handler(self):
        configure_logging(logger_name="test_again")
        logger = configure_logging(logger_name="test_again")

        assert len(logger.handlers) == 1


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_context_logger(self):
        assert isinstance(get_logger("test"), ContextLogger)

    def test_binds_initial_context(self):
        logger = get_logger("test", spec_length=4, state_length=3)

        assert logger.context == {"spec_length": 4, "state_length": 3}
