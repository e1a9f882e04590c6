"""Tests for correlation tracking and logging helpers."""

import logging

import pytest

from sitechat.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from sitechat.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from sitechat.observability.logger import CorrelationIdFilter


@pytest.fixture(autouse=True)
def reset_correlation():
    yield
    clear_correlation_id()


class TestCorrelation:
    """Tests for correlation ID context."""

    def test_set_should_generate_id_when_missing(self) -> None:
        """A new UUID is generated when none is given."""
        value = set_correlation_id()
        assert len(value) == 36
        assert get_correlation_id() == value

    def test_set_should_keep_given_id(self) -> None:
        assert set_correlation_id("abc") == "abc"
        assert get_correlation_id() == "abc"

    def test_clear_should_reset_to_empty(self) -> None:
        set_correlation_id("abc")
        clear_correlation_id()
        assert get_correlation_id() == ""

    def test_filter_should_attach_correlation_id(self) -> None:
        set_correlation_id("req-9")
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "req-9"

    def test_filter_should_use_dash_without_request(self) -> None:
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"


class TestSafeLogValue:
    """Tests for safe_log_value."""

    def test_should_truncate_long_strings(self) -> None:
        result = safe_log_value("x" * 300)
        assert result.startswith("x" * 200)
        assert result.endswith("(truncated, 300 total)")

    def test_should_summarize_collections(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_should_render_none(self) -> None:
        assert safe_log_value(None) == "None"


class TestLogWithContext:
    """Tests for structured logging helpers."""

    def test_should_attach_safe_extra(self, caplog) -> None:
        logger = logging.getLogger("sitechat.tests")

        with caplog.at_level(logging.INFO, logger="sitechat.tests"):
            log_with_context(logger, logging.INFO, "ingesting", text="y" * 500)

        record = caplog.records[-1]
        assert record.getMessage() == "ingesting"
        assert len(record.text) < 500

    def test_exception_should_record_error_type(self, caplog) -> None:
        logger = logging.getLogger("sitechat.tests")

        with caplog.at_level(logging.ERROR, logger="sitechat.tests"):
            try:
                raise RuntimeError("boom")
            except RuntimeError as e:
                log_exception_with_context(logger, "failed", e, url="https://example.com")

        record = caplog.records[-1]
        assert record.error_type == "RuntimeError"
        assert record.error_msg == "boom"
        assert record.url == "https://example.com"
        assert record.exc_info is not None
