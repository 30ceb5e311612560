"""
Tests for correlation IDs, log helpers, and request middleware.

System role: Verification of observability layer
"""

import logging

from pydantic import BaseModel

from study_assistant.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from study_assistant.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from study_assistant.observability.logger import CorrelationIdFilter
from study_assistant.observability.middleware import CORRELATION_HEADER


class TestCorrelation:
    """Test correlation ID context handling."""

    def test_set_and_clear(self) -> None:
        assert set_correlation_id("req-1") == "req-1"
        assert get_correlation_id() == "req-1"

        clear_correlation_id()

        assert get_correlation_id() == ""

    def test_generates_id_when_missing(self) -> None:
        value = set_correlation_id()
        try:
            assert value
            assert get_correlation_id() == value
        finally:
            clear_correlation_id()

    def test_filter_attaches_id(self) -> None:
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

        set_correlation_id("req-2")
        try:
            assert CorrelationIdFilter().filter(record) is True
        finally:
            clear_correlation_id()

        assert record.correlation_id == "req-2"

    def test_filter_placeholder_without_id(self) -> None:
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"


class TestLogUtils:
    """Test bounded structured logging."""

    def test_long_values_truncated(self) -> None:
        value = safe_log_value("x" * 600)

        assert value.startswith("x" * 500)
        assert "truncated, 600 total" in value

    def test_vectors_summarized(self) -> None:
        assert safe_log_value([0.1] * 768) == "list(768 items)"

    def test_models_summarized(self) -> None:
        class Sample(BaseModel):
            text: str

        assert safe_log_value(Sample(text="secret notes")) == "Sample(text)"

    def test_log_with_context_sets_extra(self, caplog) -> None:
        logger = logging.getLogger("study_assistant.tests")

        with caplog.at_level(logging.INFO, logger="study_assistant.tests"):
            log_with_context(logger, logging.INFO, "Processed batch 1 for a.pdf", batch_size=100)

        record = caplog.records[-1]
        assert record.getMessage() == "Processed batch 1 for a.pdf"
        assert record.batch_size == "100"

    def test_log_exception_with_context(self, caplog) -> None:
        logger = logging.getLogger("study_assistant.tests")

        with caplog.at_level(logging.ERROR, logger="study_assistant.tests"):
            log_exception_with_context(logger, "Ingestion failed", RuntimeError("boom"), namespace="ns1")

        record = caplog.records[-1]
        assert record.error_type == "RuntimeError"
        assert record.error_msg == "boom"
        assert record.namespace == "ns1"


class TestCorrelationMiddleware:
    """Test correlation header propagation through the API."""

    def test_header_echoed(self, client) -> None:
        response = client.get("/api/v1/health", headers={CORRELATION_HEADER: "abc-123"})

        assert response.headers[CORRELATION_HEADER] == "abc-123"

    def test_header_generated(self, client) -> None:
        response = client.get("/api/v1/health")

        assert response.headers[CORRELATION_HEADER]
