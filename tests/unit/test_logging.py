"""
Tests for Structured Logging.
"""

import json
import logging

from frighet.infrastructure.logging import JsonFormatter


def _record(level: int = logging.INFO, **extra_fields) -> logging.LogRecord:
    record = logging.LogRecord(
        name="frighet.test",
        level=level,
        pathname=__file__,
        lineno=10,
        msg="Submission forwarded",
        args=(),
        exc_info=None,
    )
    record.extra_fields = extra_fields
    return record


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_outputs_one_json_object(self):
        entry = json.loads(JsonFormatter().format(_record(product_type="Other")))

        assert entry["severity"] == "INFO"
        assert entry["message"] == "Submission forwarded"
        assert entry["logger"] == "frighet.test"
        assert entry["product_type"] == "Other"

    def test_drops_sensitive_fields(self):
        entry = json.loads(JsonFormatter().format(_record(api_secret="s3cret", mj_api_key="k")))

        assert "api_secret" not in entry
        assert "mj_api_key" not in entry

    def test_truncates_long_values(self):
        entry = json.loads(JsonFormatter().format(_record(response_body="x" * 5000)))

        assert entry["response_body"].endswith("... [truncated]")
        assert len(entry["response_body"]) < 1100

    def test_warnings_include_source(self):
        entry = json.loads(JsonFormatter().format(_record(logging.WARNING)))

        assert entry["source"]["line"] == 10
