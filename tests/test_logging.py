"""
Tests for the log formatters.
"""

import json
import logging

from indicacoes.core.logging import JsonFormatter, TextFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("indicacoes.test", logging.INFO, __file__, 1, "Lead status updated", (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_includes_extra_fields(self):
        line = JsonFormatter().format(_record(lead_id="L1", status="Pago"))
        data = json.loads(line)

        assert data["message"] == "Lead status updated"
        assert data["level"] == "INFO"
        assert data["logger"] == "indicacoes.test"
        assert data["lead_id"] == "L1"
        assert data["status"] == "Pago"

    def test_plain_record(self):
        data = json.loads(JsonFormatter().format(_record()))
        assert "lead_id" not in data
        assert "exc_info" not in data


class TestTextFormatter:
    def test_appends_extra_fields(self):
        text = TextFormatter().format(_record(user_id="u1"))

        assert "[indicacoes.test] Lead status updated" in text
        assert text.endswith("user_id=u1")
