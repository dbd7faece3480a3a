"""Logging configuration."""

import json
import logging

from storesite.core.logging import JSONFormatter, configure_logging


def test_configure_logging_is_idempotent():
    configure_logging("debug")
    configure_logging("info")
    tagged = [h for h in logging.getLogger().handlers if getattr(h, "_storesite", False)]
    assert len(tagged) == 1
    assert logging.getLogger().level == logging.INFO


def test_json_formatter_includes_request_id():
    record = logging.LogRecord("storesite.access", logging.INFO, __file__, 1, "GET %s", ("/api/v1/health",), None)
    record.request_id = "req-1"
    data = json.loads(JSONFormatter().format(record))
    assert data["message"] == "GET /api/v1/health"
    assert data["logger"] == "storesite.access"
    assert data["request_id"] == "req-1"
