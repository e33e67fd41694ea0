"""
Tests for app wiring: health routes, request ids, logging setup, error payloads.
"""

import json
import logging

from jobly.core.errors import internal_error
from jobly.core.logging_config import JsonFormatter, configure_logging
from jobly.core.request_context import clear_context, set_context


class TestHealth:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_db_health(self, client):
        resp = client.get("/api/db/health")
        assert resp.json() == {"status": "ok", "db": "connected", "dialect": "sqlite"}

    def test_request_id_echoed(self, client):
        resp = client.get("/api/health", headers={"x-request-id": "abc-123"})
        assert resp.headers["x-request-id"] == "abc-123"

    def test_request_id_generated(self, client):
        resp = client.get("/api/health")
        assert resp.headers["x-request-id"]


class TestJsonFormatter:
    def test_includes_extra_and_context(self):
        record = logging.LogRecord(
            name="jobly.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="company.created",
            args=(),
            exc_info=None,
        )
        record.handle = "c1"

        set_context(request_id="rid-1")
        try:
            payload = json.loads(JsonFormatter().format(record))
        finally:
            clear_context()

        assert payload["msg"] == "company.created"
        assert payload["level"] == "INFO"
        assert payload["handle"] == "c1"
        assert payload["request_id"] == "rid-1"

    def test_unserializable_extra_is_stringified(self):
        record = logging.LogRecord("jobly.test", logging.INFO, __file__, 1, "x", (), None)
        record.thing = object()

        payload = json.loads(JsonFormatter().format(record))
        assert payload["thing"].startswith("<object object")

    def test_configure_logging_sets_level(self):
        configure_logging("warning")
        assert logging.getLogger().level == logging.WARNING
        configure_logging("INFO")


class TestErrorPayloads:
    def test_internal_error(self):
        err = internal_error("Unhandled exception")

        assert err.status_code == 500
        assert err.to_dict() == {
            "error": {
                "code": "INTERNAL_ERROR",
                "reason": "Internal server error",
                "message": "Unhandled exception",
            }
        }
