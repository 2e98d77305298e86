import importlib
import sys
import logging

import pytest


def load_app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    for module in ["main", "app.config"]:
        if module in sys.modules:
            del sys.modules[module]
    entry = importlib.import_module("main")
    return entry.app


@pytest.fixture()
def test_client(monkeypatch):
    app = load_app(monkeypatch)
    app.config.update(TESTING=True)
    return app.test_client()


def test_request_id_header_and_propagation(test_client):
    resp = test_client.get("/__ok", headers={"X-Request-ID": "my-fixed-id-123"})
    assert resp.status_code == 200
    assert resp.headers.get("X-Request-ID") == "my-fixed-id-123"


def test_logs_include_request_id_attribute(monkeypatch, caplog):
    app = load_app(monkeypatch)
    app.config.update(TESTING=True)
    caplog.set_level("INFO")
    client = app.test_client()
    resp = client.get("/__log", headers={"X-Request-ID": "rid-abc"})
    assert resp.status_code == 200
    assert any(getattr(r, "request_id", "") == "rid-abc" for r in caplog.records)


def test_sensitive_fields_masked_in_info(monkeypatch, caplog):
    from app.logging import MaskingFilter
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    app = load_app(monkeypatch)
    app.config.update(TESTING=True)
    caplog.set_level("INFO")
    caplog.handler.addFilter(MaskingFilter())
    logger = logging.getLogger("mask_test")
    with app.app_context():
        logger.info({"email": "user@example.com", "bybit_api_key": "k", "lead": {"phone": "+1555"}, "name": "Ada"})
    record = next(r for r in caplog.records if r.name == "mask_test")
    assert isinstance(record.msg, dict)
    assert record.msg["email"] == "[REDACTED]"
    assert record.msg["bybit_api_key"] == "[REDACTED]"
    assert record.msg["lead"]["phone"] == "[REDACTED]"
    assert record.msg["name"] == "Ada"


def test_sensitive_fields_visible_in_debug(monkeypatch, caplog):
    from app.logging import MaskingFilter
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("APP_ENV", "development")
    app = load_app(monkeypatch)
    app.config.update(TESTING=True)
    caplog.set_level("DEBUG")
    caplog.handler.addFilter(MaskingFilter())
    logger = logging.getLogger("mask_test_debug")
    with app.app_context():
        logger.debug({"password": "secret"})
    record = next(r for r in caplog.records if r.name == "mask_test_debug")
    assert isinstance(record.msg, dict)
    assert record.msg["password"] == "secret"



def test_json_formatter_includes_request_and_trace_fields():
    import json
    from app.logging import JsonFormatter
    record = logging.LogRecord("fmt", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.request_id = "rid-1"
    out = json.loads(JsonFormatter().format(record))
    assert out["message"] == "hello world"
    assert out["request_id"] == "rid-1"
    assert out["trace_id"] == "n/a"
