"""
Tests for logging setup (services.logging_utils).
"""

from __future__ import annotations

import json
import logging

from services import logging_utils


def test_get_logger_returns_named_logger():
    logger = logging_utils.get_logger("bankreview.test")
    assert logger.name == "bankreview.test"


def test_json_formatter_includes_extra_fields():
    formatter = logging_utils.JsonFormatter(datefmt=logging_utils.DATE_FORMAT)
    record = logging.makeLogRecord(
        {
            "name": "api.main",
            "levelname": "INFO",
            "levelno": logging.INFO,
            "msg": "analysis completed",
            "risk_tier": "HIGH",
            "rows": 3,
        }
    )
    payload = json.loads(formatter.format(record))
    assert payload["message"] == "analysis completed"
    assert payload["level"] == "INFO"
    assert payload["risk_tier"] == "HIGH"
    assert payload["rows"] == 3
    assert "args" not in payload


def test_configure_logging_reads_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_FORMAT", "json")
    try:
        logging_utils.configure_logging(force=True)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert any(isinstance(h.formatter, logging_utils.JsonFormatter) for h in root.handlers)
    finally:
        monkeypatch.delenv("LOG_LEVEL")
        monkeypatch.delenv("LOG_FORMAT")
        logging_utils.configure_logging(force=True)


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert logging_utils._resolve_log_level() == logging.INFO
