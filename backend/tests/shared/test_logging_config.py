"""Tests for shared/logging_config.py."""

import logging

from shared.logging_config import HealthCheckFilter, get_logging_config


def _record(message: str) -> logging.LogRecord:
    return logging.LogRecord("uvicorn.access", logging.INFO, __file__, 1, message, None, None)


class TestHealthCheckFilter:
    def test_drops_health_probes(self):
        log_filter = HealthCheckFilter()
        assert log_filter.filter(_record('127.0.0.1 - "GET /health HTTP/1.1" 200')) is False
        assert log_filter.filter(_record('127.0.0.1 - "GET /ready HTTP/1.1" 200')) is False

    def test_keeps_other_requests(self):
        log_filter = HealthCheckFilter()
        assert log_filter.filter(_record('127.0.0.1 - "POST /captains/login HTTP/1.1" 200'))


class TestGetLoggingConfig:
    def test_level_is_applied_everywhere(self):
        config = get_logging_config("debug")
        assert config["root"]["level"] == "DEBUG"
        assert config["loggers"]["uvicorn"]["level"] == "DEBUG"
        assert config["loggers"]["uvicorn.access"]["level"] == "DEBUG"

    def test_access_handler_filters_health_checks(self):
        config = get_logging_config()
        assert config["handlers"]["access"]["filters"] == ["health_check_filter"]
