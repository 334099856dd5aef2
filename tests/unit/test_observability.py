"""Unit tests for logging and metrics server setup."""

import json
from unittest.mock import patch

import pytest
import structlog

from clock_display.infrastructure.config.settings import Settings
from clock_display.infrastructure.observability.logging import configure_logging
from clock_display.infrastructure.runtime.health import start_metrics_server


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


def test_configure_logging_json_to_stderr(capsys):
    """Test JSON logs are written to stderr, not stdout."""
    configure_logging("INFO", json=True)

    structlog.get_logger().info("clock_starting", updater="system")

    captured = capsys.readouterr()
    assert captured.out == ""
    payload = json.loads(captured.err.strip())
    assert payload["event"] == "clock_starting"
    assert payload["updater"] == "system"
    assert payload["level"] == "info"


def test_configure_logging_filters_level(capsys):
    """Test that records below the level are dropped."""
    configure_logging("WARNING")

    structlog.get_logger().info("hidden")
    structlog.get_logger().warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_metrics_server_disabled():
    """Test that nothing is started by default."""
    with patch("clock_display.infrastructure.runtime.health.start_http_server") as start:
        assert start_metrics_server(Settings(_env_file=None)) is False

    start.assert_not_called()


def test_metrics_server_enabled():
    """Test starting the exporter on the configured port."""
    settings = Settings(_env_file=None, metrics_enabled=True, prometheus_port=9400)

    with patch("clock_display.infrastructure.runtime.health.start_http_server") as start:
        assert start_metrics_server(settings) is True

    start.assert_called_once_with(9400)
