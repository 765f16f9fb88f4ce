"""Unit tests for typings_registry.logging_config."""

from __future__ import annotations

import json

import pytest
import structlog

from typings_registry.config import LoggingSettings
from typings_registry.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(LoggingSettings(level="INFO", format="json"))
        structlog.get_logger().info("registry_built", packages=3)

        line = capsys.readouterr().err.strip()
        event = json.loads(line)
        assert event["event"] == "registry_built"
        assert event["packages"] == 3
        assert event["level"] == "info"

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(LoggingSettings(level="WARNING", format="json"))
        structlog.get_logger().info("registry_built")
        assert capsys.readouterr().err == ""

    def test_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(LoggingSettings(level="DEBUG", format="text"))
        structlog.get_logger().debug("data_file_loaded", path="definitions.json")
        assert "data_file_loaded" in capsys.readouterr().err
