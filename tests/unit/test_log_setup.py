"""Unit tests for phonebook.log_setup."""

from __future__ import annotations

import json

import pytest
import structlog

import phonebook
from phonebook.config import LoggingSettings
from phonebook.log_setup import setup_logging


class TestSetupLogging:
    def test_json_format_writes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(LoggingSettings(level="INFO", format="json"))
        structlog.get_logger().info("import_complete", added=3)

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip())
        assert record["event"] == "import_complete"
        assert record["added"] == 3
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filters_lower_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(LoggingSettings(level="WARNING", format="json"))
        structlog.get_logger().info("entry_added")
        structlog.get_logger().warning("import_failed")

        lines = capsys.readouterr().err.strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["import_failed"]

    def test_text_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(LoggingSettings(level="DEBUG", format="text"))
        structlog.get_logger().debug("cache_rebuilt", scanned=2)

        err = capsys.readouterr().err
        assert "cache_rebuilt" in err
        assert "scanned=2" in err

    def test_exported_from_package(self) -> None:
        assert phonebook.setup_logging is setup_logging
        assert "setup_logging" in phonebook.__all__
