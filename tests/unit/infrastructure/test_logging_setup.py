"""Tests for structlog / stdlib logging configuration."""

from __future__ import annotations

import logging

import pytest
import structlog

from byterate.infrastructure.config import AppConfig
from byterate.infrastructure.logging.setup import build_logging_config, configure_logging


class TestBuildLoggingConfig:
    def test_all_output_goes_to_stderr(self) -> None:
        cfg = build_logging_config(AppConfig())
        streams = {h["stream"] for h in cfg["handlers"].values()}
        assert streams == {"ext://sys.stderr"}

    def test_level_applied_to_loggers_and_root(self) -> None:
        cfg = build_logging_config(AppConfig(log_level="DEBUG"))
        assert cfg["root"]["level"] == "DEBUG"
        assert cfg["loggers"]["byterate"]["level"] == "DEBUG"

    def test_console_renderer_by_default(self) -> None:
        cfg = build_logging_config(AppConfig())
        processors = cfg["formatters"]["structlog"]["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer_in_prod(self) -> None:
        cfg = build_logging_config(AppConfig(environment="prod"))
        processors = cfg["formatters"]["structlog"]["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_base_config_not_mutated(self) -> None:
        build_logging_config(AppConfig(log_level="DEBUG"))
        cfg = build_logging_config(AppConfig())
        assert cfg["root"]["level"] == "WARNING"


class TestConfigureLogging:
    def test_sets_levels(self) -> None:
        configure_logging(AppConfig(log_level="INFO"))
        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger("byterate").level == logging.INFO

    def test_debug_events_reach_stderr_only(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(AppConfig(log_level="DEBUG", log_format="json"))
        logging.getLogger("byterate.test").debug("probe_event")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "probe_event" in captured.err
