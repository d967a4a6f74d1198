# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""Tests for logging formatters and utilities."""

import logging
import sys

import pytest
from colorama import Fore, Style

from trivia_night.src import monitoring
from trivia_night.src.monitoring.logging.log_color_scheme import ColorScheme
from trivia_night.src.monitoring.logging.log_colored_formatter import ColoredLogFormatter


def _record(level=logging.INFO, msg="Test message", name="trivia_night.src.test", exc_info=None):
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestColorScheme:
    """Test color scheme lookups."""

    def test_colors_for_levels(self):
        assert ColorScheme.color_for("WARNING") == Fore.YELLOW
        assert ColorScheme.color_for("ERROR") == Fore.RED

    def test_unknown_level_falls_back(self):
        assert ColorScheme.color_for("TRACE") == Fore.WHITE
        assert ColorScheme.symbol_for("TRACE") == "•"

    def test_every_level_has_a_symbol(self):
        assert set(ColorScheme.SYMBOLS) == set(ColorScheme.COLORS)


class TestColoredLogFormatter:
    """Test colored log formatter."""

    @pytest.fixture
    def formatter(self):
        return ColoredLogFormatter()

    @pytest.fixture
    def plain_formatter(self):
        return ColoredLogFormatter(use_colors=False)

    def test_simplify_component_name(self, formatter):
        assert formatter._simplify_component_name("trivia_night.src.routes") == "routes"
        assert formatter._simplify_component_name("simple") == "simple"

    def test_format_extra_empty(self, formatter):
        assert formatter.format_extra({}) == ""
        assert formatter.format_extra(None) == ""

    def test_format_extra_with_data(self, formatter):
        assert formatter.format_extra({"sid": "abc", "count": 5}) == " (sid=abc, count=5)"

    def test_format_with_colors(self, formatter):
        output = formatter.format(_record())

        assert "Test message" in output
        assert "test" in output
        assert Style.RESET_ALL in output

    def test_format_without_colors(self, plain_formatter):
        output = plain_formatter.format(_record(level=logging.WARNING))

        assert "\x1b[" not in output
        assert output.endswith("⚠ test  Test message")

    def test_format_includes_extra_fields(self, plain_formatter):
        record = _record()
        record.sid = "sid-1"

        assert plain_formatter.format(record).endswith("Test message (sid=sid-1)")

    def test_format_includes_exception(self, plain_formatter):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record(level=logging.ERROR, exc_info=sys.exc_info())

        output = plain_formatter.format(record)

        assert "Traceback" in output
        assert "RuntimeError: boom" in output


class TestSetupLogging:
    """Test root logger configuration."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self, monkeypatch):
        root = logging.getLogger()
        level = root.level
        monkeypatch.setattr(monitoring, "_configured", False)
        yield
        for handler in list(root.handlers):
            if isinstance(handler.formatter, ColoredLogFormatter):
                root.removeHandler(handler)
        root.setLevel(level)

    def test_installs_single_handler(self):
        root = logging.getLogger()
        before = len(root.handlers)

        monitoring.setup_logging("DEBUG", use_colors=False)
        monitoring.setup_logging("WARNING", use_colors=False)

        added = root.handlers[before:]
        assert len(added) == 1
        assert isinstance(added[0].formatter, ColoredLogFormatter)
        assert root.level == logging.WARNING

    def test_quiets_socketio_loggers(self):
        monitoring.setup_logging("DEBUG", use_colors=False)

        assert logging.getLogger("socketio").level == logging.WARNING
        assert logging.getLogger("engineio").level == logging.WARNING

    def test_get_logger_returns_named_logger(self):
        assert monitoring.get_logger("trivia_night.x").name == "trivia_night.x"

    def test_application_imports_and_configures_logging(self):
        import trivia_night.main as entry_point

        entry_point.setup_logging("INFO", use_colors=False)

        logger = entry_point.get_logger("trivia_night.test")
        assert isinstance(logger, logging.Logger)
        assert logger.getEffectiveLevel() == logging.INFO
