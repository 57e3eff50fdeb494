"""test_sinks.py - Unit tests for ConsoleSink, FileSink and the style helpers.

Covers:
    - ConsoleSink applies the style for the line's level, unstyled fallback
    - FileSink path layout and append behaviour
    - Logger routes lines to injected LogSink subclasses
"""

import io
from datetime import datetime

from logify.levels import LogLevel
from logify.logger import Logger
from logify.sinks import (
    ConsoleSink,
    FileSink,
    LogSink,
    ansi_style,
    default_styles,
    plain_styles,
)

WHEN = datetime(2026, 7, 1, 12, 0, 0)


class TestStyles:
    def test_ansi_style_wraps_text(self):
        styled = ansi_style("red")("alert")
        assert styled.startswith("\x1b[")
        assert styled.endswith("\x1b[0m")
        assert "alert" in styled

    def test_default_styles_cover_every_level(self):
        assert set(default_styles()) == set(LogLevel)

    def test_plain_styles_are_identity(self):
        assert all(style("x") == "x" for style in plain_styles().values())


class TestConsoleSink:
    def test_uses_level_style(self):
        stream = io.StringIO()
        sink = ConsoleSink(stream=stream, styles={LogLevel.INFO: str.upper})
        sink.write(LogLevel.INFO, "quiet", WHEN)
        assert stream.getvalue() == "QUIET\n"

    def test_missing_style_writes_plain_text(self):
        stream = io.StringIO()
        sink = ConsoleSink(stream=stream, styles={})
        sink.write(LogLevel.ERROR, "plain", WHEN)
        assert stream.getvalue() == "plain\n"


class TestFileSink:
    def test_path_for(self, tmp_path):
        sink = FileSink(str(tmp_path / "logs"))
        assert sink.path_for(LogLevel.DEBUG, WHEN) == str(
            tmp_path / "logs" / "debug" / "20260701.log"
        )

    def test_appends_lines(self, tmp_path):
        sink = FileSink(str(tmp_path))
        sink.write(LogLevel.INFO, "one", WHEN)
        sink.write(LogLevel.INFO, "two", WHEN)
        assert (tmp_path / "info" / "20260701.log").read_text(encoding="utf-8") == "one\ntwo\n"


class TestCustomSink:
    def test_logger_routes_lines_to_injected_sinks(self, tmp_path):
        class MemorySink(LogSink):
            def __init__(self):
                self.records = []

            def write(self, level, line, when):
                self.records.append((level, line, when))

        console, files = MemorySink(), MemorySink()
        logger = Logger(
            level="info", with_time=False, base_dir=str(tmp_path),
            clock=lambda: WHEN, console_sink=console, file_sink=files,
        )
        logger.debug("dropped")
        logger.warn("kept")
        logger.error_to_file("stored")

        assert console.records == [(LogLevel.WARN, "[WARN] kept", WHEN)]
        assert files.records == [(LogLevel.ERROR, "[ERROR] stored", WHEN)]
        assert not (tmp_path / "debug_logs").exists()
