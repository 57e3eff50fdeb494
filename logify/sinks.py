"""sinks.py - Destinations for formatted log lines.

A Logger hands every line that passes its level gate to one of two sinks:

    ConsoleSink  writes the line, styled per level, to a text stream
                 (default: stdout).
    FileSink     appends the unstyled line to ``<log_dir>/<level>/<YYYYMMDD>.log``,
                 giving one file per level and calendar day.

Both implement LogSink, so a Logger can be given a custom sink (e.g. one that
collects lines in memory) without touching any other code.
"""

import os
import sys
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, Dict, Mapping, Optional, TextIO

from rich.color import ColorSystem
from rich.style import Style

from .internals import ensure_dir, format_date
from .levels import LogLevel

StyleFn = Callable[[str], str]

DEFAULT_LEVEL_COLORS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "blue",
    LogLevel.INFO: "green",
    LogLevel.WARN: "yellow",
    LogLevel.ERROR: "red",
}


def ansi_style(color: str) -> StyleFn:
    """Return a transform wrapping text in the ANSI escape codes for ``color``."""
    style = Style(color=color)

    def apply(text: str) -> str:
        return style.render(text, color_system=ColorSystem.STANDARD)

    return apply


def default_styles() -> Dict[LogLevel, StyleFn]:
    """Return the standard palette: debug blue, info green, warn yellow, error red.

    Returns:
        A fresh mapping of every LogLevel to an ANSI-coloring transform.
    """
    return {level: ansi_style(color) for level, color in DEFAULT_LEVEL_COLORS.items()}


def plain_styles() -> Dict[LogLevel, StyleFn]:
    """Return identity transforms for every level, used when colors are disabled."""
    return {level: str for level in LogLevel}


def log_file_path(log_dir: str, level: LogLevel, when: datetime) -> str:
    """Return ``<log_dir>/<level>/<YYYYMMDD>.log`` for a line emitted at ``when``."""
    return os.path.join(log_dir, level.dirname, f"{format_date('', when)}.log")


class LogSink(ABC):
    """Abstract destination for a single, already gated log line."""

    @abstractmethod
    def write(self, level: LogLevel, line: str, when: datetime) -> None:
        """Persist one formatted line.

        Args:
            level: Severity the line was emitted at.
            line: Fully formatted, unstyled line without trailing newline.
            when: Moment of emission, as reported by the Logger's clock.
        """


class ConsoleSink(LogSink):
    """Write styled lines to a text stream.

    Attributes:
        _stream: Explicit stream, or None to use ``sys.stdout`` at write time.
        _styles: Mapping of LogLevel to a text transform. Levels missing from
            the mapping are written unstyled.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        styles: Optional[Mapping[LogLevel, StyleFn]] = None,
    ) -> None:
        self._stream = stream
        self._styles = dict(default_styles() if styles is None else styles)

    @property
    def stream(self) -> TextIO:
        """The explicit stream, or the current ``sys.stdout``."""
        return self._stream or sys.stdout

    def write(self, level: LogLevel, line: str, when: datetime) -> None:
        """Print ``line`` styled for ``level``, followed by a newline.

        Args:
            level: Selects the style transform.
            line: Unstyled formatted line.
            when: Emission time; unused by the console.
        """
        style = self._styles.get(level, str)
        print(style(line), file=self.stream)


class FileSink(LogSink):
    """Append lines to one plain-text file per (level, calendar day).

    Layout::

        <log_dir>/
            debug/20260119.log
            error/20260119.log

    The level subdirectory is created on demand. Files are opened and closed
    for every line, so the sink holds no handles. Filesystem errors are not
    caught.
    """

    def __init__(self, log_dir: str, encoding: str = "utf-8") -> None:
        self._log_dir = log_dir
        self._encoding = encoding

    @property
    def log_dir(self) -> str:
        return self._log_dir

    def path_for(self, level: LogLevel, when: datetime) -> str:
        """Return the file that a line emitted at ``level`` on ``when`` goes to."""
        return log_file_path(self._log_dir, level, when)

    def write(self, level: LogLevel, line: str, when: datetime) -> None:
        """Append ``line`` plus newline to the file for ``level`` and the day of ``when``.

        Raises:
            OSError: The directory cannot be created or the file cannot be
                appended to.
        """
        path = self.path_for(level, when)
        ensure_dir(os.path.dirname(path))
        with open(path, "a", encoding=self._encoding) as f:
            f.write(line + "\n")
