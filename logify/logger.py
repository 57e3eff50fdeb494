"""logger.py - The leveled logger with console and file output.

A Logger owns four pieces of state: the current level, an optional context tag,
the timestamp switch and the resolved log directory. Every public method first
checks the level gate; nothing is formatted for a suppressed line.

Typical usage::

    from logify import Logger

    log = Logger(level="debug", context="billing")
    log.info("invoice created", 42)
    # [2026-01-19 10:15:02] [INFO] <ctx: billing> invoice created 42

    log.error_to_file("card declined")
    # appended to <project root>/debug_logs/error/20260119.log
"""

import dataclasses
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Iterable, List, Mapping, Optional, TextIO, Tuple, Union

from .internals import DEFAULT_ROOT_MARKERS, find_project_root, format_date, format_time
from .levels import LogLevel
from .sinks import ConsoleSink, FileSink, LogSink, StyleFn, log_file_path, plain_styles

LevelLike = Union[LogLevel, str, int]

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class LoggerOptions:
    """Configuration merged into a Logger at construction.

    Attributes:
        level: Minimum severity that is emitted. Defaults to info.
        context: Optional tag rendered as ``<ctx: name>`` on every line.
        with_time: Prefix lines with ``[YYYY-MM-DD HH:MM:SS]``.
        log_dir_name: Directory, relative to ``base_dir``, holding log files.
        base_dir: Base path for the log directory. When None, the nearest
            ancestor of the working directory holding a project marker is used.
        colorize: Style console lines with one ANSI color per level.
    """

    level: LogLevel = LogLevel.INFO
    context: Optional[str] = None
    with_time: bool = True
    log_dir_name: str = "debug_logs"
    base_dir: Optional[str] = None
    colorize: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", LogLevel.coerce(self.level))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggerOptions":
        """Build options from ``LOGIFY_*`` environment variables.

        Recognised variables: ``LOGIFY_LEVEL``, ``LOGIFY_CONTEXT``,
        ``LOGIFY_WITH_TIME``, ``LOGIFY_LOG_DIR``, ``LOGIFY_BASE_DIR``. Setting
        ``NO_COLOR`` to any value disables colors. Unset variables keep their
        defaults.

        Raises:
            ValueError: If ``LOGIFY_LEVEL`` or ``LOGIFY_WITH_TIME`` is malformed.
        """
        env = os.environ if environ is None else environ
        values: dict = {}
        if env.get("LOGIFY_LEVEL"):
            values["level"] = LogLevel.coerce(env["LOGIFY_LEVEL"])
        if env.get("LOGIFY_CONTEXT"):
            values["context"] = env["LOGIFY_CONTEXT"]
        if env.get("LOGIFY_WITH_TIME"):
            values["with_time"] = _parse_bool("LOGIFY_WITH_TIME", env["LOGIFY_WITH_TIME"])
        if env.get("LOGIFY_LOG_DIR"):
            values["log_dir_name"] = env["LOGIFY_LOG_DIR"]
        if env.get("LOGIFY_BASE_DIR"):
            values["base_dir"] = env["LOGIFY_BASE_DIR"]
        if "NO_COLOR" in env:
            values["colorize"] = False
        return cls(**values)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


class Logger:
    """Leveled logger writing to the console and to per-level daily files.

    Args:
        options: Base configuration. Defaults to ``LoggerOptions()``.
        stream: Console stream. Defaults to ``sys.stdout`` at write time.
        styles: Mapping of LogLevel to a text transform for console lines.
            Overrides ``colorize`` when given.
        clock: Returns the current local time. Used for timestamps and for
            choosing the dated log file.
        root_markers: Marker names used when ``base_dir`` must be discovered.
        console_sink: Replaces the ConsoleSink; ``stream`` and ``styles`` are
            then ignored.
        file_sink: Replaces the FileSink writing under ``log_dir``.
        **overrides: Individual LoggerOptions fields overlaid onto ``options``.

    Raises:
        RootNotFoundError: If ``base_dir`` is unset and no project root exists
            above the working directory.
        TypeError: If ``overrides`` contains an unknown option name.
    """

    def __init__(
        self,
        options: Optional[LoggerOptions] = None,
        *,
        stream: Optional[TextIO] = None,
        styles: Optional[Mapping[LogLevel, StyleFn]] = None,
        clock: Optional[Callable[[], datetime]] = None,
        root_markers: Iterable[str] = DEFAULT_ROOT_MARKERS,
        console_sink: Optional[LogSink] = None,
        file_sink: Optional[LogSink] = None,
        **overrides: Any,
    ) -> None:
        merged = dataclasses.replace(options or LoggerOptions(), **overrides)

        self._level = merged.level
        self._context = merged.context
        self._with_time = merged.with_time
        self._clock = clock or datetime.now

        base_dir = merged.base_dir or find_project_root(markers=root_markers)
        self._log_dir = os.path.join(base_dir, merged.log_dir_name)

        if styles is None and not merged.colorize:
            styles = plain_styles()
        self._console = console_sink or ConsoleSink(stream=stream, styles=styles)
        self._file = file_sink or FileSink(self._log_dir)

    # ---------------------------------------------------------------------- #
    # State
    # ---------------------------------------------------------------------- #

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def context(self) -> Optional[str]:
        return self._context

    @property
    def with_time(self) -> bool:
        return self._with_time

    @property
    def log_dir(self) -> str:
        return self._log_dir

    def set_level(self, level: LevelLike) -> None:
        """Change the gate for every subsequent call."""
        self._level = LogLevel.coerce(level)

    def should_log(self, level: LevelLike) -> bool:
        """True iff ``level`` is at least as severe as the configured level."""
        return LogLevel.coerce(level) >= self._level

    def file_path(self, level: LevelLike, when: Optional[datetime] = None) -> str:
        """Path of the file a ``*_to_file`` call at ``level`` writes to."""
        return log_file_path(self._log_dir, LogLevel.coerce(level), when or self._clock())

    # ---------------------------------------------------------------------- #
    # Console
    # ---------------------------------------------------------------------- #

    def log(self, level: LevelLike, message: Any, *extra: Any) -> None:
        """Write one styled line to the console sink if ``level`` passes the gate.

        Nothing is formatted when the line is suppressed.

        Args:
            level: Severity of the line (LogLevel, name or stdlib constant).
            message: Main text; rendered with ``str()``.
            *extra: Further values appended space-separated, like ``print``.

        Raises:
            ValueError: If ``level`` names no known level.
        """
        level = LogLevel.coerce(level)
        if not self.should_log(level):
            return
        now = self._clock()
        self._console.write(level, self._format(level, message, extra, now), now)

    def debug(self, message: Any, *extra: Any) -> None:
        """Console line at debug level. See ``log``."""
        self.log(LogLevel.DEBUG, message, *extra)

    def info(self, message: Any, *extra: Any) -> None:
        """Console line at info level. See ``log``."""
        self.log(LogLevel.INFO, message, *extra)

    def warn(self, message: Any, *extra: Any) -> None:
        """Console line at warn level. Also available as ``warning``."""
        self.log(LogLevel.WARN, message, *extra)

    warning = warn

    def error(self, message: Any, *extra: Any) -> None:
        """Console line at error level. See ``log``."""
        self.log(LogLevel.ERROR, message, *extra)

    # ---------------------------------------------------------------------- #
    # File
    # ---------------------------------------------------------------------- #

    def log_to_file(self, level: LevelLike, message: Any, *extra: Any) -> None:
        """Append one uncolored line to today's file for ``level`` if it passes the gate.

        The level directory is created on demand. The file is opened and
        closed for this single line.

        Args:
            level: Severity of the line (LogLevel, name or stdlib constant).
            message: Main text; rendered with ``str()``.
            *extra: Further values appended space-separated.

        Raises:
            OSError: Directory creation or the append failed. Not retried.
            ValueError: If ``level`` names no known level.
        """
        level = LogLevel.coerce(level)
        if not self.should_log(level):
            return
        now = self._clock()
        self._file.write(level, self._format(level, message, extra, now), now)

    def debug_to_file(self, message: Any, *extra: Any) -> None:
        """Append to ``<log_dir>/debug/<YYYYMMDD>.log``. See ``log_to_file``."""
        self.log_to_file(LogLevel.DEBUG, message, *extra)

    def info_to_file(self, message: Any, *extra: Any) -> None:
        """Append to ``<log_dir>/info/<YYYYMMDD>.log``. See ``log_to_file``."""
        self.log_to_file(LogLevel.INFO, message, *extra)

    def warn_to_file(self, message: Any, *extra: Any) -> None:
        """Append to ``<log_dir>/warn/<YYYYMMDD>.log``. See ``log_to_file``."""
        self.log_to_file(LogLevel.WARN, message, *extra)

    def error_to_file(self, message: Any, *extra: Any) -> None:
        """Append to ``<log_dir>/error/<YYYYMMDD>.log``. See ``log_to_file``."""
        self.log_to_file(LogLevel.ERROR, message, *extra)

    # ---------------------------------------------------------------------- #
    # Private helpers
    # ---------------------------------------------------------------------- #

    def _format(
        self, level: LogLevel, message: Any, extra: Tuple[Any, ...], now: datetime
    ) -> str:
        """Build ``[date time] [LEVEL] <ctx: name> message extra...``.

        Disabled or unset segments are left out entirely.
        """
        parts: List[str] = []
        if self._with_time:
            parts.append(f"[{format_date('-', now)} {format_time(now)}]")
        parts.append(f"[{level.label}]")
        if self._context:
            parts.append(f"<ctx: {self._context}>")
        parts.append(str(message))
        parts.extend(str(e) for e in extra)
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"Logger(level={self._level.dirname!r}, context={self._context!r}, "
            f"log_dir={self._log_dir!r})"
        )
