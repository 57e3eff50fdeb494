"""levels.py - Severity levels understood by logify.

LogLevel is a totally ordered enumeration whose values are the matching
standard ``logging`` constants, so a plain integer means the same severity
either way. Comparisons use the numeric value, so
``LogLevel.DEBUG < LogLevel.ERROR`` holds and a Logger can gate lines with a
single ``>=`` check.
"""

import logging
from enum import IntEnum
from typing import Union


class LogLevel(IntEnum):
    """Ordered severity levels: debug < info < warn < error."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @property
    def label(self) -> str:
        """Upper-case tag rendered inside the ``[LEVEL]`` segment."""
        return self.name

    @property
    def dirname(self) -> str:
        """Lower-case name used for the per-level log subdirectory."""
        return self.name.lower()

    @classmethod
    def coerce(cls, value: Union["LogLevel", str, int]) -> "LogLevel":
        """Convert a level name, LogLevel or stdlib ``logging`` constant.

        Strings are matched case-insensitively; ``"warning"`` is accepted as an
        alias of ``"warn"``. Integers are stdlib logging levels
        (``logging.WARNING`` etc.), which are also the LogLevel values;
        ``logging.CRITICAL`` and other non-member numbers map to the nearest
        level at or below them.

        Raises:
            ValueError: If ``value`` names no known level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key == "WARNING":
                key = "WARN"
            try:
                return cls[key]
            except KeyError:
                valid = ", ".join(level.dirname for level in cls)
                raise ValueError(
                    f"unknown log level {value!r} (expected one of: {valid})"
                ) from None
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_stdlib(value)
        raise ValueError(f"unknown log level {value!r}")

    @classmethod
    def from_stdlib(cls, levelno: int) -> "LogLevel":
        """Map a ``logging`` level number onto the nearest LogLevel at or below it."""
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG
