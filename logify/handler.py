"""handler.py - Route standard ``logging`` records into a logify Logger.

LogifyHandler lets existing code that logs through the standard library share
the same console format, level gate and log files as code that uses a Logger
directly.

Typical usage::

    import logging
    from logify import Logger, LogifyHandler

    logging.getLogger().addHandler(LogifyHandler(Logger(level="debug")))
    logging.getLogger("payments").warning("retrying charge")
    # [2026-01-19 10:15:02] [WARN] payments: retrying charge
"""

import logging
from typing import Optional

from .levels import LogLevel
from .logger import Logger


class LogifyHandler(logging.Handler):
    """A logging.Handler that forwards each record to a logify Logger.

    Level mapping: DEBUG -> debug, INFO -> info, WARNING -> warn,
    ERROR and CRITICAL -> error. Records below the Logger's own level are
    dropped by the Logger's gate, independently of this handler's level.

    Attributes:
        _target (Logger): Logger receiving the records.
        _to_file (bool): Also append each record to the Logger's file sink.
    """

    def __init__(
        self,
        target: Logger,
        to_file: bool = False,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level)
        self._target = target
        self._to_file = to_file

    @property
    def target(self) -> Logger:
        return self._target

    def emit(self, record: logging.LogRecord) -> None:
        """Forward ``record`` to the target Logger, and to its file sink when enabled.

        Args:
            record: The LogRecord produced by the logging framework.
        """
        try:
            level = LogLevel.from_stdlib(record.levelno)
            message = self._message(record)
            self._target.log(level, message)
            if self._to_file:
                self._target.log_to_file(level, message)
        except Exception:
            self.handleError(record)

    def _message(self, record: logging.LogRecord) -> str:
        """Render ``name: message`` plus the traceback when exc_info is attached."""
        msg = f"{record.name}: {record.getMessage()}"
        exc_text: Optional[str] = None
        if record.exc_info and record.exc_info[1]:
            exc_text = logging.Formatter().formatException(record.exc_info)
        elif record.exc_text:
            exc_text = record.exc_text
        if exc_text:
            msg = f"{msg}\n{exc_text}"
        return msg
