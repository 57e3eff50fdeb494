"""logify - Leveled console/file logging and call inspection for development.

Two pieces work together:

    Logger       gates lines by level and writes them, colored, to the console
                 or, uncolored, to ``<project root>/debug_logs/<level>/<YYYYMMDD>.log``.
    inspect_*    run a function or method, then log its argument types, result
                 and result type as a single debug line.

Quick start:
    from logify import Logger, inspect_fn, inspected

    log = Logger(level="debug", context="api")
    log.info("server started")
    log.warn_to_file("cache cold")

    def add(a, b):
        return a + b

    inspect_fn(add, 2, 3)
    # [FnInspection] add <number, number> => 5 <number>

    @inspected(detailed=True)
    async def fetch_user(user_id):
        ...

Exported names:
    Logger, LoggerOptions, LogLevel:   the logger and its configuration.
    ConsoleSink, FileSink, LogSink:    line destinations used by Logger.
    LogifyHandler:                     stdlib ``logging`` bridge into a Logger.
    inspect_fn, inspect_fn_async, inspect_method, inspect_method_async and
    their ``*_detailed`` variants:     the inspection wrappers.
    inspected:                         decorator form of the function wrappers.
    describe_type, render, classify:   value description helpers.
"""

from .levels import LogLevel
from .internals import LogifyError, RootNotFoundError, find_project_root
from .formatter import ValueKind, classify, describe_type, primitive_tag, render
from .sinks import ConsoleSink, FileSink, LogSink
from .logger import Logger, LoggerOptions
from .handler import LogifyHandler
from .inspection import (
    InspectionKind,
    NotInvocableError,
    TargetInvocationError,
    get_inspection_logger,
    inspect_fn,
    inspect_fn_async,
    inspect_fn_async_detailed,
    inspect_fn_detailed,
    inspect_method,
    inspect_method_async,
    inspect_method_async_detailed,
    inspect_method_detailed,
    inspected,
    lookup_invocable,
    set_inspection_logger,
)

__all__ = [
    "LogLevel",
    "LogifyError",
    "RootNotFoundError",
    "find_project_root",
    "ValueKind",
    "classify",
    "describe_type",
    "primitive_tag",
    "render",
    "ConsoleSink",
    "FileSink",
    "LogSink",
    "Logger",
    "LoggerOptions",
    "LogifyHandler",
    "InspectionKind",
    "NotInvocableError",
    "TargetInvocationError",
    "get_inspection_logger",
    "set_inspection_logger",
    "inspect_fn",
    "inspect_fn_async",
    "inspect_fn_async_detailed",
    "inspect_fn_detailed",
    "inspect_method",
    "inspect_method_async",
    "inspect_method_async_detailed",
    "inspect_method_detailed",
    "inspected",
    "lookup_invocable",
]
__version__ = "0.1.0"
