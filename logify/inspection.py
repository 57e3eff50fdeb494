"""inspection.py - Run a callable under trace and log the shape of its call.

Each wrapper invokes its target, describes the arguments and the result, and
emits one line on the inspection logger's debug channel::

    [FnInspection] add <number, number> => 5 <number>

The eight public wrappers differ along three axes:

    callable   free function (``inspect_fn*``) or named method on an object
               (``inspect_method*``)
    mode       synchronous, or ``*_async`` coroutines that await the result
    depth      shallow one-word tags, or ``*_detailed`` structural
               descriptions such as ``{ a: number, b: string }``

Failures of the target are logged on the error channel with the traceback and
then absorbed: the wrapper returns None and the caller never sees the
exception. Pass ``reraise=True`` to ``inspected`` to get a TargetInvocationError
instead.

Method wrappers look the member up before calling anything. A missing or
non-callable member raises NotInvocableError immediately; that is a usage
error and is never absorbed.
"""

import inspect
import traceback
from enum import Enum
from functools import wraps
from typing import Any, Callable, Dict, Optional, Tuple

from .formatter import describe_type, primitive_tag, render
from .internals import LogifyError
from .levels import LogLevel
from .logger import Logger

_inspection_logger: Optional[Logger] = None


class InspectionKind(Enum):
    FN = "Fn"
    ASYNC_FN = "AsyncFn"
    METHOD = "Method"
    ASYNC_METHOD = "AsyncMethod"

    @property
    def tag(self) -> str:
        return f"[{self.value}Inspection]"


class NotInvocableError(LogifyError, TypeError):
    """The requested member does not exist on the target or is not callable."""

    def __init__(self, target: Any, name: str) -> None:
        self.target = target
        self.name = name
        super().__init__(f"{type(target).__name__}.{name} is not an invocable member")


class TargetInvocationError(LogifyError):
    """Raised in place of a target's own exception when ``reraise`` is enabled."""

    def __init__(self, target_name: str, original: Exception) -> None:
        self.target_name = target_name
        self.original = original
        super().__init__(f"{target_name} raised {type(original).__name__}: {original}")


def get_inspection_logger() -> Logger:
    """Return the logger wrappers write to, creating a debug-level one on first use."""
    global _inspection_logger
    if _inspection_logger is None:
        _inspection_logger = Logger(level=LogLevel.DEBUG)
    return _inspection_logger


def set_inspection_logger(logger: Optional[Logger]) -> None:
    """Replace the logger used by the wrappers. None restores lazy creation."""
    global _inspection_logger
    _inspection_logger = logger


def lookup_invocable(target: Any, name: str) -> Optional[Callable]:
    """Return the bound callable ``target.<name>``, or None if there is none.

    A target class may define ``__lookup_invocable__(self, name)`` to control
    which members are exposed; its answer is used as-is.
    """
    hook = getattr(type(target), "__lookup_invocable__", None)
    if hook is not None:
        return hook(target, name)
    try:
        member = getattr(target, name)
    except AttributeError:
        return None
    return member if callable(member) else None


# ---------------------------------------------------------------------------
# Public wrappers
# ---------------------------------------------------------------------------


def inspect_fn(func: Callable, /, *args: Any, **kwargs: Any) -> Any:
    """Call ``func(*args, **kwargs)`` and log its shape with one-word type tags.

    Args:
        func: The function to invoke.
        *args: Positional arguments passed through to ``func``.
        **kwargs: Keyword arguments passed through to ``func``.

    Returns:
        Whatever ``func`` returned. If ``func`` raised an Exception, the
        failure is logged on the error channel and None is returned instead;
        the exception never reaches the caller.

    Example:
        >>> inspect_fn(add, 2, 3)   # logs "[FnInspection] add <number, number> => 5 <number>"
        5
    """
    return _run(InspectionKind.FN, func, _callable_name(func), args, kwargs, False)


def inspect_fn_detailed(func: Callable, /, *args: Any, **kwargs: Any) -> Any:
    """Like ``inspect_fn`` but describes composites structurally.

    Args:
        func: The function to invoke.
        *args: Positional arguments passed through to ``func``.
        **kwargs: Keyword arguments passed through to ``func``.

    Returns:
        The result of ``func``, or None if it raised (the failure is logged
        and absorbed).

    Example:
        >>> inspect_fn_detailed(lambda: {"a": 1})
        ... # logs "[FnInspection] <lambda> <> => {'a': 1} <{ a: number }>"
    """
    return _run(InspectionKind.FN, func, _callable_name(func), args, kwargs, True)


async def inspect_fn_async(func: Callable, /, *args: Any, **kwargs: Any) -> Any:
    """Call ``func``, await its result and log the shape with one-word tags.

    Plain (non-coroutine) functions are accepted too; their result is used
    without awaiting.

    Args:
        func: Coroutine function (or plain callable) to invoke.
        *args: Positional arguments passed through to ``func``.
        **kwargs: Keyword arguments passed through to ``func``.

    Returns:
        The awaited result, or None if the call or the awaited coroutine
        raised. The failure is logged and absorbed.
    """
    return await _run_async(
        InspectionKind.ASYNC_FN, func, _callable_name(func), args, kwargs, False
    )


async def inspect_fn_async_detailed(func: Callable, /, *args: Any, **kwargs: Any) -> Any:
    """Async counterpart of ``inspect_fn_detailed``.

    Args:
        func: Coroutine function (or plain callable) to invoke.
        *args: Positional arguments passed through to ``func``.
        **kwargs: Keyword arguments passed through to ``func``.

    Returns:
        The awaited result, or None if it failed (logged and absorbed).
    """
    return await _run_async(
        InspectionKind.ASYNC_FN, func, _callable_name(func), args, kwargs, True
    )


def inspect_method(target: Any, method_name: str, /, *args: Any, **kwargs: Any) -> Any:
    """Call ``target.<method_name>(*args, **kwargs)`` and log its shape.

    The member is resolved with ``lookup_invocable`` before anything runs.

    Args:
        target: Object owning the method.
        method_name: Name of the member to invoke.
        *args: Positional arguments passed through to the method.
        **kwargs: Keyword arguments passed through to the method.

    Returns:
        The method's result, or None if it raised (logged and absorbed).

    Raises:
        NotInvocableError: If ``target`` has no callable member of that name.
            Raised before invocation and never absorbed.

    Example:
        >>> inspect_method(calc, "scale", 4)
        ... # logs "[MethodInspection] Calculator.scale <number> => 12 <number>"
        12
    """
    method = _resolve_method(target, method_name)
    name = _member_name(target, method_name)
    return _run(InspectionKind.METHOD, method, name, args, kwargs, False)


def inspect_method_detailed(
    target: Any, method_name: str, /, *args: Any, **kwargs: Any
) -> Any:
    """Like ``inspect_method`` but describes composites structurally.

    Args:
        target: Object owning the method.
        method_name: Name of the member to invoke.
        *args: Positional arguments passed through to the method.
        **kwargs: Keyword arguments passed through to the method.

    Returns:
        The method's result, or None if it raised (logged and absorbed).

    Raises:
        NotInvocableError: If ``target`` has no callable member of that name.
    """
    method = _resolve_method(target, method_name)
    name = _member_name(target, method_name)
    return _run(InspectionKind.METHOD, method, name, args, kwargs, True)


async def inspect_method_async(
    target: Any, method_name: str, /, *args: Any, **kwargs: Any
) -> Any:
    """Call an async method, await it and log its shape with one-word tags.

    Args:
        target: Object owning the method.
        method_name: Name of the member to invoke.
        *args: Positional arguments passed through to the method.
        **kwargs: Keyword arguments passed through to the method.

    Returns:
        The awaited result, or None if the coroutine raised (logged and
        absorbed).

    Raises:
        NotInvocableError: If ``target`` has no callable member of that name.
    """
    method = _resolve_method(target, method_name)
    name = _member_name(target, method_name)
    return await _run_async(InspectionKind.ASYNC_METHOD, method, name, args, kwargs, False)


async def inspect_method_async_detailed(
    target: Any, method_name: str, /, *args: Any, **kwargs: Any
) -> Any:
    """Async counterpart of ``inspect_method_detailed``.

    Args:
        target: Object owning the method.
        method_name: Name of the member to invoke.
        *args: Positional arguments passed through to the method.
        **kwargs: Keyword arguments passed through to the method.

    Returns:
        The awaited result, or None if the coroutine raised (logged and
        absorbed).

    Raises:
        NotInvocableError: If ``target`` has no callable member of that name.
    """
    method = _resolve_method(target, method_name)
    name = _member_name(target, method_name)
    return await _run_async(InspectionKind.ASYNC_METHOD, method, name, args, kwargs, True)


def inspected(
    func: Optional[Callable] = None,
    *,
    detailed: bool = False,
    logger: Optional[Logger] = None,
    reraise: bool = False,
) -> Callable:
    """Decorator form of the function wrappers.

    Works bare (``@inspected``) or configured
    (``@inspected(detailed=True, reraise=True)``). Coroutine functions get the
    async wrapper, everything else the sync one.

    Args:
        func: The function being decorated when used without parentheses.
        detailed: Use structural type descriptions instead of one-word tags.
        logger: Logger to write to. Defaults to ``get_inspection_logger()``
            resolved at call time.
        reraise: After logging a failure, raise TargetInvocationError chained
            to the original exception instead of returning None.

    Returns:
        The wrapped function when ``func`` is given, otherwise a decorator.

    Raises:
        TargetInvocationError: From the wrapped function, only when
            ``reraise`` is True and the target raised.

    Example:
        >>> @inspected
        ... def add(a, b):
        ...     return a + b
        >>> add(2, 3)   # logs "[FnInspection] add <number, number> => 5 <number>"
        5
    """

    def decorate(fn: Callable) -> Callable:
        name = _callable_name(fn)

        if inspect.iscoroutinefunction(fn):

            @wraps(fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await _run_async(
                    InspectionKind.ASYNC_FN, fn, name, args, kwargs,
                    detailed, logger, reraise,
                )

            return async_wrapper

        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return _run(
                InspectionKind.FN, fn, name, args, kwargs, detailed, logger, reraise
            )

        return wrapper

    if func is not None:
        return decorate(func)
    return decorate


# ---------------------------------------------------------------------------
# Shared algorithm
# ---------------------------------------------------------------------------


def _run(
    kind: InspectionKind,
    func: Callable,
    name: str,
    args: Tuple[Any, ...],
    kwargs: Dict[str, Any],
    detailed: bool,
    logger: Optional[Logger] = None,
    reraise: bool = False,
) -> Any:
    """Invoke ``func`` and emit either the trace line or the failure.

    Args:
        kind: Selects the ``[<Kind>Inspection]`` prefix.
        func: Callable to invoke, already bound for methods.
        name: Name rendered in the trace line.
        args: Positional arguments for ``func``.
        kwargs: Keyword arguments for ``func``.
        detailed: Structural descriptions instead of one-word tags.
        logger: Destination logger; None means ``get_inspection_logger()``.
        reraise: Raise TargetInvocationError after logging a failure.

    Returns:
        The result of ``func``, or None when it raised and ``reraise`` is off.
    """
    logger = logger or get_inspection_logger()
    try:
        result = func(*args, **kwargs)
    except Exception as exc:
        _report_failure(logger, name, exc, reraise)
        return None
    # Describing the result stays outside the try: only target failures are absorbed.
    logger.debug(format_trace(kind, name, args, kwargs, result, detailed))
    return result


async def _run_async(
    kind: InspectionKind,
    func: Callable[..., Any],
    name: str,
    args: Tuple[Any, ...],
    kwargs: Dict[str, Any],
    detailed: bool,
    logger: Optional[Logger] = None,
    reraise: bool = False,
) -> Any:
    """Async variant of ``_run``; awaits the result when it is awaitable.

    Args and return value are the same as for ``_run``. A coroutine that
    raises while being awaited counts as a failure of the target.
    """
    logger = logger or get_inspection_logger()
    try:
        result = func(*args, **kwargs)
        if inspect.isawaitable(result):
            result = await result
    except Exception as exc:
        _report_failure(logger, name, exc, reraise)
        return None
    logger.debug(format_trace(kind, name, args, kwargs, result, detailed))
    return result


def format_trace(
    kind: InspectionKind,
    name: str,
    args: Tuple[Any, ...],
    kwargs: Dict[str, Any],
    result: Any,
    detailed: bool = False,
) -> str:
    """Render ``[<Kind>Inspection] name <arg types> => result <result type>``.

    Args:
        kind: Selects the prefix tag.
        name: Callable or ``Class.member`` name.
        args: Positional arguments, described in call order.
        kwargs: Keyword arguments, described after positionals as ``key=<type>``.
        result: Value returned by the target.
        detailed: Use ``describe_type`` instead of ``primitive_tag``.

    Returns:
        The single-line trace text.

    Example:
        >>> format_trace(InspectionKind.FN, "add", (2, 3), {}, 5)
        '[FnInspection] add <number, number> => 5 <number>'
    """
    describe = describe_type if detailed else primitive_tag
    arg_types = [describe(a) for a in args]
    arg_types.extend(f"{k}={describe(v)}" for k, v in kwargs.items())
    return (
        f"{kind.tag} {name} <{', '.join(arg_types)}> => "
        f"{render(result)} <{describe(result)}>"
    )


def _report_failure(logger: Logger, name: str, exc: Exception, reraise: bool) -> None:
    """Log ``<ExcType>: <message>`` and the traceback on the error channel.

    Raises:
        TargetInvocationError: When ``reraise`` is True, chained to ``exc``.
    """
    trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error(f"{type(exc).__name__}: {exc}\n{trace.rstrip()}")
    if reraise:
        raise TargetInvocationError(name, exc) from exc


def _resolve_method(target: Any, method_name: str) -> Callable:
    """Return the bound member or raise NotInvocableError before any call happens."""
    method = lookup_invocable(target, method_name)
    if method is None:
        raise NotInvocableError(target, method_name)
    return method


def _callable_name(func: Callable) -> str:
    return getattr(func, "__name__", None) or repr(func)


def _member_name(target: Any, method_name: str) -> str:
    return f"{type(target).__name__}.{method_name}"
