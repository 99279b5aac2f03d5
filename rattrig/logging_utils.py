"""Optional diagnostics for the formula library.

Nothing in :mod:`rattrig` configures logging or wraps itself. An embedding
application opts in by calling :func:`instrument`, which hands back wrapped
copies of a module's functions, and by configuring handlers with
:func:`init_logger`. Wrapped functions return exactly what the originals
return.
"""

from __future__ import annotations

import inspect
import logging
import os
import reprlib
from functools import wraps
from types import ModuleType, SimpleNamespace
from typing import Any, Callable, Iterable, Mapping, MutableMapping, Optional, Sequence, Tuple, TypeVar, Union, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

LOG_LEVEL_ENV = "RATTRIG_LOG"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxtuple = 10
_repr.maxlist = 10


def _sequence_brackets(value: Sequence[Any]) -> Tuple[str, str]:
    if isinstance(value, tuple):
        return "(", ")"
    return "[", "]"


def _safe_repr(value: Any, *, max_items: int = 5, max_length: int = 400) -> str:
    if isinstance(value, np.ndarray):
        summary = f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
        if 0 < value.size <= max_items:
            summary += f", values={_repr.repr(value.tolist())}"
        return summary

    if isinstance(value, (list, tuple)):
        open_br, close_br = _sequence_brackets(value)
        items = []
        for idx, item in enumerate(value):
            if idx >= max_items:
                items.append("...")
                break
            items.append(_safe_repr(item))
        return f"{open_br}{', '.join(items)}{close_br}"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append(
            "kwargs={"
            + ", ".join(f"{key}={_safe_repr(value)}" for key, value in kwargs.items())
            + "}"
        )
    if not parts:
        return "no-args"
    return ", ".join(parts)


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG records for calls to the wrapped function."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.exception("Exception in %s", qualname)
                raise
            if logger.isEnabledFor(logging.DEBUG):
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def _public_functions(source: Union[ModuleType, Mapping[str, Any]]) -> Iterable[Tuple[str, Callable[..., Any]]]:
    if isinstance(source, ModuleType):
        names = getattr(source, "__all__", None) or [n for n in vars(source) if not n.startswith("_")]
        namespace: Mapping[str, Any] = vars(source)
    else:
        names = [n for n in source if not n.startswith("_")]
        namespace = source
    for name in names:
        value = namespace.get(name)
        if inspect.isfunction(value):
            yield name, value


def instrument(
    source: Union[ModuleType, Mapping[str, Any]],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> SimpleNamespace:
    """Return debug-logging wrappers for the public functions of ``source``.

    ``source`` is a module or a name-to-callable mapping; it is left untouched.
    """

    if isinstance(source, ModuleType):
        default_name = source.__name__
    else:
        default_name = __name__
    logger = logger or logging.getLogger(default_name)
    skip_set = set(skip or [])

    wrapped = {
        name: debug_log_call(logger, name=name)(func)
        for name, func in _public_functions(source)
        if name not in skip_set
    }
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Instrumented %d callables from %s", len(wrapped), default_name)
    return SimpleNamespace(**wrapped)


def _resolve_level(level: Optional[str]) -> int:
    name = level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    return getattr(logging, name.upper(), logging.INFO)


def init_logger(level: Optional[str] = None) -> None:
    """Configure the root logger from ``level`` or ``$RATTRIG_LOG`` (default INFO)."""

    logging.basicConfig(level=_resolve_level(level), format=LOG_FORMAT, force=True)


def try_init_logger(level: Optional[str] = None) -> bool:
    """Like :func:`init_logger`, but leave an already configured root logger alone."""

    if is_logger_initialized():
        return False
    logging.basicConfig(level=_resolve_level(level), format=LOG_FORMAT)
    return True


def is_logger_initialized() -> bool:
    return bool(logging.getLogger().handlers)


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVEL_ENV",
    "debug_log_call",
    "init_logger",
    "instrument",
    "is_logger_initialized",
    "try_init_logger",
]
