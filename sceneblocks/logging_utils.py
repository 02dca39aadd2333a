"""Debug tracing of the compiler's module-level entry points."""

from __future__ import annotations

import functools
import inspect
import logging
import reprlib
from typing import Any, Callable, Iterable, MutableMapping, Optional, TypeVar

from .ast import Block, Fragment, Variable, Workspace

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxstring = 80
_repr.maxother = 80
_repr.maxlist = 6
_repr.maxdict = 6


def summarize(value: Any) -> str:
    """Short description of ``value`` that never walks a block graph."""
    if isinstance(value, Block):
        following = f" -> {value.next.id}" if value.next is not None else ""
        return f"<{value.kind} {value.id}{following}>"
    if isinstance(value, Workspace):
        return f"Workspace({len(value.blocks)} top-level, {len(value.variables)} variable(s))"
    if isinstance(value, Fragment):
        return f"Fragment({_repr.repr(value.code)}, order={value.order})"
    if isinstance(value, Variable):
        type_name = value.type.value if value.type is not None else "any"
        return f"Variable({value.name!r}: {type_name})"
    return _repr.repr(value)


def debug_log_call(logger: logging.Logger, name: Optional[str] = None) -> Callable[[F], F]:
    """Log arguments and result of each call at DEBUG level."""

    def decorator(func: F) -> F:
        label = name or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            shown = [summarize(arg) for arg in args]
            shown.extend(f"{key}={summarize(value)}" for key, value in kwargs.items())
            logger.debug("-> %s(%s)", label, ", ".join(shown))
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                logger.debug("<- %s raised %s: %s", label, type(exc).__name__, exc)
                raise
            logger.debug("<- %s = %s", label, summarize(result))
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: logging.Logger,
    skip: Iterable[str] = (),
) -> None:
    """Wrap the public functions defined in a module with :func:`debug_log_call`.

    Call it at the bottom of a module as ``apply_debug_logging(globals(), logger=logger)``.
    Imported functions and names starting with ``_`` are left alone.
    """
    module = namespace.get("__name__")
    skipped = set(skip)
    for attr, value in list(namespace.items()):
        if attr.startswith("_") or attr in skipped:
            continue
        if inspect.isfunction(value) and value.__module__ == module:
            namespace[attr] = debug_log_call(logger, name=attr)(value)
