"""
Error types and raising/detecting helpers.

Two error kinds exist: ``MxShimError`` for generic runtime failures and
``IllegalArgumentError`` for rejected arguments. Every helper here raises and
lets the error propagate; ``attempt`` and ``error_raised`` are the only
places that catch.

Argument checks are written as boolean expressions guarded by
``iae_when_not``::

    iae_when_not(n >= 0, f"negative length: {n}")
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, NoReturn, Optional, Type

from .utils.logging import get_logger

_log = get_logger("mxshim.errors")

TODO_MESSAGE = "TODO: Not yet implemented"


class MxShimError(RuntimeError):
    """Generic runtime error raised by mxshim helpers."""


class IllegalArgumentError(MxShimError, ValueError):
    """An argument failed a precondition check."""


class NotYetImplementedError(MxShimError, NotImplementedError):
    """Raised by ``todo`` for code paths that have no implementation yet."""


def error(*vals: Any, exc_type: Type[MxShimError] = MxShimError) -> NoReturn:
    """Raise ``exc_type`` with the concatenated ``str`` of all values."""
    message = "".join(str(v) for v in vals)
    _log.debug("raising %s: %s", exc_type.__name__, message)
    raise exc_type(message)


@dataclass
class Outcome:
    ok: bool
    value: Any = None
    error: Optional[BaseException] = None


def attempt(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """Call ``fn`` and capture either its return value or the exception it raised."""
    try:
        return Outcome(True, fn(*args, **kwargs))
    except Exception as e:
        return Outcome(False, None, e)


def error_raised(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
    """Return True if calling ``fn`` raised any Exception, False otherwise.

    The exception itself is discarded; use ``attempt`` when the caller needs it.
    """
    return not attempt(fn, *args, **kwargs).ok


def todo(*vals: Any) -> NoReturn:
    if vals:
        error(TODO_MESSAGE, ": ", *vals, exc_type=NotYetImplementedError)
    error(TODO_MESSAGE, exc_type=NotYetImplementedError)


def iae(message: str) -> NoReturn:
    error(message, exc_type=IllegalArgumentError)


def iae_when_not(predicate: Any, message: str) -> None:
    if not predicate:
        iae(message)


__all__ = [
    "MxShimError",
    "IllegalArgumentError",
    "NotYetImplementedError",
    "Outcome",
    "TODO_MESSAGE",
    "error",
    "attempt",
    "error_raised",
    "todo",
    "iae",
    "iae_when_not",
]
