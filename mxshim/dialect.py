"""
Dialect detection and conditional selection.

mxshim code is written once and bound to one of two array dialects when a
module is imported:

- ``numpy``: arrays are ``numpy.ndarray``; element types are told apart by dtype.
- ``builtin``: arrays are plain Python lists; element types are not tracked.

``when_dialect`` picks one of two fragments and never touches the other, so a
module can bind its implementation at import time::

    is_array = when_dialect(numpy=_ndarray_check, builtin=_list_check)
"""
from __future__ import annotations

from typing import Optional, TypeVar

from . import config as _cfg
from .errors import iae

NUMPY = "numpy"
BUILTIN = "builtin"
DIALECTS = (NUMPY, BUILTIN)

T = TypeVar("T")


def _check(dialect: str) -> str:
    if dialect not in DIALECTS:
        iae(f"Unknown dialect '{dialect}' (expected one of: {', '.join(DIALECTS)})")
    return dialect


def current() -> str:
    """Return the active dialect name from MXSHIM_DIALECT."""
    return _check(_cfg.get("MXSHIM_DIALECT"))


def is_builtin(dialect: Optional[str] = None) -> bool:
    return _check(dialect or current()) == BUILTIN


def when_dialect(numpy: T, builtin: T, dialect: Optional[str] = None) -> T:
    """Return ``builtin`` under the builtin dialect and ``numpy`` otherwise."""
    if is_builtin(dialect):
        return builtin
    return numpy


__all__ = ["NUMPY", "BUILTIN", "DIALECTS", "current", "is_builtin", "when_dialect"]
