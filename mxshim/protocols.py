"""
Zero-dimensional extraction protocol.

``get_0d`` pulls the single scalar out of a zero-dimensional container. It is
a ``functools.singledispatch`` function so array backends can register their
own container types::

    @get_0d.register
    def _(x: MyScalarBox):
        return x.value
"""
from __future__ import annotations

import numbers
from functools import singledispatch
from typing import Any

import numpy as np

from .errors import iae


@singledispatch
def get_0d(x: Any) -> Any:
    method = getattr(x, "get_0d", None)
    if callable(method):
        return method()
    iae(f"Not a zero-dimensional array: {type(x).__name__}")


@get_0d.register
def _(x: np.ndarray) -> Any:
    if x.ndim != 0:
        iae(f"Not a zero-dimensional array: shape {x.shape}")
    return x[()]


@get_0d.register(numbers.Number)
@get_0d.register(np.generic)
def _(x) -> Any:
    return x


__all__ = ["get_0d"]
