"""
Array runtime type predicates.

Under the numpy dialect each predicate is an exact check: the value's type
must be ``numpy.ndarray`` itself (not a subclass such as ``numpy.matrix`` or
a masked array) and its dtype must equal the cached handle.

Under the builtin dialect plain lists carry no element type, so all three
predicates reduce to ``type(x) is list``. The dialect is bound when this
module is imported.
"""
from __future__ import annotations

from typing import Any

import numpy as np

from .dialect import current, when_dialect
from .utils.logging import get_logger

_log = get_logger("mxshim.arrays")

# Resolved once at import; never reassigned.
NDARRAY_TYPE = np.ndarray
OBJECT_DTYPE = np.dtype(object)
INT64_DTYPE = np.dtype(np.int64)
FLOAT64_DTYPE = np.dtype(np.float64)


def _ndarray_with(dtype: np.dtype, name: str):
    def check(x: Any) -> bool:
        return type(x) is NDARRAY_TYPE and x.dtype == dtype

    check.__name__ = check.__qualname__ = name
    return check


def _is_list(x: Any) -> bool:
    return type(x) is list


DIALECT = current()

is_object_array = when_dialect(
    numpy=_ndarray_with(OBJECT_DTYPE, "is_object_array"), builtin=_is_list, dialect=DIALECT
)
is_long_array = when_dialect(
    numpy=_ndarray_with(INT64_DTYPE, "is_long_array"), builtin=_is_list, dialect=DIALECT
)
is_double_array = when_dialect(
    numpy=_ndarray_with(FLOAT64_DTYPE, "is_double_array"), builtin=_is_list, dialect=DIALECT
)

_log.debug("array predicates bound for dialect %s", DIALECT)

__all__ = [
    "DIALECT",
    "NDARRAY_TYPE",
    "OBJECT_DTYPE",
    "INT64_DTYPE",
    "FLOAT64_DTYPE",
    "is_object_array",
    "is_long_array",
    "is_double_array",
]
