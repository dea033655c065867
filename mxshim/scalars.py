from __future__ import annotations

import numbers
from typing import Any

from . import protocols


def scalar_coerce(x: Any) -> Any:
    """Return x if it is already a number, else the scalar inside a 0-d container."""
    if isinstance(x, numbers.Number):
        return x
    return protocols.get_0d(x)


__all__ = ["scalar_coerce"]
