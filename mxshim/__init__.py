"""
Top-level mxshim package exports (lightweight).

``mxshim.arrays`` binds its predicates to the dialect when it is first
imported, so public symbols are loaded lazily on first access rather than at
package import.
"""
from __future__ import annotations

import importlib
from typing import Any

__version__ = "0.1.0"

_EXPORTS = {
    "error": "errors",
    "error_raised": "errors",
    "attempt": "errors",
    "todo": "errors",
    "iae": "errors",
    "iae_when_not": "errors",
    "MxShimError": "errors",
    "IllegalArgumentError": "errors",
    "NotYetImplementedError": "errors",
    "when_dialect": "dialect",
    "doseq_indexed": "iteration",
    "c_for": "iteration",
    "compile_c_for": "loopgen",
    "is_object_array": "arrays",
    "is_long_array": "arrays",
    "is_double_array": "arrays",
    "get_0d": "protocols",
    "scalar_coerce": "scalars",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> Any:  # lazy attribute loader
    module = _EXPORTS.get(name)
    if module is None:
        raise AttributeError(f"module 'mxshim' has no attribute {name!r}")
    value = getattr(importlib.import_module(f"{__name__}.{module}"), name)
    # Cache on the package module to avoid repeated imports
    globals()[name] = value
    return value
