"""
Logger hierarchy for mxshim.

Only the ``mxshim`` parent logger owns a handler; it is configured once, on
the first ``get_logger`` call, with a coloredlogs formatter and the level from
MXSHIM_LOG_LEVEL. Submodule loggers (``mxshim.errors``, ``mxshim.loopgen``,
...) carry no handlers and propagate to the parent, so ``set_level`` on the
parent governs all of them.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

import coloredlogs

from .. import config as _cfg

ROOT_NAME = "mxshim"
_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_root: Optional[logging.Logger] = None


def _resolve_level(level: Union[str, int, None]) -> int:
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _configure_root() -> logging.Logger:
    global _root
    if _root is None:
        root = logging.getLogger(ROOT_NAME)
        level = _resolve_level(_cfg.get("MXSHIM_LOG_LEVEL"))
        root.setLevel(level)
        if not root.handlers:
            coloredlogs.install(level=level, logger=root, fmt=_FMT)
        root.propagate = False
        _root = root
    return _root


def get_logger(name: str = ROOT_NAME) -> logging.Logger:
    """Return the logger for ``name``, nested under the ``mxshim`` parent."""
    root = _configure_root()
    if name == ROOT_NAME:
        return root
    if not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)


def set_level(level: Union[str, int]) -> int:
    """Set the level of the parent logger and its handlers; returns the numeric level."""
    root = _configure_root()
    resolved = _resolve_level(level)
    root.setLevel(resolved)
    for handler in root.handlers:
        handler.setLevel(resolved)
    return resolved


__all__ = ["ROOT_NAME", "get_logger", "set_level"]
