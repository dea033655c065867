"""MXSHIM_* environment settings.

Each known variable is declared once in ``_SETTINGS`` with its parser, default
and allowed choices. ``get`` returns the parsed value; ``lookup`` also reports
where the value came from and whether it is one of the allowed choices, which
``mxshim config list`` shows. Tests stub settings with ``monkeypatch.setenv``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional


@dataclass(frozen=True)
class EnvVarMeta:
    name: str
    description: str
    default: str
    parser: Callable[[str], Any]
    choices: Optional[List[str]] = None
    category: str = "general"


@dataclass(frozen=True)
class Setting:
    meta: EnvVarMeta
    raw: str
    value: Any
    from_env: bool
    valid: bool


def _parse_bool(val: str) -> bool:
    return str(val).strip().lower() in ("1", "true", "yes", "on")


def _parse_lower(val: str) -> str:
    return str(val).strip().lower()


def _parse_upper(val: str) -> str:
    return str(val).strip().upper()


_SETTINGS: Dict[str, EnvVarMeta] = {
    meta.name: meta
    for meta in (
        EnvVarMeta(
            name="MXSHIM_DIALECT",
            description="Array dialect: numpy (dtype-distinguished arrays) or builtin (plain lists)",
            default="numpy",
            parser=_parse_lower,
            choices=["numpy", "builtin"],
            category="arrays",
        ),
        EnvVarMeta(
            name="MXSHIM_LOOPGEN_DEBUG",
            description="Log generated c_for loop source at INFO instead of DEBUG",
            default="0",
            parser=_parse_bool,
            category="loops",
        ),
        EnvVarMeta(
            name="MXSHIM_LOG_LEVEL",
            description="Verbosity of the mxshim logger",
            default="INFO",
            parser=_parse_upper,
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            category="logging",
        ),
    )
}


def lookup(name: str) -> Setting:
    """Resolve a known setting; unknown names raise KeyError."""
    meta = _SETTINGS[name]
    raw = os.environ.get(name)
    from_env = raw is not None
    if raw is None:
        raw = meta.default
    value = meta.parser(raw)
    valid = not meta.choices or value in meta.choices
    return Setting(meta, raw, value, from_env, valid)


def get(name: str) -> Any:
    """Parsed value of ``name``; unregistered names fall through to os.environ."""
    if name not in _SETTINGS:
        return os.environ.get(name)
    return lookup(name).value


def describe() -> List[Dict[str, Any]]:
    rows = []
    for name in _SETTINGS:
        s = lookup(name)
        rows.append(
            {
                "name": name,
                "category": s.meta.category,
                "default": s.meta.default,
                "current": s.value,
                "source": "env" if s.from_env else "default",
                "valid": s.valid,
                "description": s.meta.description,
                "choices": s.meta.choices or [],
            }
        )
    return sorted(rows, key=lambda r: (r["category"], r["name"]))


__all__ = ["EnvVarMeta", "Setting", "lookup", "get", "describe"]
