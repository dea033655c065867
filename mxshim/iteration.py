"""
Loop helpers: indexed iteration and C-style nested loops.

``c_for`` takes its loop levels as one flat list, four entries per level::

    c_for(
        ["i", 0, lambda v: v.i < rows, lambda v: v.i + 1,
         "j", 0, lambda v: v.j < cols, lambda v: v.j + 1],
        lambda v: out.__setitem__((v.i, v.j), v.i * cols + v.j),
    )

``init`` may be a plain value or a callable of the outer bindings, so inner
levels can start from outer indices (``lambda v: v.i`` for a triangle).
For hot loops over numpy buffers see ``mxshim.loopgen.compile_c_for``.
"""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Callable, Iterable, List, NamedTuple, Sequence

from .errors import iae_when_not


def doseq_indexed(items: Iterable[Any], body: Callable[[Any, int], Any]) -> None:
    """Call ``body(item, index)`` for every item, in order."""
    for index, item in enumerate(items):
        body(item, index)


class LoopClause(NamedTuple):
    name: str
    init: Any
    test: Callable[[SimpleNamespace], Any]
    step: Callable[[SimpleNamespace], Any]


def parse_clauses(clauses: Sequence[Any], *, callables: bool = True) -> List[LoopClause]:
    """Group a flat clause list into ``LoopClause`` records, validating each one.

    With ``callables=False`` the test/step slots are not checked, which is how
    ``loopgen`` reuses this for its string expressions.
    """
    flat = list(clauses)
    iae_when_not(len(flat) > 0, "c_for needs at least one loop clause")
    iae_when_not(
        len(flat) % 4 == 0,
        f"c_for clauses come in groups of four (name, init, test, step); got {len(flat)} items",
    )
    parsed: List[LoopClause] = []
    seen = set()
    for pos in range(0, len(flat), 4):
        clause = LoopClause(*flat[pos : pos + 4])
        iae_when_not(
            isinstance(clause.name, str) and clause.name.isidentifier(),
            f"loop binding name must be an identifier: {clause.name!r}",
        )
        iae_when_not(clause.name not in seen, f"duplicate loop binding name: {clause.name}")
        if callables:
            iae_when_not(callable(clause.test), f"test for '{clause.name}' must be callable")
            iae_when_not(callable(clause.step), f"step for '{clause.name}' must be callable")
        seen.add(clause.name)
        parsed.append(clause)
    return parsed


def _run_level(levels: List[LoopClause], depth: int, env: SimpleNamespace, body: Callable) -> None:
    clause = levels[depth]
    value = clause.init(env) if callable(clause.init) else clause.init
    setattr(env, clause.name, value)
    last = depth == len(levels) - 1
    while clause.test(env):
        if last:
            body(env)
        else:
            _run_level(levels, depth + 1, env, body)
        setattr(env, clause.name, clause.step(env))
    # binding goes out of scope once its level finishes
    delattr(env, clause.name)


def c_for(clauses: Sequence[Any], body: Callable[[SimpleNamespace], Any]) -> None:
    """Run ``body`` inside nested C-style loops declared as a flat clause list.

    Levels nest outermost first. Each level evaluates its test before every
    iteration and advances with its step once the inner levels finish. The
    body sees all bindings through a single namespace argument.
    """
    levels = parse_clauses(clauses)
    _run_level(levels, 0, SimpleNamespace(), body)


__all__ = ["doseq_indexed", "c_for", "parse_clauses", "LoopClause"]
