"""
Code generation for C-style nested loops.

``compile_c_for`` is the expression-string counterpart of
``mxshim.iteration.c_for``: instead of calling closures per iteration it
renders the loop nest as Python source, compiles it once and returns a plain
function. Use it for hot loops over index-addressable buffers::

    scale = compile_c_for(
        ["i", "0", "i < a.shape[0]", "i + 1",
         "j", "0", "j < a.shape[1]", "j + 1"],
        "out[i, j] = a[i, j] * k",
        params=("a", "out", "k"),
    )
    scale(a, out, 2.0)

Rendered source is kept on the returned function as ``__source__``.
"""
from __future__ import annotations

import textwrap
from typing import Any, Callable, Dict, Sequence

from jinja2 import Template

from . import config as _cfg
from .errors import iae, iae_when_not
from .iteration import parse_clauses
from .utils.logging import get_logger

_log = get_logger("mxshim.loopgen")

# Each level advances at the top of its next pass, so `continue` in the body
# still runs the step and `break` leaves without it.
_LOOP_TEMPLATE = Template(
    """\
def {{ name }}({{ params | join(', ') }}):
{%- for clause in clauses %}
{%- set pad = '    ' * (loop.index0 + 1) %}
{%- set flag = '_' ~ clause.name ~ '_started' %}
{{ pad }}{{ clause.name }} = {{ clause.init }}
{{ pad }}{{ flag }} = False
{{ pad }}while True:
{{ pad }}    if {{ flag }}:
{{ pad }}        {{ clause.name }} = {{ clause.step }}
{{ pad }}    {{ flag }} = True
{{ pad }}    if not ({{ clause.test }}):
{{ pad }}        break
{%- endfor %}
{{ body }}
"""
)


def render_c_for(
    clauses: Sequence[str],
    body: str,
    params: Sequence[str] = (),
    name: str = "c_for_loop",
) -> str:
    """Return the Python source of a function running ``body`` in the loop nest."""
    levels = parse_clauses(clauses, callables=False)
    for clause in levels:
        for part in (clause.init, clause.test, clause.step):
            iae_when_not(
                isinstance(part, str) and part.strip() and "\n" not in part,
                f"loop expressions for '{clause.name}' must be single-line strings: {part!r}",
            )
    iae_when_not(name.isidentifier(), f"function name must be an identifier: {name!r}")
    for p in params:
        iae_when_not(isinstance(p, str) and p.isidentifier(), f"parameter name must be an identifier: {p!r}")
    clash = sorted({f"_{clause.name}_started" for clause in levels}.intersection(params))
    iae_when_not(not clash, f"parameter names clash with loop state: {clash}")
    iae_when_not(isinstance(body, str) and body.strip(), "loop body must be a non-empty string")
    depth = len(levels)
    indented = textwrap.indent(textwrap.dedent(body).strip("\n"), "    " * (depth + 1))
    return _LOOP_TEMPLATE.render(
        name=name, params=list(params), clauses=levels, depth=depth, body=indented
    ) + "\n"


def compile_c_for(
    clauses: Sequence[str],
    body: str,
    params: Sequence[str] = (),
    name: str = "c_for_loop",
    namespace: Dict[str, Any] | None = None,
) -> Callable[..., None]:
    """Render, compile and return the loop function.

    ``namespace`` supplies globals visible to the generated code (e.g. ``np``).
    """
    source = render_c_for(clauses, body, params=params, name=name)
    if _cfg.get("MXSHIM_LOOPGEN_DEBUG"):
        _log.info("generated %s:\n%s", name, source)
    else:
        _log.debug("generated %s:\n%s", name, source)
    try:
        code = compile(source, f"<mxshim.loopgen:{name}>", "exec")
    except SyntaxError as e:
        iae(f"generated loop does not compile: {e.msg} (line {e.lineno})\n{source}")
    scope: Dict[str, Any] = dict(namespace or {})
    exec(code, scope)
    fn = scope[name]
    fn.__source__ = source
    return fn


__all__ = ["render_c_for", "compile_c_for"]
