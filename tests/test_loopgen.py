import threading

import numpy as np
import pytest

from mxshim.errors import IllegalArgumentError
from mxshim.loopgen import compile_c_for, render_c_for

_IJ = ["i", "0", "i < n", "i + 1", "j", "0", "j < m", "j + 1"]


def _run_with_timeout(fn, *args, timeout=2.0):
    worker = threading.Thread(target=fn, args=args, daemon=True)
    worker.start()
    worker.join(timeout)
    assert not worker.is_alive(), "generated loop did not terminate"


def test_render_nests_loops_with_step_at_top():
    src = render_c_for(_IJ, "acc.append((i, j))", params=("acc", "n", "m"), name="walk")
    expected = (
        "def walk(acc, n, m):\n"
        "    i = 0\n"
        "    _i_started = False\n"
        "    while True:\n"
        "        if _i_started:\n"
        "            i = i + 1\n"
        "        _i_started = True\n"
        "        if not (i < n):\n"
        "            break\n"
        "        j = 0\n"
        "        _j_started = False\n"
        "        while True:\n"
        "            if _j_started:\n"
        "                j = j + 1\n"
        "            _j_started = True\n"
        "            if not (j < m):\n"
        "                break\n"
        "            acc.append((i, j))\n"
    )
    assert src == expected


def test_compiled_loop_runs_in_order():
    walk = compile_c_for(_IJ, "acc.append((i, j))", params=("acc", "n", "m"))
    acc = []
    assert walk(acc, 2, 2) is None
    assert acc == [(0, 0), (0, 1), (1, 0), (1, 1)]
    assert "if not (i < n):" in walk.__source__


def test_continue_still_runs_the_step():
    odd = compile_c_for(
        ["i", "0", "i < 4", "i + 1"],
        "if i % 2 == 0:\n    continue\nacc.append(i)",
        params=("acc",),
    )
    acc = []
    _run_with_timeout(odd, acc)
    assert acc == [1, 3]


def test_continue_in_inner_level_advances_inner_binding():
    walk = compile_c_for(
        _IJ,
        "if j == 0:\n    continue\nacc.append((i, j))",
        params=("acc", "n", "m"),
    )
    acc = []
    _run_with_timeout(walk, acc, 2, 3)
    assert acc == [(0, 1), (0, 2), (1, 1), (1, 2)]


def test_break_leaves_only_the_innermost_level():
    walk = compile_c_for(
        _IJ,
        "if j == 1:\n    break\nacc.append((i, j))",
        params=("acc", "n", "m"),
    )
    acc = []
    _run_with_timeout(walk, acc, 3, 3)
    assert acc == [(0, 0), (1, 0), (2, 0)]


def test_compiled_loop_over_numpy_buffer_with_multiline_body():
    body = """
        v = a[i, j]
        out[i, j] = v * k
    """
    scale = compile_c_for(
        ["i", "0", "i < a.shape[0]", "i + 1", "j", "0", "j < a.shape[1]", "j + 1"],
        body,
        params=("a", "out", "k"),
        name="scale",
    )
    a = np.arange(6, dtype=np.float64).reshape(2, 3)
    out = np.empty_like(a)
    scale(a, out, 2.0)
    assert np.array_equal(out, a * 2.0)


def test_compiled_loop_uses_namespace_globals():
    fill = compile_c_for(
        ["i", "0", "i < len(out)", "i + 1"],
        "out[i] = np.sqrt(i)",
        params=("out",),
        namespace={"np": np},
    )
    out = np.zeros(4)
    fill(out)
    assert np.allclose(out, np.sqrt(np.arange(4)))


def test_single_level_render():
    src = render_c_for(["k", "1", "k < 100", "k * 2"], "seen.append(k)", params=("seen",))
    assert src.splitlines() == [
        "def c_for_loop(seen):",
        "    k = 1",
        "    _k_started = False",
        "    while True:",
        "        if _k_started:",
        "            k = k * 2",
        "        _k_started = True",
        "        if not (k < 100):",
        "            break",
        "        seen.append(k)",
    ]


@pytest.mark.parametrize(
    "clauses,body,params",
    [
        (["i", "0", "i < 2"], "pass", ()),
        (["i", 0, "i < 2", "i + 1"], "pass", ()),
        (["i", "0", "i <\n 2", "i + 1"], "pass", ()),
        (["i", "0", "i < 2", "i + 1"], "   ", ()),
        (["i", "0", "i < 2", "i + 1"], "pass", ("not-a-name",)),
        (["i", "0", "i < 2", "i + 1"], "pass", ("_i_started",)),
    ],
)
def test_render_rejects_bad_input(clauses, body, params):
    with pytest.raises(IllegalArgumentError):
        render_c_for(clauses, body, params=params)


def test_syntax_error_becomes_illegal_argument():
    with pytest.raises(IllegalArgumentError, match="does not compile"):
        compile_c_for(["i", "0", "i < < 2", "i + 1"], "pass")
