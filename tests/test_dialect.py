import pytest

from mxshim import dialect
from mxshim.errors import IllegalArgumentError


def test_default_dialect_is_numpy(monkeypatch):
    monkeypatch.delenv("MXSHIM_DIALECT", raising=False)
    assert dialect.current() == dialect.NUMPY
    assert not dialect.is_builtin()


def test_dialect_from_env_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("MXSHIM_DIALECT", " Builtin ")
    assert dialect.current() == dialect.BUILTIN
    assert dialect.is_builtin()


def test_when_dialect_selects_one_fragment(monkeypatch):
    monkeypatch.setenv("MXSHIM_DIALECT", "numpy")
    assert dialect.when_dialect(numpy="np", builtin="list") == "np"
    assert dialect.when_dialect(numpy="np", builtin="list", dialect="builtin") == "list"


def test_when_dialect_does_not_call_fragments():
    calls = []

    def a():
        calls.append("a")

    def b():
        calls.append("b")

    picked = dialect.when_dialect(numpy=a, builtin=b, dialect="builtin")
    assert picked is b
    assert calls == []


def test_unknown_dialect_rejected(monkeypatch):
    monkeypatch.setenv("MXSHIM_DIALECT", "fortran")
    with pytest.raises(IllegalArgumentError, match="Unknown dialect"):
        dialect.current()
    with pytest.raises(IllegalArgumentError):
        dialect.when_dialect(numpy=1, builtin=2, dialect="cljs")
