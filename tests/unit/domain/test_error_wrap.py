from __future__ import annotations

import pytest

from xerror import AugmentedError, WrapTargetError, contains_template, is_template, new, wrap
from xerror.domain.formatting import render


def test_wrap_none_raises() -> None:
    with pytest.raises(WrapTargetError) as info:
        wrap(None, "fmt")  # type: ignore[arg-type]

    assert isinstance(info.value, TypeError)
    assert info.value.code == "XERROR_INVALID_WRAP_TARGET"
    assert info.value.details == {"target_type": "NoneType"}


def test_wrap_non_exception_raises() -> None:
    with pytest.raises(WrapTargetError):
        wrap("not an error")  # type: ignore[arg-type]


def test_wrap_native_no_template() -> None:
    native = ValueError("ew")
    err = wrap(native)

    assert str(err) == "ew"
    assert err.templates == ("ew",)
    assert err.debug == ()
    assert len(err.stack) > 0
    assert err.__cause__ is native


def test_wrap_native_template_is_not_reformatted() -> None:
    err = wrap(ValueError("50% %s done"))

    assert str(err) == "50% %s done"
    assert err.is_template("50% %s done")


def test_wrap_native_empty_message_keeps_empty_text() -> None:
    native = KeyError()
    err = wrap(native)

    assert err.templates == ("",)
    assert str(err) == ""
    assert is_template(native, "")
    assert is_template(err, "")
    assert contains_template(wrap(native, "lookup"), "")


def test_wrap_native_no_placeholders_and_no_debug() -> None:
    err = wrap(ValueError("ew"), "fmt")

    assert str(err) == "fmt: ew"
    assert err.templates == ("fmt", "ew")
    assert err.debug == ()


def test_wrap_native_placeholders_and_debug() -> None:
    err = wrap(ValueError("ew"), "fmt %% %s %s", "p2", "p1", "d2", "d1")

    assert str(err) == "fmt % p2 p1: ew"
    assert err.debug == ("p2", "p1", "d2", "d1")


def test_wrap_native_captures_stack_at_wrap_site() -> None:
    def _raise() -> None:
        raise ValueError("ew")

    try:
        _raise()
    except ValueError as exc:
        err = wrap(exc, "ctx")

    assert err.stack[0].endswith("(test_wrap_native_captures_stack_at_wrap_site)")
    assert err.__cause__ is not None


def test_wrap_error_no_placeholders_and_no_debug() -> None:
    err = wrap(new("fmt %s", "p1", "d1"), "fmt2")

    assert str(err) == "fmt2: fmt p1"
    assert err.debug == ("p1", "d1")


def test_wrap_error_placeholders_and_no_debug() -> None:
    err = wrap(new("fmt %s", "p1", "d1"), "fmt2 %% %s %s", "p3", "p2")

    assert str(err) == "fmt2 % p3 p2: fmt p1"
    assert err.debug == ("p3", "p2", "p1", "d1")


def test_wrap_error_no_placeholders_and_debug() -> None:
    err = wrap(new("fmt %s", "p1", "d1"), "fmt2", "d3", "d2")

    assert str(err) == "fmt2: fmt p1"
    assert err.debug == ("d3", "d2", "p1", "d1")


def test_wrap_error_placeholders_and_debug() -> None:
    err = wrap(new("fmt %s", "p1", "d1"), "fmt2 %% %s %s", "p3", "p2", "d3", "d2")

    assert str(err) == "fmt2 % p3 p2: fmt p1"
    assert err.debug == ("p3", "p2", "d3", "d2", "p1", "d1")


def test_wrap_chain_order() -> None:
    inner = new("inner %s", "x")
    outer = wrap(inner, "outer %s", "y")

    assert str(outer) == "outer y: inner x"
    assert outer.templates == ("outer %s", "inner %s")
    assert outer.debug == ("y", "x")
    assert outer.__cause__ is inner


def test_wrap_inherits_stack_of_innermost_error() -> None:
    inner = new("inner")

    def _helper() -> AugmentedError:
        return wrap(wrap(inner, "mid"), "outer")

    outer = _helper()

    assert outer.stack == inner.stack


def test_wrap_never_mutates_input() -> None:
    inner = new("inner %s", "x", "d")
    wrap(inner, "outer %s", "y")

    assert inner.templates == ("inner %s",)
    assert inner.debug == ("x", "d")
    assert str(inner) == "inner x"


def test_wrap_without_template_returns_independent_copy() -> None:
    inner = new("inner %s", "x")
    inner.__cause__ = OSError("disk")
    same = wrap(inner)

    assert same is not inner
    assert same.templates == inner.templates
    assert same.debug == inner.debug
    assert same.stack == inner.stack
    assert str(same) == str(inner)
    assert same.__cause__ is inner.__cause__


def test_wrap_without_template_prepends_explicit_debug() -> None:
    err = wrap(new("inner %s", "x"), None, "d1")

    assert str(err) == "inner x"
    assert err.debug == ("d1", "x")


def test_message_matches_rerendering_each_layer() -> None:
    err = wrap(wrap(new("a %s %d", "x", 1, "extra"), "b"), "c %s", "z")
    layers = [("c %s", ["z"]), ("b", []), ("a %s %d", ["x", 1, "extra"])]

    assert str(err) == ": ".join(render(t, a) for t, a in layers)
    assert err.templates == tuple(t for t, _ in layers)
    assert err.debug == tuple(v for _, a in layers for v in a)
