"""Tests for the named combinators pipe / compose_forward / compose_backward."""

from __future__ import annotations

import pytest

from fncase import CompositionError, Fn, compose_backward, compose_forward, fn, identity, pipe


def shout(s: str) -> str:
    return s.upper()


def exclaim(s: str) -> str:
    return s + "!"


# ═════════════════════════════════════════════════════════════════════════════
# pipe
# ═════════════════════════════════════════════════════════════════════════════


def test_pipe_threads_left_to_right(incr: Fn[int, int], square: Fn[int, int]) -> None:
    assert pipe(3, incr, square) == 16
    assert pipe(3, square, incr) == 10


def test_pipe_matches_apply_operator(incr: Fn[int, int], square: Fn[int, int]) -> None:
    assert pipe(3, incr, square) == (3 | incr | square)


def test_pipe_without_functions_returns_value() -> None:
    marker = object()
    assert pipe(marker) is marker


def test_pipe_accepts_plain_callables() -> None:
    assert pipe("hi", shout, exclaim) == "HI!"


def test_pipe_checks_every_function_before_running() -> None:
    calls: list[str] = []

    def record(s: str) -> str:
        calls.append(s)
        return s

    with pytest.raises(CompositionError):
        pipe("x", record, "oops")  # type: ignore[arg-type]
    assert calls == []


# ═════════════════════════════════════════════════════════════════════════════
# compose_forward / compose_backward
# ═════════════════════════════════════════════════════════════════════════════


def test_compose_forward_matches_operator(incr: Fn[int, int], square: Fn[int, int]) -> None:
    composed = compose_forward(incr, square)
    assert isinstance(composed, Fn)
    assert composed(3) == (incr >> square)(3) == 16


def test_compose_backward_reads_right_to_left(incr: Fn[int, int], square: Fn[int, int]) -> None:
    assert compose_backward(square, incr)(3) == 16
    assert compose_backward(exclaim, shout)("hey") == "HEY!"


def test_compose_backward_mirrors_forward() -> None:
    forward = compose_forward(shout, exclaim, str.strip)
    backward = compose_backward(str.strip, exclaim, shout)
    for s in ["a", " spaced ", ""]:
        assert forward(s) == backward(s)


def test_compose_forward_groups_left() -> None:
    f, g, h = fn(shout), fn(exclaim), fn(str.lower)
    assert compose_forward(f, g, h).stages == ((f >> g) >> h).stages


def test_empty_composition_is_identity() -> None:
    assert compose_forward() is identity
    assert compose_backward() is identity
    assert compose_forward()(7) == 7


def test_single_function_composition() -> None:
    assert compose_forward(shout)("a") == "A"
    assert compose_backward(shout)("a") == "A"
