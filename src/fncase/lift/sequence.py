"""Lift element functions into functions over ordered sequences.

Lifted functions are Fn instances, so they compose with each other and with
plain element functions:

    >>> from fncase import fn
    >>> incr = fn(lambda x: x + 1)
    >>> [0, 1, 2] | map_lift(incr >> (lambda x: x * x))
    [1, 4, 9]
    >>> range(5) | map_lift(incr) >> filter_lift(lambda x: x % 2 == 0)
    [2, 4]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from ..core import Fn, callable_name, ensure_callable

if TYPE_CHECKING:
    from collections.abc import Iterable

A = TypeVar("A")
B = TypeVar("B")


def map_lift(f: Callable[[A], B]) -> Fn[Iterable[A], list[B]]:
    """Lift ``f: A -> B`` into ``Iterable[A] -> list[B]``.
    
    The i-th output is ``f`` applied to the i-th input. The input is consumed
    but never mutated; the result is always a new list.
    """
    func = ensure_callable(f, "map function")

    def mapped(items: Iterable[A]) -> list[B]:
        return [func(item) for item in items]

    return Fn(mapped, name=f"map({callable_name(f)})")


def filter_lift(predicate: Callable[[A], object]) -> Fn[Iterable[A], list[A]]:
    """Lift ``predicate: A -> bool`` into a stable filter over iterables.
    
    Keeps exactly the elements for which the predicate is truthy, in their
    original relative order.
    """
    pred = ensure_callable(predicate, "filter predicate")

    def filtered(items: Iterable[A]) -> list[A]:
        return [item for item in items if pred(item)]

    return Fn(filtered, name=f"filter({callable_name(predicate)})")
