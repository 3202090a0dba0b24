"""Lift functions into one position of a pair.

    >>> from fncase import fn
    >>> incr = fn(lambda x: x + 1)
    >>> (42, "Hello") | map_first(incr)
    (43, 'Hello')
    >>> nested = ("Hello", (42, "World"))
    >>> nested | (map_second << map_first)(incr)
    ('Hello', (43, 'World'))

Note that ``map_second << map_first`` composes the lifts themselves: the
result lifts into the first slot, then lifts that into the second slot.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from ..core import Fn, callable_name, ensure_callable

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def _map_first(f: Callable[[A], B]) -> Fn[tuple[A, C], tuple[B, C]]:
    func = ensure_callable(f, "pair function")

    def first(pair: tuple[A, C]) -> tuple[B, C]:
        a, c = pair
        return func(a), c

    return Fn(first, name=f"first({callable_name(f)})")


def _map_second(f: Callable[[A], B]) -> Fn[tuple[C, A], tuple[C, B]]:
    func = ensure_callable(f, "pair function")

    def second(pair: tuple[C, A]) -> tuple[C, B]:
        c, a = pair
        return c, func(a)

    return Fn(second, name=f"second({callable_name(f)})")


# Wrapped so the lifts compose among themselves with >> and <<.
map_first = Fn(_map_first, name="map_first")
map_second = Fn(_map_second, name="map_second")
