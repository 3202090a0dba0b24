"""Named combinators for pipelines without operator syntax.

Each combinator folds its arguments left to right, giving the same grouping
as the ``|``, ``>>`` and ``<<`` operators on Fn:

    pipe(x, f, g)                 == x | f | g
    compose_forward(f, g, h)      == f >> g >> h
    compose_backward(h, g, f)     == h << g << f
"""

from __future__ import annotations

import operator
from functools import reduce
from typing import Any, Callable, TypeVar, overload

from ..core import Fn, ensure_callable, identity

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


@overload
def pipe(value: A) -> A: ...
@overload
def pipe(value: A, f1: Callable[[A], B], /) -> B: ...
@overload
def pipe(value: A, f1: Callable[[A], B], f2: Callable[[B], C], /) -> C: ...
@overload
def pipe(value: A, f1: Callable[[A], B], f2: Callable[[B], C], f3: Callable[[C], D], /) -> D: ...
@overload
def pipe(value: Any, *funcs: Callable[[Any], Any]) -> Any: ...


def pipe(value: Any, *funcs: Callable[[Any], Any]) -> Any:
    """Thread a value through functions left to right.
    
    Every function is checked before any of them runs, so a non-callable
    argument fails before side effects happen.
    
    Example:
        >>> pipe(3, lambda x: x + 1, lambda x: x * x)
        16
    """
    stages = [ensure_callable(f) for f in funcs]
    return reduce(lambda acc, f: f(acc), stages, value)


@overload
def compose_forward() -> Fn[Any, Any]: ...
@overload
def compose_forward(f1: Callable[[A], B], /) -> Fn[A, B]: ...
@overload
def compose_forward(f1: Callable[[A], B], f2: Callable[[B], C], /) -> Fn[A, C]: ...
@overload
def compose_forward(f1: Callable[[A], B], f2: Callable[[B], C], f3: Callable[[C], D], /) -> Fn[A, D]: ...
@overload
def compose_forward(*funcs: Callable[[Any], Any]) -> Fn[Any, Any]: ...


def compose_forward(*funcs: Callable[[Any], Any]) -> Fn[Any, Any]:
    """Compose left to right: the first function runs first.
    
    With no arguments returns ``identity``.
    """
    return reduce(operator.rshift, funcs, identity)


@overload
def compose_backward() -> Fn[Any, Any]: ...
@overload
def compose_backward(f1: Callable[[A], B], /) -> Fn[A, B]: ...
@overload
def compose_backward(f2: Callable[[B], C], f1: Callable[[A], B], /) -> Fn[A, C]: ...
@overload
def compose_backward(f3: Callable[[C], D], f2: Callable[[B], C], f1: Callable[[A], B], /) -> Fn[A, D]: ...
@overload
def compose_backward(*funcs: Callable[[Any], Any]) -> Fn[Any, Any]: ...


def compose_backward(*funcs: Callable[[Any], Any]) -> Fn[Any, Any]:
    """Compose right to left: the last function runs first.
    
    ``compose_backward(h, g, f)`` reads as "h after g after f".
    """
    return reduce(operator.lshift, funcs, identity)
