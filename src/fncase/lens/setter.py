"""Lift field-level functions into whole-value transformers.

``property_transformer(ref)`` turns a property reference into a generator:
give it ``t: V -> V`` and it returns an Fn ``R -> R`` that rebuilds the value
with ``t`` applied to that one field. The input value is never modified,
and ``t`` receives its own copy of the field, so the result shares no
mutable state with the input.

Transformers are ordinary Fn values, so they compose with ``>>`` and ``<<``.
Transformers on different fields commute; on the same field they apply in
composition order.

Example:
    >>> from dataclasses import dataclass
    >>> @dataclass(frozen=True)
    ... class User:
    ...     name: str
    ...     age: int
    >>> birthday = property_transformer("age")(lambda n: n + 1)
    >>> shout = over("name", str.upper)
    >>> (shout << birthday)(User("Jane Doe", 59))
    User(name='JANE DOE', age=60)
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from ..core import Fn, callable_name, ensure_callable
from ..foundation.logs import get_logger
from .ref import PropertyRef, Segment, path

R = TypeVar("R")
V = TypeVar("V")

logger = get_logger("lens")


def _resolve(ref: Segment) -> PropertyRef[Any, Any]:
    return ref if isinstance(ref, PropertyRef) else path(ref)


def property_transformer(ref: PropertyRef[R, V] | Segment) -> Callable[[Callable[[V], V]], Fn[R, R]]:
    """Build a field-transformer generator for ``ref``.
    
    Args:
        ref: PropertyRef, or a str/int path resolved through ``path()``
    
    Returns:
        Function taking ``t: V -> V`` and returning an Fn ``R -> R``
        computing ``ref.set(r, t(ref.get(r)))``
    """
    resolved = _resolve(ref)

    def generate(transform: Callable[[V], V]) -> Fn[R, R]:
        func = ensure_callable(transform, "field transform")
        name = f"over({resolved.label}, {callable_name(transform)})"

        def update(root: R) -> R:
            return resolved.over(root, func)

        logger.debug("built property transformer %s", name)
        return Fn(update, name=name)

    return generate


def over(ref: PropertyRef[R, V] | Segment, transform: Callable[[V], V]) -> Fn[R, R]:
    """Shorthand for ``property_transformer(ref)(transform)``."""
    return property_transformer(ref)(transform)


def assign(ref: PropertyRef[R, V] | Segment, value: V) -> Fn[R, R]:
    """Transformer that sets the field to a constant."""
    resolved = _resolve(ref)

    def constant(_: V) -> V:
        return value

    constant.__name__ = constant.__qualname__ = f"const({value!r})"
    return property_transformer(resolved)(constant)
