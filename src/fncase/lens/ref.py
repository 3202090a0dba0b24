"""Addressable property references with non-destructive writes.

A PropertyRef describes "field V inside structure R" independently of any
instance. It reads with ``get(root)`` and writes with ``set(root, value)``,
which returns a new root and leaves the original untouched.

Construction:
    attr("age")               attribute of a model, dataclass, namedtuple or object
    item("tags") / item(0)    mapping key or sequence index
    path("address.city")      nested: strings become attr, ints become item
    attr("tags") / item(0)    composition with ``/`` (outer / inner)

Write strategies for ``attr``, picked from the root value:
    pydantic BaseModel   -> model_copy(update=..., deep=True)
    dataclass            -> deepcopy + dataclasses.replace (init=False fields: deepcopy + set)
    NamedTuple           -> deepcopy + _replace
    anything else        -> deepcopy + setattr

Every write deep-copies the untargeted fields, so the result never shares
mutable state with the input. The written value itself is stored as given.

Example:
    >>> from dataclasses import dataclass
    >>> @dataclass(frozen=True)
    ... class User:
    ...     name: str
    ...     age: int
    >>> age = attr("age")
    >>> jane = User("Jane Doe", 59)
    >>> age.set(jane, 60)
    User(name='Jane Doe', age=60)
    >>> jane.age
    59
"""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Hashable, Mapping, MutableMapping, MutableSequence
from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel

from ..foundation.errors import PropertyAccessError

R = TypeVar("R")  # Root (structure) type
V = TypeVar("V")  # Field value type
W = TypeVar("W")  # Nested field value type


@dataclasses.dataclass(frozen=True, slots=True)
class PropertyRef(Generic[R, V]):
    """Reusable read/write descriptor for one field of a structure.

    Attributes:
        getter: Reads the field from a root value
        setter: Returns a copy of the root with the field replaced
        label: Human-readable path, used in names and error messages
    """

    getter: Callable[[R], V]
    setter: Callable[[R, V], R]
    label: str = "<ref>"

    def get(self, root: R) -> V:
        return self.getter(root)

    def set(self, root: R, value: V) -> R:
        return self.setter(root, value)

    def over(self, root: R, transform: Callable[[V], V]) -> R:
        """Replace the field with ``transform`` applied to a copy of its current value."""
        return self.setter(root, transform(copy.deepcopy(self.getter(root))))

    def __truediv__(self, inner: PropertyRef[V, W]) -> PropertyRef[R, W]:
        """Focus deeper: ``outer / inner`` addresses ``inner`` inside ``outer``."""
        return compose_refs(self, inner)

    def __repr__(self) -> str:
        return f"PropertyRef({self.label})"


def compose_refs(outer: PropertyRef[R, V], inner: PropertyRef[V, W]) -> PropertyRef[R, W]:
    """Nest two references; writes rebuild every level on the way back up."""
    label = _join_labels(outer.label, inner.label)

    def get(root: R) -> W:
        try:
            return inner.getter(outer.getter(root))
        except PropertyAccessError as exc:
            raise _relabel(exc, label) from None

    def set_(root: R, value: W) -> R:
        try:
            return outer.setter(root, inner.setter(outer.getter(root), value))
        except PropertyAccessError as exc:
            raise _relabel(exc, label) from None

    return PropertyRef(get, set_, label)


def _join_labels(outer: str, inner: str) -> str:
    return f"{outer}{inner}" if inner.startswith("[") else f"{outer}.{inner}"


def _relabel(exc: PropertyAccessError, label: str) -> PropertyAccessError:
    return type(exc)(exc.error.model_copy(update={"path": label}))


# ─────────────────────────────────────────────────────────────────────────────
# Attribute References
# ─────────────────────────────────────────────────────────────────────────────


def attr(name: str) -> PropertyRef[Any, Any]:
    """Reference to attribute ``name``."""
    def get(root: Any) -> Any:
        try:
            return getattr(root, name)
        except AttributeError:
            raise PropertyAccessError.not_found(root, name) from None

    def set_(root: Any, value: Any) -> Any:
        return replace_attr(root, name, value)

    return PropertyRef(get, set_, name)


def replace_attr(root: R, name: str, value: Any) -> R:
    """Copy of ``root`` with attribute ``name`` set to ``value``."""
    if isinstance(root, BaseModel):
        if name not in type(root).model_fields:
            raise PropertyAccessError.not_found(root, name)
        return root.model_copy(update={name: value}, deep=True)

    if dataclasses.is_dataclass(root) and not isinstance(root, type):
        field = next((f for f in dataclasses.fields(root) if f.name == name), None)
        if field is not None:
            if field.init:
                return dataclasses.replace(copy.deepcopy(root), **{name: value})
            clone = copy.deepcopy(root)
            object.__setattr__(clone, name, value)
            return clone

    if isinstance(root, tuple) and hasattr(root, "_replace"):
        if name not in root._fields:  # type: ignore[attr-defined]
            raise PropertyAccessError.not_found(root, name)
        return copy.deepcopy(root)._replace(**{name: value})  # type: ignore[attr-defined]

    if not hasattr(root, name):
        raise PropertyAccessError.not_found(root, name)
    clone = copy.deepcopy(root)
    try:
        setattr(clone, name, value)
    except AttributeError as exc:
        raise PropertyAccessError.not_writable(root, name, str(exc)) from exc
    return clone


# ─────────────────────────────────────────────────────────────────────────────
# Item References
# ─────────────────────────────────────────────────────────────────────────────


def item(key: Hashable) -> PropertyRef[Any, Any]:
    """Reference to a mapping key or sequence index (negative indices allowed)."""
    label = f"[{key!r}]"

    def get(root: Any) -> Any:
        try:
            return root[key]
        except (KeyError, IndexError, TypeError):
            raise PropertyAccessError.not_found(root, label) from None

    def set_(root: Any, value: Any) -> Any:
        return replace_item(root, key, value)

    return PropertyRef(get, set_, label)


def replace_item(root: R, key: Any, value: Any) -> R:
    """Copy of ``root`` with ``root[key]`` set to ``value``.

    Mappings may gain a new key. Sequences must already contain the index.
    """
    label = f"[{key!r}]"

    if isinstance(root, MutableMapping):
        clone = copy.deepcopy(root)
        clone[key] = value
        return clone
    if isinstance(root, Mapping):
        return {**copy.deepcopy(dict(root)), key: value}  # type: ignore[return-value]

    if isinstance(root, (str, bytes)):
        raise PropertyAccessError.not_writable(root, label, "strings are immutable")
    if not isinstance(key, int):
        raise PropertyAccessError.not_found(root, label)
    try:
        index = range(len(root))[key]  # type: ignore[arg-type]
    except (IndexError, TypeError):
        raise PropertyAccessError.not_found(root, label) from None

    if isinstance(root, tuple):
        items = (*copy.deepcopy(root[:index]), value, *copy.deepcopy(root[index + 1:]))
        return root._make(items) if hasattr(root, "_make") else items  # type: ignore[attr-defined,return-value]
    if isinstance(root, MutableSequence):
        clone = copy.deepcopy(root)
        clone[index] = value
        return clone
    raise PropertyAccessError.not_writable(root, label, f"{type(root).__name__} does not support item assignment")


# ─────────────────────────────────────────────────────────────────────────────
# Paths
# ─────────────────────────────────────────────────────────────────────────────


Segment = str | int | PropertyRef[Any, Any]


def path(*segments: Segment) -> PropertyRef[Any, Any]:
    """Build a nested reference from segments.

    Strings become attribute references (dotted strings are split), ints
    become index references and PropertyRef segments are used as-is.

    Example:
        >>> path("address.city").label
        'address.city'
        >>> path("tags", 0).label
        'tags[0]'
    """
    refs = [ref for seg in segments for ref in _segment_refs(seg)]
    if not refs:
        raise ValueError("path() requires at least one segment")
    result = refs[0]
    for ref in refs[1:]:
        result = compose_refs(result, ref)
    return result


def _segment_refs(segment: Segment) -> list[PropertyRef[Any, Any]]:
    if isinstance(segment, PropertyRef):
        return [segment]
    if isinstance(segment, bool) or not isinstance(segment, (str, int)):
        raise TypeError(f"path segment must be str, int or PropertyRef, got {type(segment).__name__}")
    if isinstance(segment, int):
        return [item(segment)]
    parts = segment.split(".")
    if not all(parts):
        raise ValueError(f"invalid attribute path: {segment!r}")
    return [attr(part) for part in parts]
