"""Composable unary functions with operator syntax.

Python has no user-defined operators, so composition rides on a wrapper:

    value | f          apply (lowest precedence, left-associative)
    f >> g             forward composition: g(f(x))
    g << f             backward composition: g(f(x))

Shift operators bind tighter than ``|`` and all three are left-associative,
so ``3 | incr >> square`` reads as ``3 | (incr >> square)``.

An Fn holds a frozen tuple of stages. Composition concatenates stage tuples
instead of nesting closures, so associativity holds structurally and long
chains run in a flat loop.

Example:
    >>> incr = Fn(lambda x: x + 1, name="incr")
    >>> square = Fn(lambda x: x * x, name="square")
    >>> 3 | incr >> square
    16
    >>> (square << incr)(3)
    16
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from ..foundation.config import get_settings
from ..foundation.errors import CompositionError
from ..foundation.logs import get_logger

A = TypeVar("A")  # Input type
B = TypeVar("B")  # Output type
C = TypeVar("C")  # Output type after further composition
Z = TypeVar("Z")  # Input type of a stage prepended by backward composition

Stage = Callable[[Any], Any]

logger = get_logger("core")


def callable_name(func: object) -> str:
    """Best-effort readable name for a callable."""
    if isinstance(func, Fn):
        return func.__name__
    qualname = getattr(func, "__qualname__", None)
    if isinstance(qualname, str) and "<locals>" not in qualname:
        return qualname
    name = getattr(func, "__name__", None)
    return name if isinstance(name, str) else repr(func)


class Fn(Generic[A, B]):
    """Immutable unary function supporting ``>>``, ``<<`` and ``|``.

    Wrapping an existing Fn reuses its stages. Either operand of ``>>`` or
    ``<<`` may be a plain callable, as long as the other one is an Fn.

    Composition captures its operands at construction; rebinding the original
    names afterwards does not change an already composed function.

    Trace mode (``FNCASE_COMPOSE_TRACE``) and strict operand checking
    (``FNCASE_COMPOSE_STRICT``) are read from settings when each Fn is built.
    """

    __slots__ = ("_stages", "_name", "_trace")

    _stages: tuple[Stage, ...]
    _name: str | None
    _trace: bool

    def __init__(self, func: Callable[[A], B], *, name: str | None = None) -> None:
        if isinstance(func, Fn):
            stages = func._stages
            name = name or func._name
        else:
            stages = (ensure_callable(func),)
        object.__setattr__(self, "_stages", stages)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_trace", get_settings().compose.trace)

    @classmethod
    def _from_stages(cls, stages: tuple[Stage, ...], name: str | None = None) -> Fn[Any, Any]:
        inst = cls.__new__(cls)
        object.__setattr__(inst, "_stages", stages)
        object.__setattr__(inst, "_name", name)
        object.__setattr__(inst, "_trace", get_settings().compose.trace)
        return inst

    def __setattr__(self, key: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Immutable, so copies can share the instance.
    def __copy__(self) -> Fn[A, B]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Fn[A, B]:
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return (Fn._from_stages, (self._stages, self._name))

    # ─────────────────────────────────────────────────────────────────
    # Invocation
    # ─────────────────────────────────────────────────────────────────

    def __call__(self, value: A) -> B:
        if self._trace:
            return self._call_traced(value)
        for stage in self._stages:
            value = stage(value)
        return value  # type: ignore[return-value]

    def _call_traced(self, value: Any) -> Any:
        total = len(self._stages)
        for i, stage in enumerate(self._stages, 1):
            logger.debug("%s: stage %d/%d %s <- %r", self.__name__, i, total, callable_name(stage), value)
            value = stage(value)
        logger.debug("%s: result %r", self.__name__, value)
        return value

    def __ror__(self, value: A) -> B:
        """Apply: ``value | f``."""
        return self(value)

    # ─────────────────────────────────────────────────────────────────
    # Composition
    # ─────────────────────────────────────────────────────────────────

    def __rshift__(self, other: Callable[[B], C]) -> Fn[A, C]:
        """Forward composition: ``(self >> other)(x) == other(self(x))``."""
        return chain(self, other)

    def __rrshift__(self, other: Callable[[Z], A]) -> Fn[Z, B]:
        """Forward composition with a plain callable on the left."""
        return chain(other, self)

    def __lshift__(self, other: Callable[[Z], A]) -> Fn[Z, B]:
        """Backward composition: ``(self << other)(x) == self(other(x))``."""
        return chain(other, self)

    def __rlshift__(self, other: Callable[[B], C]) -> Fn[A, C]:
        """Backward composition with a plain callable on the left."""
        return chain(self, other)

    def then(self, other: Callable[[B], C]) -> Fn[A, C]:
        """Fluent form of ``self >> other``."""
        return chain(self, other)

    def after(self, other: Callable[[Z], A]) -> Fn[Z, B]:
        """Fluent form of ``self << other``."""
        return chain(other, self)

    # ─────────────────────────────────────────────────────────────────
    # Introspection
    # ─────────────────────────────────────────────────────────────────

    @property
    def stages(self) -> tuple[Stage, ...]:
        """Captured stages, in execution order."""
        return self._stages

    @property
    def __name__(self) -> str:  # type: ignore[override]
        if self._name:
            return self._name
        if not self._stages:
            return "identity"
        return " >> ".join(callable_name(s) for s in self._stages)

    def __repr__(self) -> str:
        return f"Fn({self.__name__})"


def ensure_callable(func: object, role: str = "operand") -> Stage:
    """Return ``func``, raising CompositionError first if strict mode rejects it."""
    if not callable(func) and get_settings().compose.strict:
        raise CompositionError.not_callable(func, role)
    return func  # type: ignore[return-value]


def _stages_of(func: object) -> tuple[Stage, ...]:
    return func._stages if isinstance(func, Fn) else (ensure_callable(func),)


def chain(first: Callable[[A], B], second: Callable[[B], C]) -> Fn[A, C]:
    """Compose two unary functions left to right into a new Fn."""
    return Fn._from_stages(_stages_of(first) + _stages_of(second))


def fn(func: Callable[[A], B]) -> Fn[A, B]:
    """Decorator turning a unary function into a composable Fn.

    Example:
        >>> @fn
        ... def incr(x: int) -> int:
        ...     return x + 1
        >>> 1 | incr >> incr
        3
    """
    return Fn(func, name=callable_name(func))


identity: Fn[Any, Any] = Fn._from_stages((), name="identity")
