"""fncase - Composable unary functions, container lifts and field transformers.

Build pipelines by gluing single-argument functions together instead of
nesting calls, then lift them into lists or into single fields of immutable
values.

Operators:
    >>> from fncase import fn
    >>> incr = fn(lambda x: x + 1)
    >>> square = fn(lambda x: x * x)
    >>> 3 | incr >> square          # apply binds loosest
    16
    >>> (square << incr)(3)         # backward composition
    16

Container lifts:
    >>> from fncase import map_lift, filter_lift
    >>> [0, 1, 2] | map_lift(incr >> square)
    [1, 4, 9]
    >>> list(range(5)) | filter_lift(lambda x: x % 2 == 0)
    [0, 2, 4]

Field transformers:
    >>> from fncase import over
    >>> from pydantic import BaseModel
    >>> class User(BaseModel):
    ...     name: str
    ...     age: int
    >>> update = over("name", str.upper) >> over("age", incr)
    >>> update(User(name="Jane Doe", age=59))
    User(name='JANE DOE', age=60)

Named forms (no operators):
    >>> from fncase import pipe, compose_forward, compose_backward
    >>> pipe(3, incr, square)
    16
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core
from .core import Fn, callable_name, chain, fn, identity

# Named combinators
from .compose import compose_backward, compose_forward, pipe

# Lifts
from .lift import filter_lift, map_first, map_lift, map_second

# Lenses
from .lens import PropertyRef, assign, attr, item, over, path, property_transformer

# Foundation
from .foundation import (
    ComposeSettings,
    CompositionError,
    ErrorCode,
    FncaseException,
    FncaseSettings,
    FnError,
    LoggingSettings,
    PropertyAccessError,
    clear_settings_cache,
    configure_logging,
    get_settings,
)

__all__ = [
    "__version__",
    # Core
    "Fn", "fn", "chain", "identity", "callable_name",
    # Named combinators
    "pipe", "compose_forward", "compose_backward",
    # Lifts
    "map_lift", "filter_lift", "map_first", "map_second",
    # Lenses
    "PropertyRef", "attr", "item", "path", "property_transformer", "over", "assign",
    # Errors
    "ErrorCode", "FnError", "FncaseException", "CompositionError", "PropertyAccessError",
    # Config
    "FncaseSettings", "ComposeSettings", "LoggingSettings", "get_settings", "clear_settings_cache",
    "configure_logging",
]
