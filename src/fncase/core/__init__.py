"""Core composable function type."""

from .fn import Fn, callable_name, chain, ensure_callable, fn, identity

__all__ = ["Fn", "fn", "chain", "identity", "callable_name", "ensure_callable"]
