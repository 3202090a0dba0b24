"""Named composition combinators."""

from .operators import compose_backward, compose_forward, pipe

__all__ = ["pipe", "compose_forward", "compose_backward"]
