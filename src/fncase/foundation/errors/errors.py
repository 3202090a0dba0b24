"""Standardized errors for composition and property access.

Composition itself is total over well-typed inputs. The only runtime failures
are operands that are not callable and property paths that do not resolve.
Uses Pydantic for the structured error payload.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field


class ErrorCode(StrEnum):
    """Standard error codes for composition failures."""
    NOT_CALLABLE = "NOT_CALLABLE"
    PROPERTY_NOT_FOUND = "PROPERTY_NOT_FOUND"
    PROPERTY_NOT_WRITABLE = "PROPERTY_NOT_WRITABLE"
    UNKNOWN = "UNKNOWN"


class FnError(BaseModel):
    """Structured description of a composition or property failure.
    
    Attributes:
        code: Machine-readable error code
        message: Human-readable error message
        path: Property path involved, if any (e.g. "address.city")
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "title": "Fn Error",
            "examples": [{
                "code": "PROPERTY_NOT_FOUND",
                "message": "User has no attribute 'nickname'",
                "path": "nickname",
            }],
        },
    )

    code: ErrorCode = Field(default=ErrorCode.UNKNOWN, description="Machine-readable error classification")
    message: Annotated[str, Field(min_length=1, description="Human-readable error message")]
    path: str | None = Field(default=None, description="Property path that failed to resolve")

    def render(self) -> str:
        """One-line rendering used as the exception message."""
        return f"[{self.code}] {self.message}" + (f" (path: {self.path})" if self.path else "")

    __str__ = render


class FncaseException(Exception):
    """Exception wrapping an FnError for raising."""

    __slots__ = ("error",)

    def __init__(self, error: FnError) -> None:
        self.error = error
        super().__init__(error.render())

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @classmethod
    def create(cls, message: str, code: ErrorCode = ErrorCode.UNKNOWN, *, path: str | None = None) -> Self:
        """Create exception from message and code."""
        return cls(FnError(message=message, code=code, path=path))


class CompositionError(FncaseException, TypeError):
    """A composition operand is not callable."""

    @classmethod
    def not_callable(cls, obj: object, role: str = "operand") -> Self:
        return cls.create(
            f"{role} must be callable, got {type(obj).__name__}: {obj!r}",
            ErrorCode.NOT_CALLABLE,
        )


class PropertyAccessError(FncaseException, LookupError):
    """A property reference could not be read from or written to a value."""

    @classmethod
    def not_found(cls, root: object, segment: str, path: str | None = None) -> Self:
        return cls.create(
            f"{type(root).__name__} has no property {segment!r}",
            ErrorCode.PROPERTY_NOT_FOUND,
            path=path or segment,
        )

    @classmethod
    def not_writable(cls, root: object, segment: str, reason: str, path: str | None = None) -> Self:
        return cls.create(
            f"cannot write {segment!r} on {type(root).__name__}: {reason}",
            ErrorCode.PROPERTY_NOT_WRITABLE,
            path=path or segment,
        )
