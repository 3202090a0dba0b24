"""Error types for fncase.

- ErrorCode: Standard error codes
- FnError: Structured error payload (pydantic)
- FncaseException and subclasses: CompositionError, PropertyAccessError
"""

from .errors import CompositionError, ErrorCode, FncaseException, FnError, PropertyAccessError

__all__ = ["ErrorCode", "FnError", "FncaseException", "CompositionError", "PropertyAccessError"]
