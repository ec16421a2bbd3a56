"""
Exception types for structform.
"""

from typing import Any, Optional


class StructFormError(Exception):
    """Base class for all structform errors."""


class NotIntrospectableError(StructFormError, TypeError):
    """Raised when the object passed in is not a flat form record."""

    def __init__(self, obj: Any):
        self.obj = obj
        kind = obj.__name__ if isinstance(obj, type) else type(obj).__name__
        super().__init__(f'record must be a FormRecord, got {kind}')


class UnsupportedFieldTypeError(StructFormError, ValueError):
    """Raised when a field kind has no HTML input equivalent."""

    def __init__(self, field_name: str, kind: Any):
        self.field_name = field_name
        self.kind = kind
        kind_name = getattr(kind, '__name__', repr(kind))
        super().__init__(f'cannot find an HTML equivalent for {field_name!r} of type {kind_name}')


class FieldValueError(StructFormError, ValueError):
    """Raised when a field value cannot be formatted or parsed."""

    def __init__(self, field_name: Optional[str], value: Any, reason: Optional[str] = None):
        self.field_name = field_name
        self.value = value
        if reason is None:
            reason = f'unexpected value for {field_name} {value!r}'
        super().__init__(reason)
