"""
Field descriptors and HTML input type resolution for structform.
"""

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable

from .errors import NotIntrospectableError, UnsupportedFieldTypeError


# HTML input types
HTML_FIELD_TEXT = 'text'
HTML_FIELD_PASSWORD = 'password'
HTML_FIELD_EMAIL = 'email'
HTML_FIELD_URL = 'url'
HTML_FIELD_TEL = 'tel'  # brings up the dial pad on phone browsers
HTML_FIELD_NUMBER = 'number'


class FieldTag(Enum):
    """Metadata hint that narrows how a text field is rendered."""

    NONE = ''
    SECRET = 'secret'
    EMAIL = 'email'
    URL = 'url'
    TELEPHONE = 'telephone'

    @classmethod
    def parse(cls, text: str) -> 'FieldTag':
        """
        Convert a tag string to a FieldTag.

        Matching is exact. Unrecognized strings map to FieldTag.NONE so the
        default type stands.
        """
        try:
            return cls(text)
        except ValueError:
            return cls.NONE


# Default input type per field kind. Lookup is by exact type so bool
# does not fall through to int.
KIND_TO_HTML: Dict[type, str] = {
    str: HTML_FIELD_TEXT,
    int: HTML_FIELD_NUMBER,
    float: HTML_FIELD_NUMBER,
}

# Overrides applied to text fields only
TAG_TO_HTML: Dict[FieldTag, str] = {
    FieldTag.SECRET: HTML_FIELD_PASSWORD,
    FieldTag.EMAIL: HTML_FIELD_EMAIL,
    FieldTag.URL: HTML_FIELD_URL,
    FieldTag.TELEPHONE: HTML_FIELD_TEL,
}

# Kind names accepted by FieldDescriptor.parse
KIND_NAMES: Dict[str, type] = {
    'string': str,
    'str': str,
    'int': int,
    'int64': int,
    'float': float,
    'float64': float,
    'bool': bool,
    'bytes': bytes,
}


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Describes one field of a form record.

    Attributes:
        name: Field name, used for the input name and its label
        kind: Python type of the field value (str, int or float are supported)
        tag: Optional hint refining the input type of text fields
    """
    name: str
    kind: type
    tag: FieldTag = FieldTag.NONE

    @classmethod
    def parse(cls, spec: str) -> 'FieldDescriptor':
        """
        Parse field descriptor string.

        Format: name:kind[:tag]
        Example: Phone:string:telephone

        Args:
            spec: Field descriptor string

        Returns:
            FieldDescriptor instance

        Raises:
            ValueError: If the descriptor is malformed or the kind name is unknown
        """
        parts = spec.split(':', 2)
        if len(parts) < 2 or not parts[0].strip():
            raise ValueError(f'Invalid field spec: {spec} (expected name:kind[:tag])')

        name = parts[0].strip()
        kind_name = parts[1].strip().lower()
        if kind_name not in KIND_NAMES:
            raise ValueError(
                f'Invalid field kind: {kind_name} (must be one of {sorted(KIND_NAMES)})'
            )

        tag = FieldTag.parse(parts[2].strip()) if len(parts) == 3 else FieldTag.NONE
        return cls(name, KIND_NAMES[kind_name], tag)

    @property
    def html_type(self) -> str:
        """HTML input type for this field."""
        html_type = KIND_TO_HTML.get(self.kind)
        if html_type is None:
            raise UnsupportedFieldTypeError(self.name, self.kind)

        if html_type == HTML_FIELD_TEXT:
            html_type = TAG_TO_HTML.get(self.tag, html_type)

        return html_type


def resolve_field_types(descriptors: Iterable[FieldDescriptor]) -> Dict[str, str]:
    """
    Map field names to their HTML input types.

    Args:
        descriptors: Field descriptors of a record

    Returns:
        Dictionary of field name -> HTML input type

    Raises:
        UnsupportedFieldTypeError: If a field kind has no HTML equivalent
        ValueError: If two descriptors share a name
    """
    fields = {}
    for descriptor in descriptors:
        if descriptor.name in fields:
            raise ValueError(f'Duplicate field name: {descriptor.name}')
        fields[descriptor.name] = descriptor.html_type
    return fields


def get_fields(record) -> Dict[str, str]:
    """
    Return the field names of a record and their HTML input types.

    Args:
        record: FormRecord instance or subclass

    Returns:
        Dictionary of field name -> HTML input type

    Raises:
        NotIntrospectableError: If record is not a concrete FormRecord
        UnsupportedFieldTypeError: If a field kind has no HTML equivalent
    """
    # Import here to avoid circular dependencies
    from .record import FormRecord

    record_cls = record if isinstance(record, type) else type(record)
    if not issubclass(record_cls, FormRecord) or inspect.isabstract(record_cls):
        raise NotIntrospectableError(record)

    return resolve_field_types(record_cls.field_descriptors())
