"""
Form record contract and the demonstration record for structform.
"""

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from .errors import FieldValueError, UnsupportedFieldTypeError
from .fields import FieldDescriptor, FieldTag


# Submitted numbers: ASCII digits only, no whitespace or digit separators
INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')
FLOAT_PATTERN = re.compile(r'[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?')

# Integer fields hold signed 32-bit values
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


class FormRecord(ABC):
    """
    A flat data record that can be rendered as an HTML form.

    Subclasses list their fields explicitly through field_descriptors() and
    can be filled from the key/value pairs of a submitted form.
    """

    @classmethod
    @abstractmethod
    def field_descriptors(cls) -> List[FieldDescriptor]:
        """Return the record's fields in declaration order."""

    def process_post(self, values: Mapping[str, str]) -> None:
        """
        Fill the record from submitted form values.

        Keys missing from values leave the matching field unchanged.

        Raises:
            FieldValueError: If a value cannot be converted to the field's kind
        """
        fill_from_post(self, values)

    def field_value(self, name: str) -> Any:
        """Return the current value of the named field."""
        return getattr(self, name)


def fill_from_post(record: FormRecord, values: Mapping[str, str]) -> None:
    """
    Set record fields from a mapping of field name -> submitted string.

    Args:
        record: Record to fill
        values: Submitted form values (e.g. from a POST or GET request)

    Raises:
        FieldValueError: If a numeric field receives a non-numeric value
        UnsupportedFieldTypeError: If a field kind cannot be converted
    """
    for descriptor in record.field_descriptors():
        if descriptor.name not in values:
            continue
        value = values[descriptor.name]
        setattr(record, descriptor.name, _convert(descriptor, value))


def _convert(descriptor: FieldDescriptor, value: str) -> Any:
    """Convert a submitted string to the descriptor's kind."""
    if descriptor.kind is str:
        return value

    if descriptor.kind is int:
        if not INTEGER_PATTERN.fullmatch(value):
            raise FieldValueError(descriptor.name, value)
        number = int(value)
        if not INT_MIN <= number <= INT_MAX:
            raise FieldValueError(descriptor.name, value)
        return number

    if descriptor.kind is float:
        if not FLOAT_PATTERN.fullmatch(value):
            raise FieldValueError(descriptor.name, value)
        number = float(value)
        # overflow such as 1e999 comes back as inf
        if not math.isfinite(number):
            raise FieldValueError(descriptor.name, value)
        return number

    raise UnsupportedFieldTypeError(descriptor.name, descriptor.kind)


@dataclass
class SampleRecord(FormRecord):
    """Contact details record used by the command-line demo."""

    first_name: str = ''
    last_name: str = ''
    email: str = ''
    website: str = ''
    phone: str = ''
    password: str = ''
    age: int = 0

    @classmethod
    def field_descriptors(cls) -> List[FieldDescriptor]:
        return [
            FieldDescriptor('first_name', str),
            FieldDescriptor('last_name', str),
            FieldDescriptor('email', str, FieldTag.EMAIL),
            FieldDescriptor('website', str, FieldTag.URL),
            FieldDescriptor('phone', str, FieldTag.TELEPHONE),
            FieldDescriptor('password', str, FieldTag.SECRET),
            FieldDescriptor('age', int),
        ]


# Values used for the filled form in the command-line demo
SAMPLE_VALUES: Dict[str, str] = {
    'first_name': 'Ada',
    'last_name': 'Lovelace',
    'email': 'ada@example.com',
    'website': 'https://example.com',
    'phone': '+555555555',
    'password': 'a big secret',
    'age': '32',
}
