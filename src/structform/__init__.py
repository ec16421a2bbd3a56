"""
structform - Render HTML forms from flat data records.

Licensed under the MIT License.

Programmatic Usage:

    from dataclasses import dataclass
    from structform import FormRecord, FieldDescriptor, FieldTag
    from structform import get_fields, generate_form_html, generate_filled_form_html

    @dataclass
    class Signup(FormRecord):
        email: str = ''
        password: str = ''
        age: int = 0

        @classmethod
        def field_descriptors(cls):
            return [
                FieldDescriptor('email', str, FieldTag.EMAIL),
                FieldDescriptor('password', str, FieldTag.SECRET),
                FieldDescriptor('age', int),
            ]

    # Empty form
    print(generate_form_html(get_fields(Signup)))

    # Form pre-filled from submitted values
    signup = Signup()
    signup.process_post({'email': 'someone@example.com', 'age': '30'})
    print(generate_filled_form_html(signup))
"""

__version__ = "0.1.0"

from structform.errors import (
    StructFormError,
    NotIntrospectableError,
    UnsupportedFieldTypeError,
    FieldValueError,
)
from structform.fields import FieldDescriptor, FieldTag, get_fields, resolve_field_types
from structform.forms import generate_form_html, generate_filled_form_html
from structform.record import FormRecord, SampleRecord, fill_from_post

__all__ = [
    # Records and fields
    'FormRecord',
    'FieldDescriptor',
    'FieldTag',
    'SampleRecord',
    'fill_from_post',
    # Resolution and rendering
    'get_fields',
    'resolve_field_types',
    'generate_form_html',
    'generate_filled_form_html',
    # Errors
    'StructFormError',
    'NotIntrospectableError',
    'UnsupportedFieldTypeError',
    'FieldValueError',
]
