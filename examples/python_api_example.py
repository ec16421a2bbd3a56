#!/usr/bin/env python3
"""
Example: Using structform as a Python library
"""

from dataclasses import dataclass

from structform import (
    FieldDescriptor,
    FieldTag,
    FormRecord,
    FieldValueError,
    UnsupportedFieldTypeError,
    generate_filled_form_html,
    generate_form_html,
    get_fields,
)


@dataclass
class Account(FormRecord):
    """Account settings record."""
    username: str = ''
    email: str = ''
    password: str = ''
    homepage: str = ''
    quota_gb: float = 1.0

    @classmethod
    def field_descriptors(cls):
        return [
            FieldDescriptor('username', str),
            FieldDescriptor('email', str, FieldTag.EMAIL),
            FieldDescriptor('password', str, FieldTag.SECRET),
            FieldDescriptor('homepage', str, FieldTag.URL),
            FieldDescriptor('quota_gb', float),
        ]


# Example 1: Empty form for a record type
def empty_form():
    """Render the blank account form."""
    print(generate_form_html(get_fields(Account)))


# Example 2: Form pre-filled from submitted values
def filled_form():
    """Fill an account from form values and render it again."""
    account = Account()
    try:
        account.process_post({'username': 'ada', 'email': 'ada@example.com', 'quota_gb': '2.5'})
    except FieldValueError as e:
        print(f"✗ Bad value: {e}")
        return
    print(generate_filled_form_html(account))


# Example 3: Unsupported field kinds are reported by name
@dataclass
class Preferences(FormRecord):
    newsletter: bool = False

    @classmethod
    def field_descriptors(cls):
        return [FieldDescriptor('newsletter', bool)]


def unsupported_field():
    try:
        get_fields(Preferences)
    except UnsupportedFieldTypeError as e:
        print(f"✗ {e}")


if __name__ == '__main__':
    empty_form()
    print()
    filled_form()
    print()
    unsupported_field()
