"""
HTML form rendering for structform.

Field values are interpolated into the markup verbatim. Callers that render
untrusted values must escape them first.
"""

from typing import Any, Dict, Optional

from .errors import FieldValueError, NotIntrospectableError
from .fields import get_fields


DEFAULT_FORM_NAME = 'structform'


def generate_form_html(fields: Dict[str, str], form_name: str = DEFAULT_FORM_NAME) -> str:
    """
    Generate an empty HTML form from a field mapping.

    Fields are emitted in lexicographic order of their names so the same
    mapping always renders to the same string.

    Args:
        fields: Dictionary of field name -> HTML input type
        form_name: Value of the form's name attribute

    Returns:
        HTML form string
    """
    lines = [generate_input_html(name, fields[name]) for name in sorted(fields)]
    return _wrap_form(lines, form_name)


def generate_filled_form_html(record, form_name: str = DEFAULT_FORM_NAME) -> str:
    """
    Generate an HTML form pre-filled with a record's current values.

    Args:
        record: FormRecord instance
        form_name: Value of the form's name attribute

    Returns:
        HTML form string

    Raises:
        NotIntrospectableError: If record is not a FormRecord instance
        UnsupportedFieldTypeError: If a field kind has no HTML equivalent
        FieldValueError: If a field value cannot be rendered
    """
    # Values are read from an instance, a record class has none
    if isinstance(record, type):
        raise NotIntrospectableError(record)

    fields = get_fields(record)
    lines = []
    for name in sorted(fields):
        try:
            value = format_value(record.field_value(name))
        except FieldValueError as e:
            raise FieldValueError(name, e.value, f'cannot determine the value for {name!r}') from None
        lines.append(generate_input_html(name, fields[name], value))
    return _wrap_form(lines, form_name)


def generate_input_html(name: str, input_type: str, value: Optional[str] = None) -> str:
    """
    Generate the label and input pair for one field.

    Args:
        name: Field name, used for the label text and the input name
        input_type: HTML input type
        value: Current value, or None for an empty input

    Returns:
        HTML string for the field
    """
    label_html = f'<label for="{name}">{name}</label>'
    if value is None:
        return f'{label_html}<input name="{name}" type="{input_type}" />'
    return f'{label_html}<input name="{name}" type="{input_type}" value="{value}" />'


def format_value(value: Any) -> str:
    """
    Render a field value as a string.

    Strings are returned unchanged, integers in base-10 and floats in
    fixed-point notation with six decimal places.

    Raises:
        FieldValueError: If the value is not a str, int or float
    """
    # bool is an int subclass but has no form representation
    if isinstance(value, bool):
        raise FieldValueError(None, value, f'cannot determine the value of {value!r}')
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f'{value:f}'
    raise FieldValueError(None, value, f'cannot determine the value of {value!r}')


def _wrap_form(lines, form_name: str) -> str:
    body = '\n'.join(lines)
    return f'<form name="{form_name}" method="POST">{body}</form>'


def wrap_html_document(form_html: str, title: Optional[str] = None) -> str:
    """
    Wrap a rendered form in a complete HTML document.

    Args:
        form_html: Form markup from generate_form_html or generate_filled_form_html
        title: Page title, also shown as a heading above the form

    Returns:
        Complete HTML document string
    """
    title_html = f'<h1>{escape_html(title)}</h1>\n    ' if title else ''

    return f'''<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{escape_html(title) if title else 'Form'}</title>
</head>
<body>
    {title_html}{form_html}
</body>
</html>'''


def escape_html(text: str) -> str:
    """Escape HTML special characters."""
    if not text:
        return ''
    return (text
            .replace('&', '&amp;')
            .replace('<', '&lt;')
            .replace('>', '&gt;')
            .replace('"', '&quot;')
            .replace("'", '&#x27;'))
