"""
Core orchestration for structform.
"""

import sys
from typing import Dict, List, Optional, Tuple

from .errors import FieldValueError, NotIntrospectableError, UnsupportedFieldTypeError
from .fields import FieldDescriptor, get_fields, resolve_field_types
from .forms import generate_filled_form_html, generate_form_html, wrap_html_document
from .output import format_error_html, format_json_output
from .record import SAMPLE_VALUES, SampleRecord


# Exit codes
EXIT_SUCCESS = 0
EXIT_INTERNAL_ERROR = 1
EXIT_INVALID_ARGUMENT = 2
EXIT_UNSUPPORTED_RECORD = 3
EXIT_INVALID_VALUE = 4


def run_structform(args) -> int:
    """
    Main execution function for structform.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    # Step 1: Build the record or the declared field list
    record: Optional[SampleRecord] = None
    if args.field:
        try:
            descriptors = parse_field_specs(args.field)
        except ValueError as e:
            print(f'Error: {e}', file=sys.stderr)
            return EXIT_INVALID_ARGUMENT
    else:
        record = SampleRecord()
        descriptors = record.field_descriptors()

    # Step 2: Resolve HTML input types
    try:
        fields = get_fields(record) if record is not None else resolve_field_types(descriptors)
    except (NotIntrospectableError, UnsupportedFieldTypeError) as e:
        if args.describe:
            print(format_json_output(None, success=False, error=str(e)))
        else:
            print(format_error_html('obtain fields for type', e))
        print(f'Error: {e}', file=sys.stderr)
        return EXIT_UNSUPPORTED_RECORD

    if args.describe:
        print(format_json_output(fields))
        return EXIT_SUCCESS

    # Step 3: Empty form
    if not args.filled_only:
        emit_form(generate_form_html(fields, args.form_name), args.title)

    if record is None or args.empty_only:
        return EXIT_SUCCESS

    # Step 4: Fill the record and render it with its values
    values = build_post_values(args.set, descriptors)
    try:
        record.process_post(values)
        emit_form(generate_filled_form_html(record, args.form_name), args.title)
    except FieldValueError as e:
        print(format_error_html('create a filled form', e))
        print(f'Error: {e}', file=sys.stderr)
        return EXIT_INVALID_VALUE

    return EXIT_SUCCESS


def parse_field_specs(field_specs: List[str]) -> List[FieldDescriptor]:
    """
    Parse declarative field specifications.

    Args:
        field_specs: List of name:kind[:tag] strings

    Returns:
        List of FieldDescriptor instances

    Raises:
        ValueError: If a specification is invalid or a field name repeats
    """
    descriptors = []
    seen = set()
    for spec in field_specs:
        descriptor = FieldDescriptor.parse(spec)
        if descriptor.name in seen:
            raise ValueError(f'Duplicate field name: {descriptor.name}')
        seen.add(descriptor.name)
        descriptors.append(descriptor)
    return descriptors


def build_post_values(
    assignments: Optional[List[Tuple[str, str]]],
    descriptors: List[FieldDescriptor]
) -> Dict[str, str]:
    """
    Merge --set assignments over the demo values.

    Names that match no field are dropped with a warning.
    """
    values = dict(SAMPLE_VALUES)
    if not assignments:
        return values

    known = {descriptor.name for descriptor in descriptors}
    unknown = []
    for name, value in assignments:
        if name not in known:
            unknown.append(name)
            continue
        values[name] = value

    if unknown:
        print(
            f'Warning: Ignoring unknown fields: {", ".join(unknown)}',
            file=sys.stderr
        )

    return values


def emit_form(form_html: str, title: Optional[str] = None):
    """Print a rendered form, wrapped in a document when a title is given."""
    if title:
        form_html = wrap_html_document(form_html, title)
    print(form_html)
