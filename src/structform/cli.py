"""
Command-line interface for structform.
"""

import argparse
import sys
from typing import Tuple

from .core import EXIT_INTERNAL_ERROR, run_structform
from .forms import DEFAULT_FORM_NAME


class StructFormArgumentParser:
    """Custom argument parser for structform."""

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog='structform',
            description='Render HTML forms from flat data records',
            epilog='Without --field, the built-in contact details record is rendered.'
        )
        self._setup_arguments()

    def _setup_arguments(self):
        """Configure all command-line arguments."""

        # Record source
        record_group = self.parser.add_argument_group('record source')
        record_group.add_argument(
            '--field',
            action='append',
            metavar='<spec>',
            help='Declare a form field (format: name:kind[:tag]). May be specified multiple times.'
        )
        record_group.add_argument(
            '--set',
            action='append',
            type=self._parse_assignment,
            metavar='<name=value>',
            help='Override a value of the sample record before rendering the filled form. '
                 'May be specified multiple times.'
        )

        # Output selection
        output_group = self.parser.add_argument_group('output selection')
        output_group.add_argument(
            '--empty-only',
            action='store_true',
            help='Print only the empty form'
        )
        output_group.add_argument(
            '--filled-only',
            action='store_true',
            help='Print only the filled form'
        )
        output_group.add_argument(
            '--describe',
            action='store_true',
            help='Print the resolved field types as JSON instead of HTML'
        )

        # Presentation
        presentation_group = self.parser.add_argument_group('presentation options')
        presentation_group.add_argument(
            '--form-name',
            metavar='<string>',
            default=DEFAULT_FORM_NAME,
            help=f'Value of the form name attribute (default: {DEFAULT_FORM_NAME})'
        )
        presentation_group.add_argument(
            '--title',
            metavar='<string>',
            help='Wrap each form in a complete HTML document with this title'
        )

    @staticmethod
    def _parse_assignment(value: str) -> Tuple[str, str]:
        """Split a name=value pair for --set."""
        name, sep, field_value = value.partition('=')
        if not sep or not name.strip():
            raise argparse.ArgumentTypeError(f'Expected name=value, got: {value}')
        return name.strip(), field_value

    def parse_args(self, args=None):
        """Parse command-line arguments and validate."""
        parsed = self.parser.parse_args(args)
        self._validate_args(parsed)
        return parsed

    def _validate_args(self, args):
        """Validate argument combinations."""
        if args.empty_only and args.filled_only:
            self.parser.error('--empty-only and --filled-only are mutually exclusive')

        # Declared fields have no values to fill
        if args.field and args.set:
            self.parser.error('--set cannot be combined with --field')
        if args.field and args.filled_only:
            self.parser.error('--filled-only cannot be combined with --field')

        if not args.form_name.strip():
            self.parser.error('--form-name must not be empty')


def main(argv=None):
    """Main entry point for structform CLI."""
    parser = StructFormArgumentParser()
    args = parser.parse_args(argv)

    try:
        return run_structform(args)
    except KeyboardInterrupt:
        print('\n\nInterrupted by user', file=sys.stderr)
        return EXIT_INTERNAL_ERROR
    except Exception as e:
        print(f'Error: {e}', file=sys.stderr)
        return EXIT_INTERNAL_ERROR


if __name__ == '__main__':
    sys.exit(main())
