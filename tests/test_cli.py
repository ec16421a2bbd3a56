"""
Tests for CLI argument parsing.
"""

import pytest
from structform.cli import StructFormArgumentParser, main


class TestCLIParser:
    """Test command-line argument parsing."""

    def test_default_values(self):
        parser = StructFormArgumentParser()
        args = parser.parse_args([])

        assert args.field is None
        assert args.set is None
        assert args.empty_only is False
        assert args.filled_only is False
        assert args.describe is False
        assert args.form_name == 'structform'
        assert args.title is None

    def test_field_multiple(self):
        parser = StructFormArgumentParser()
        args = parser.parse_args(['--field', 'name:string', '--field', 'age:int'])

        assert args.field == ['name:string', 'age:int']

    def test_set_pairs(self):
        parser = StructFormArgumentParser()
        args = parser.parse_args(['--set', 'first_name=Grace', '--set', 'age=85'])

        assert args.set == [('first_name', 'Grace'), ('age', '85')]

    def test_set_value_may_contain_equals(self):
        parser = StructFormArgumentParser()
        args = parser.parse_args(['--set', 'website=https://example.com/?a=b'])

        assert args.set == [('website', 'https://example.com/?a=b')]

    def test_set_empty_value(self):
        parser = StructFormArgumentParser()
        args = parser.parse_args(['--set', 'last_name='])

        assert args.set == [('last_name', '')]

    def test_set_without_equals(self):
        parser = StructFormArgumentParser()
        with pytest.raises(SystemExit):
            parser.parse_args(['--set', 'first_name'])

    def test_set_without_name(self):
        parser = StructFormArgumentParser()
        with pytest.raises(SystemExit):
            parser.parse_args(['--set', '=value'])

    def test_presentation(self):
        parser = StructFormArgumentParser()
        args = parser.parse_args(['--form-name', 'signup', '--title', 'Sign up'])

        assert args.form_name == 'signup'
        assert args.title == 'Sign up'

    def test_empty_and_filled_exclusive(self):
        parser = StructFormArgumentParser()
        with pytest.raises(SystemExit):
            parser.parse_args(['--empty-only', '--filled-only'])

    def test_field_and_set_exclusive(self):
        parser = StructFormArgumentParser()
        with pytest.raises(SystemExit):
            parser.parse_args(['--field', 'name:string', '--set', 'name=x'])

    def test_field_and_filled_only_exclusive(self):
        parser = StructFormArgumentParser()
        with pytest.raises(SystemExit):
            parser.parse_args(['--field', 'name:string', '--filled-only'])

    def test_empty_form_name(self):
        parser = StructFormArgumentParser()
        with pytest.raises(SystemExit):
            parser.parse_args(['--form-name', ' '])


class TestMain:
    """Test the console entry point."""

    def test_demo_output(self, capsys):
        assert main([]) == 0

        out = capsys.readouterr().out
        assert out.count('<form name="structform" method="POST">') == 2
        assert 'value="Ada"' in out

    def test_error_returns_nonzero(self, capsys):
        assert main(['--field', 'flag:bool']) == 3

    def test_unexpected_error_returns_internal_error(self, monkeypatch, capsys):
        def fail(args):
            raise RuntimeError('boom')

        monkeypatch.setattr('structform.cli.run_structform', fail)
        assert main([]) == 1
        assert 'Error: boom' in capsys.readouterr().err
