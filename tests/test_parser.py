"""
Tests for command-line argument scanning.

Covers long and short flags, help/version ordering, pattern mode
and the error precedence rules.
"""

import pytest

from my_ls.models import ErrorCode, Options
from my_ls.parser import parse_args


class TestParseArgs:
    """Test suite for parse_args."""

    def test_no_arguments(self):
        """Test that an empty argument list yields defaults."""
        result = parse_args([])

        assert result.options == Options()
        assert result.patterns == []
        assert result.error is None

    @pytest.mark.parametrize(
        "args, expected",
        [
            (["--all", "--long"], Options(show_all=True, long_format=True)),
            (["--long", "--all"], Options(show_all=True, long_format=True)),
            (["-al"], Options(show_all=True, long_format=True)),
            (["-l", "--regex", "-a"], Options(show_all=True, long_format=True, use_regex=True)),
            (["--json", "--long"], Options(json_format=True, long_format=True)),
            (["--classic"], Options(classic_format=True)),
        ],
    )
    def test_flags_set_matching_options(self, args, expected):
        """Test that flags set exactly their options, whatever the order."""
        result = parse_args(args)

        assert result.options == expected
        assert result.patterns == []
        assert result.error is None

    def test_help_then_version(self):
        """Test that help wins when it comes first."""
        result = parse_args(["--help", "--version"])

        assert result.options.show_help is True
        assert result.options.show_version is False

    def test_version_then_help(self):
        """Test that version wins when it comes first."""
        result = parse_args(["--version", "--help"])

        assert result.options.show_version is True
        assert result.options.show_help is False
        assert result.error is None, "Losing help flag should be ignored silently"

    def test_short_version_then_help_cluster(self):
        """Test the first-wins rule inside a short flag cluster."""
        result = parse_args(["-vh"])

        assert result.options.show_version is True
        assert result.options.show_help is False

    def test_mixed_short_and_long_help_version(self):
        """Test the first-wins rule across short and long spellings."""
        result = parse_args(["-h", "--version"])

        assert result.options.show_help is True
        assert result.options.show_version is False


class TestPatternMode:
    """Test suite for pattern collection."""

    def test_first_positional_starts_pattern_mode(self):
        """Test that flags after the first pattern are patterns."""
        result = parse_args(["-a", "foo", "--long", "-x"])

        assert result.options == Options(show_all=True)
        assert result.patterns == ["foo", "--long", "-x"]
        assert result.error is None

    def test_separator_starts_pattern_mode(self):
        """Test that -- is consumed and switches to patterns."""
        result = parse_args(["--long", "--", "--all", "--"])

        assert result.options == Options(long_format=True)
        assert result.patterns == ["--all", "--"]

    def test_bare_dash_is_pattern(self):
        """Test that a lone - is treated as a pattern."""
        result = parse_args(["-", "-a"])

        assert result.patterns == ["-", "-a"]
        assert result.options.show_all is False

    def test_pattern_order_preserved(self):
        """Test that patterns keep their command-line order."""
        result = parse_args(["b.txt", "a.txt", "c.txt"])

        assert result.patterns == ["b.txt", "a.txt", "c.txt"]


class TestParseErrors:
    """Test suite for parse error handling."""

    def test_invalid_long_option(self):
        """Test that an unknown long flag records an invalid option error."""
        result = parse_args(["--bogus"])

        assert result.error is not None
        assert result.error.code == ErrorCode.INVALID_OPTION
        assert result.error.messages[0] == 'Error: Invalid option -- "bogus"'
        assert result.error.messages[-1] == "Usage: my-ls [options] [patterns]"

    def test_invalid_short_option(self):
        """Test that an unknown short flag records an invalid option error."""
        result = parse_args(["-x"])

        assert result.error.code == ErrorCode.INVALID_OPTION
        assert result.error.messages[0] == 'Error: Invalid option - "x"'

    def test_json_and_classic_are_short_long_only(self):
        """Test that -j is not a recognised short flag."""
        result = parse_args(["-j"])

        assert result.error.code == ErrorCode.INVALID_OPTION

    def test_first_invalid_option_wins(self):
        """Test that the first invalid option is the one reported."""
        result = parse_args(["--first", "-y", "--second"])

        assert result.error.messages[0] == 'Error: Invalid option -- "first"'

    def test_parsing_continues_after_invalid_option(self):
        """Test that later flags and patterns still register."""
        result = parse_args(["--bogus", "--all", "name"])

        assert result.error.code == ErrorCode.INVALID_OPTION
        assert result.options.show_all is True
        assert result.patterns == ["name"]

    def test_dash_in_cluster_is_syntax_error(self):
        """Test that -a- records a syntax error."""
        result = parse_args(["-a-"])

        assert result.error.code == ErrorCode.SYNTAX
        assert result.error.has_syntax_error is True
        assert result.options.show_all is True

    def test_syntax_error_replaces_invalid_option(self):
        """Test that a syntax error takes the slot from an earlier invalid option."""
        result = parse_args(["-x", "-a-"])

        assert result.error.code == ErrorCode.SYNTAX
        assert result.error.has_syntax_error is True

    def test_invalid_option_after_syntax_error_is_ignored(self):
        """Test that a later invalid option does not replace a syntax error."""
        result = parse_args(["-a-", "--bogus"])

        assert result.error.code == ErrorCode.SYNTAX

    @pytest.mark.parametrize(
        "args",
        [
            ["--json", "--classic"],
            ["--classic", "--all", "--json"],
            ["--bogus", "--json", "--classic"],
            ["-a-", "--classic", "--json"],
            ["--json", "--classic", "pattern"],
        ],
    )
    def test_json_and_classic_conflict(self, args):
        """Test that json with classic always ends in the conflict error."""
        result = parse_args(args)

        assert result.error.code == ErrorCode.CONFLICTING_FORMATS
        assert result.error.has_syntax_error is False
        assert "--json" in result.error.messages[0]
