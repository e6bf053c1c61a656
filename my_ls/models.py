#!/usr/bin/env python3
"""
Data models for directory listing.

Contains the option, error and output records shared by the parser,
the filter and the renderer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


USAGE_LINE = "Usage: my-ls [options] [patterns]"
INVALID_OPTION_HINT = "Hint: Use --help or -h to see the list of valid options."


class ErrorCode(Enum):
    """Process exit codes."""
    SUCCESS = 0
    UNEXPECTED = 1
    SYNTAX = 2
    PATTERN_NOT_FOUND = 3
    INVALID_OPTION = 4
    CONFLICTING_FORMATS = 5


class EntryType(Enum):
    """Type markers shown in long format."""
    DIRECTORY = "d"
    FILE = "f"
    OTHER = "?"


@dataclass
class Options:
    """Flags collected from the command line."""
    show_help: bool = False
    show_version: bool = False
    show_all: bool = False
    long_format: bool = False
    json_format: bool = False
    classic_format: bool = False
    use_regex: bool = False


@dataclass
class ListingError:
    """A user-facing error with its exit code and message lines."""
    code: ErrorCode
    messages: List[str] = field(default_factory=list)
    has_syntax_error: bool = False

    @classmethod
    def invalid_long_option(cls, flag: str) -> "ListingError":
        return cls(
            code=ErrorCode.INVALID_OPTION,
            messages=[f'Error: Invalid option -- "{flag}"', INVALID_OPTION_HINT, USAGE_LINE],
        )

    @classmethod
    def invalid_short_option(cls, flag: str) -> "ListingError":
        return cls(
            code=ErrorCode.INVALID_OPTION,
            messages=[f'Error: Invalid option - "{flag}"', INVALID_OPTION_HINT, USAGE_LINE],
        )

    @classmethod
    def syntax_error(cls) -> "ListingError":
        return cls(
            code=ErrorCode.SYNTAX,
            messages=[
                "Error: Syntax error detected in provided options.",
                "Hint: Ensure your options and flags are properly formatted.",
                "Example: my-ls --all --long",
                USAGE_LINE,
            ],
            has_syntax_error=True,
        )

    @classmethod
    def conflicting_formats(cls) -> "ListingError":
        return cls(
            code=ErrorCode.CONFLICTING_FORMATS,
            messages=[
                'Error: Options "--json" and "--classic" cannot be used together.',
                "Hint: Use either --json or --classic, but not both.",
                "Example: my-ls --json --long",
                USAGE_LINE,
            ],
        )

    @classmethod
    def patterns_not_found(cls, patterns: List[str]) -> "ListingError":
        """One message line per pattern that matched nothing."""
        return cls(
            code=ErrorCode.PATTERN_NOT_FOUND,
            messages=[f"my-ls: {pattern}: No files or directories match the pattern" for pattern in patterns],
        )


class ErrorSlot:
    """Holds at most one ListingError.

    ``record`` only fills an empty slot, so the first error wins.
    ``replace`` always overwrites whatever is held.
    """

    def __init__(self):
        self.error: Optional[ListingError] = None

    def record(self, error: ListingError) -> None:
        if self.error is None:
            self.error = error

    def replace(self, error: ListingError) -> None:
        self.error = error

    def is_empty(self) -> bool:
        return self.error is None


@dataclass
class ParseResult:
    """Output of argument parsing."""
    options: Options = field(default_factory=Options)
    patterns: List[str] = field(default_factory=list)
    error: Optional[ListingError] = None


@dataclass
class FilterResult:
    """Output of pattern filtering."""
    matched: List[str] = field(default_factory=list)
    error: Optional[ListingError] = None


@dataclass
class DirectoryEntry:
    """A single output record."""
    name: str
    entry_type: Optional[EntryType] = None
    size: Optional[str] = None

    def to_dict(self) -> Dict:
        """Convert entry to dictionary for JSON serialization."""
        result = {"name": self.name}
        if self.entry_type is not None:
            result["type"] = self.entry_type.value
        if self.size is not None:
            result["size"] = self.size
        return result


@dataclass
class ProcessOutcome:
    """What the process should print and the code it should exit with."""
    exit_code: ErrorCode = ErrorCode.SUCCESS
    stdout: List[str] = field(default_factory=list)
    stderr: List[str] = field(default_factory=list)
