#!/usr/bin/env python3
"""
Listing result rendering.

Turns the filtered names, options and held error into a ProcessOutcome:
the lines for stdout and stderr plus the exit code.
"""

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from .models import DirectoryEntry, ErrorCode, ListingError, Options, ProcessOutcome
from .utils.file_utils import describe_entry


logger = logging.getLogger(__name__)

VERSION = "1.2.3"

HELP_TEXT = """
Usage: my-ls [options] [patterns]

Options:
  --version, -v       Print version information and exit.
  --help, -h          Display this help message and exit.
  --all, -a           List all files and directories, including hidden ones.
  --long, -l          Display detailed information for files and directories,
                      including type markers and human-readable sizes.
  --json              Output in JSON format. (default: classic)
                      Cannot be used together with --classic.
  --classic           Output in classic format. (default format)
                      Cannot be used together with --json.
  --regex             Enable regex pattern matching for file and directory names.
  --                  Treat subsequent arguments as patterns.

Patterns:
  Specify file or directory names to match. Patterns can be:
    - Exact names
    - Regex patterns (when --regex is enabled)

Important Rules:
  - Once the first pattern is encountered, all subsequent arguments
    are treated as patterns, not options.

Exit Codes:
  0   Success.
  1   Unexpected error occurred.
  2   Syntax error in options.
  3   No files or directories matched the provided patterns.
  4   Invalid option provided.
  5   Mutually exclusive options (--json and --classic) used together.
"""


class ListingRenderer:
    """Renders a directory listing for one invocation."""

    def __init__(self, directory: Path, max_workers: int = 4):
        self.directory = Path(directory)
        self.max_workers = max_workers

    def render(self, names: List[str], options: Options, error: Optional[ListingError]) -> ProcessOutcome:
        """Decide what to print and which code to exit with.

        Syntax errors beat help, help beats version, and version beats any
        other error. A not-found error is reported but the listing still
        prints.
        """
        if error is not None and error.has_syntax_error:
            return ProcessOutcome(exit_code=error.code, stderr=list(error.messages))

        if options.show_help:
            return ProcessOutcome(exit_code=ErrorCode.SUCCESS, stderr=[HELP_TEXT])

        if options.show_version:
            return ProcessOutcome(exit_code=ErrorCode.SUCCESS, stdout=[VERSION])

        if error is not None and error.code != ErrorCode.PATTERN_NOT_FOUND:
            return ProcessOutcome(exit_code=error.code, stderr=list(error.messages))

        entries = self.build_entries(names, options.long_format)

        outcome = ProcessOutcome()
        if error is not None:
            outcome.stderr.extend(error.messages)
            outcome.exit_code = error.code

        if options.json_format:
            outcome.stdout.append(render_json(entries))
        else:
            outcome.stdout.extend(render_classic(entries, options.long_format))
        return outcome

    def build_entries(self, names: List[str], long_format: bool) -> List[DirectoryEntry]:
        """Build output records in listing order, statting in parallel for long format."""
        if not long_format:
            return [DirectoryEntry(name=name) for name in names]

        logger.debug("Resolving metadata for %d entries in %s", len(names), self.directory)
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            return list(executor.map(lambda name: describe_entry(self.directory, name), names))


def render_classic(entries: List[DirectoryEntry], long_format: bool) -> List[str]:
    """One line per entry: ``<type> <size> <name>`` or just ``<name>``."""
    if long_format:
        return [f"{entry.entry_type.value} {entry.size} {entry.name}" for entry in entries]
    return [entry.name for entry in entries]


def render_json(entries: List[DirectoryEntry]) -> str:
    """Render entries as a single compact JSON array."""
    return json.dumps([entry.to_dict() for entry in entries], ensure_ascii=False, separators=(",", ":"))
