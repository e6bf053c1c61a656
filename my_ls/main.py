#!/usr/bin/env python3
"""
Main entry point for directory listing.

Usage:
    my-ls [options] [patterns]
    python3 -m my_ls.main [options] [patterns]
"""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import LOG_FORMAT, load_settings
from .filters import filter_entries, has_filter_list_flow
from .models import ErrorCode, ProcessOutcome
from .parser import parse_args
from .renderer import ListingRenderer
from .utils.file_utils import list_directory


logger = logging.getLogger(__name__)


def run(args: List[str], directory: Path) -> ProcessOutcome:
    """Parse, list, filter and render without touching the process streams."""
    parsed = parse_args(args)
    logger.debug("Parsed options %s with %d pattern(s)", parsed.options, len(parsed.patterns))

    names = list_directory(directory)
    logger.debug("Read %d entries from %s", len(names), directory)

    error = parsed.error
    if has_filter_list_flow(parsed.options, parsed.patterns, parsed.error):
        filtered = filter_entries(names, parsed.options, parsed.patterns)
        names = filtered.matched
        error = filtered.error
        logger.debug("Filter kept %d entries", len(names))

    return ListingRenderer(directory).render(names, parsed.options, error)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None, directory: Optional[Path] = None) -> int:
    """Main entry point for directory listing. Returns the exit code."""
    configure_logging(load_settings(os.environ).debug)

    if argv is None:
        argv = sys.argv[1:]
    if directory is None:
        directory = Path.cwd()

    try:
        outcome = run(argv, directory)
    except Exception as e:
        logger.debug("Unexpected failure while listing %s", directory, exc_info=True)
        print(f"unexpected error: {e}", file=sys.stderr)
        return ErrorCode.UNEXPECTED.value

    for line in outcome.stderr:
        print(line, file=sys.stderr)
    for line in outcome.stdout:
        print(line)

    logger.debug("Exiting with %s", outcome.exit_code)
    return outcome.exit_code.value


if __name__ == "__main__":
    sys.exit(main())
