"""Pattern and hidden-file filtering of directory entries."""

from __future__ import annotations

import re
from typing import Callable

from .models import FilterResult, ListingError, Options
from .utils.file_utils import is_hidden_file


def has_filter_list_flow(options: Options, patterns: list[str], error: ListingError | None) -> bool:
    """Return whether the raw listing needs filtering at all.

    Parse errors, help and version never reach a listing, and ``--all``
    with no patterns keeps every entry.
    """
    if error is not None:
        return False
    if options.show_help or options.show_version:
        return False
    if options.show_all and not patterns:
        return False
    return True


def filter_entries(names: list[str], options: Options, patterns: list[str]) -> FilterResult:
    """Select the entries to display, keeping listing order.

    With patterns, an entry is kept if any pattern matches it, and every
    pattern that matched nothing is reported under a single not-found
    error. Without patterns, dotfiles are dropped unless ``show_all``.
    """
    if not patterns:
        matched = [name for name in names if options.show_all or not is_hidden_file(name)]
        return FilterResult(matched=matched)

    matchers = [_build_matcher(pattern, options.use_regex) for pattern in patterns]
    matched = [name for name in names if any(matches(name) for matches in matchers)]

    not_found = [
        pattern
        for pattern, matches in zip(patterns, matchers)
        if not any(matches(name) for name in matched)
    ]
    error = ListingError.patterns_not_found(not_found) if not_found else None
    return FilterResult(matched=matched, error=error)


def _build_matcher(pattern: str, use_regex: bool) -> Callable[[str], bool]:
    """Build a name predicate; invalid regular expressions raise re.error."""
    if use_regex:
        compiled = re.compile(pattern)
        return lambda name: compiled.search(name) is not None
    return lambda name: name == pattern
