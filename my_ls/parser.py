"""Command-line argument scanning."""

from __future__ import annotations

from .models import ErrorSlot, ListingError, Options, ParseResult

PATTERN_SEPARATOR = "--"

LONG_FLAGS = {
    "all": "show_all",
    "long": "long_format",
    "json": "json_format",
    "classic": "classic_format",
    "regex": "use_regex",
}

SHORT_FLAGS = {
    "a": "show_all",
    "l": "long_format",
}


def parse_args(args: list[str]) -> ParseResult:
    """Scan ``args`` once, left to right, into options, patterns and an error.

    Options are only recognised until the first pattern (or ``--``); after
    that every argument is taken verbatim as a pattern.
    """
    options = Options()
    patterns: list[str] = []
    errors = ErrorSlot()
    pattern_mode = False

    for arg in args:
        if pattern_mode:
            patterns.append(arg)
            continue

        if arg == PATTERN_SEPARATOR:
            pattern_mode = True
            continue

        if arg.startswith("--"):
            _apply_long_flag(arg[2:], options, errors)
            continue

        if arg.startswith("-") and arg != "-":
            for flag in arg[1:]:
                _apply_short_flag(flag, options, errors)
            continue

        patterns.append(arg)
        pattern_mode = True

    if options.json_format and options.classic_format:
        errors.replace(ListingError.conflicting_formats())

    return ParseResult(options=options, patterns=patterns, error=errors.error)


def _apply_long_flag(flag: str, options: Options, errors: ErrorSlot) -> None:
    if _apply_help_or_version(flag, "help", "version", options):
        return
    if flag in LONG_FLAGS:
        setattr(options, LONG_FLAGS[flag], True)
        return
    errors.record(ListingError.invalid_long_option(flag))


def _apply_short_flag(flag: str, options: Options, errors: ErrorSlot) -> None:
    if _apply_help_or_version(flag, "h", "v", options):
        return
    if flag in SHORT_FLAGS:
        setattr(options, SHORT_FLAGS[flag], True)
        return
    if flag == "-":
        errors.replace(ListingError.syntax_error())
        return
    errors.record(ListingError.invalid_short_option(flag))


def _apply_help_or_version(flag: str, help_flag: str, version_flag: str, options: Options) -> bool:
    """Handle help/version, whichever arrives first wins.

    Returns False only when ``flag`` is neither. A losing flag is still
    consumed, silently.
    """
    if flag == help_flag:
        if not options.show_version:
            options.show_help = True
        return True
    if flag == version_flag:
        if not options.show_help:
            options.show_version = True
        return True
    return False
