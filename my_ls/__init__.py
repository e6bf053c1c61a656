"""Directory listing package."""

from .models import DirectoryEntry, EntryType, ErrorCode, ErrorSlot, ListingError, Options, ProcessOutcome
from .parser import parse_args
from .filters import filter_entries, has_filter_list_flow
from .renderer import ListingRenderer, render_classic, render_json

__all__ = [
    "DirectoryEntry",
    "EntryType",
    "ErrorCode",
    "ErrorSlot",
    "ListingError",
    "Options",
    "ProcessOutcome",
    "parse_args",
    "filter_entries",
    "has_filter_list_flow",
    "ListingRenderer",
    "render_classic",
    "render_json",
]
