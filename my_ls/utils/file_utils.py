#!/usr/bin/env python3
"""
File utility functions for directory listing.

Handles directory reading, stat-based type detection and size formatting.
"""

import os
import stat
from pathlib import Path
from typing import List

from ..models import DirectoryEntry, EntryType


KB = 1024
MB = KB * 1024


def list_directory(directory: Path) -> List[str]:
    """Return entry names in ``directory``, ordered by name.

    Errors from the filesystem are not caught here.
    """
    return sorted(os.listdir(directory))


def is_hidden_file(name: str) -> bool:
    """Check if an entry name is a dotfile."""
    return name.startswith(".")


def get_entry_type(mode: int) -> EntryType:
    """Map a stat mode to its type marker."""
    if stat.S_ISDIR(mode):
        return EntryType.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryType.FILE
    return EntryType.OTHER


def format_file_size(size: int) -> str:
    """Render a byte count as B, KB or MB, always floored."""
    if size < KB:
        return f"{size} B"
    if size < MB:
        return f"{size // KB} KB"
    return f"{size // MB} MB"


def describe_entry(directory: Path, name: str) -> DirectoryEntry:
    """Stat ``name`` (following symlinks) and build its long-format record."""
    file_stat = os.stat(directory / name)
    return DirectoryEntry(
        name=name,
        entry_type=get_entry_type(file_stat.st_mode),
        size=format_file_size(file_stat.st_size),
    )
