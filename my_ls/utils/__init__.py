"""Utility modules for directory listing."""

from .file_utils import describe_entry, format_file_size, get_entry_type, is_hidden_file, list_directory

__all__ = [
    "describe_entry",
    "format_file_size",
    "get_entry_type",
    "is_hidden_file",
    "list_directory",
]
