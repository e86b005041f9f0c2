"""Utilities module for common helper functions.

This module contains:
- Ignore file handling (.grootignore)
- Working tree scanning
- Atomic writes and lock files
"""

from groot.utils.ignore import IgnoreMatcher, is_ignored, read_ignore_file
from groot.utils.scanner import WorkingTreeScanner, list_files

__all__ = [
    'IgnoreMatcher', 'is_ignored', 'read_ignore_file',
    'WorkingTreeScanner', 'list_files',
]
