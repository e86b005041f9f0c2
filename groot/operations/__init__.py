"""Operations module for high-level Groot operations.

This module contains:
- Diff computation
- Status computation
"""

from groot.operations.diff import DiffEngine, DiffPart, FileChange, diff_lines
from groot.operations.status import StatusReport, compute_status

__all__ = [
    'DiffEngine', 'DiffPart', 'FileChange', 'diff_lines',
    'StatusReport', 'compute_status',
]
