"""Working tree enumeration."""

import logging
import os
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

IgnorePredicate = Callable[[str], bool]
ErrorCallback = Callable[[str, OSError], None]


def list_files(
    root: Path,
    is_ignored: Optional[IgnorePredicate] = None,
    on_error: Optional[ErrorCallback] = None
) -> Iterator[str]:
    """
    Recursively list files under root.
    
    Paths are yielded relative to root with forward slashes, sorted by
    name within each directory. Ignored directories are not descended
    into and symlinked directories are not followed. An error on one entry
    is logged and passed to on_error; the scan carries on.
    
    Args:
        root: Directory to scan
        is_ignored: Predicate taking a relative path
        on_error: Called with (relative path, error) for each failure
    
    Yields:
        Relative file paths
    """
    root = Path(root)
    
    def report(rel_path: str, err: OSError) -> None:
        logger.warning("Cannot read %s: %s", rel_path or '.', err.strerror or err)
        if on_error is not None:
            on_error(rel_path, err)
    
    def walk(directory: Path, prefix: str) -> Iterator[str]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            report(prefix.rstrip('/'), e)
            return
        
        for entry in entries:
            rel_path = prefix + entry.name
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file()
            except OSError as e:
                report(rel_path, e)
                continue
            
            if is_ignored is not None and is_ignored(rel_path):
                continue
            
            if is_dir:
                yield from walk(Path(entry.path), rel_path + '/')
            elif is_file:
                yield rel_path
    
    yield from walk(root, '')


class WorkingTreeScanner:
    """
    Enumerates candidate files in a working tree.
    
    Errors from the last scan are kept in ``errors`` as
    (relative path, OSError) pairs.
    """
    
    def __init__(self, root: Path, is_ignored: Optional[IgnorePredicate] = None):
        self.root = Path(root)
        self.is_ignored = is_ignored
        self.errors: List[Tuple[str, OSError]] = []
    
    def list_files(self) -> List[str]:
        """Scan the tree and return all non-ignored file paths."""
        self.errors = []
        return list(list_files(self.root, self.is_ignored,
                               lambda path, err: self.errors.append((path, err))))
