"""Ignore pattern matching for .grootignore files.

Patterns follow a deliberately small grammar:

- ``build/``   trailing slash: the directory itself and everything under it
- ``*.log``    leading star: matched against the basename, ``*`` matches anything
- ``notes.txt`` anything else: the exact path, or everything under it
"""

import logging
import posixpath
import re
from pathlib import Path
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

REPO_DIR_PATTERN = '.groot/'


def normalize(path: str) -> str:
    """Normalize a relative path to forward slashes with no ./ segments."""
    return posixpath.normpath(str(path).replace('\\', '/'))


Rule = Callable[[str], bool]


def compile_pattern(pattern: str) -> Optional[Rule]:
    """
    Turn one ignore pattern into a predicate over normalized paths.
    
    Returns:
        The predicate, or None for a star pattern that is not a valid
        regex (logged; such a pattern matches nothing)
    """
    if pattern.endswith('/'):
        directory = pattern[:-1]
        return lambda path: path.startswith(pattern) or path == directory
    
    if pattern.startswith('*'):
        try:
            regex = re.compile('^' + pattern.replace('*', '.*') + '$')
        except re.error as e:
            logger.warning("Invalid ignore pattern %r: %s", pattern, e)
            return None
        return lambda path: regex.match(posixpath.basename(path)) is not None
    
    return lambda path: path == pattern or path.startswith(pattern + '/')


def is_ignored(path: str, patterns: List[str]) -> bool:
    """
    Check a path against ignore patterns.
    
    Compiles the patterns on every call; scans should build an
    IgnoreMatcher once instead.
    
    Args:
        path: Path relative to the work tree
        patterns: Patterns as read from the ignore file
        
    Returns:
        True if any pattern matches
    """
    return IgnoreMatcher(patterns).is_ignored(path)


def read_ignore_file(repo_root: Path, filename: str = '.grootignore') -> List[str]:
    """
    Read patterns from the ignore file in the work tree.
    
    Blank lines are skipped. A missing file yields no patterns; any other
    read error propagates.
    """
    ignore_path = Path(repo_root) / filename
    try:
        content = ignore_path.read_text(encoding='utf-8')
    except FileNotFoundError:
        return []
    
    return [line.strip() for line in content.split('\n') if line.strip()]


class IgnoreMatcher:
    """Matches paths against a set of ignore patterns, compiled once."""
    
    def __init__(self, patterns: List[str] = None):
        """Initialize matcher with optional patterns."""
        self.patterns: List[str] = []
        self._rules: List[Rule] = []
        for pattern in patterns or []:
            self.add_pattern(pattern)
    
    def add_pattern(self, pattern: str) -> None:
        """Add a pattern to the matcher; blank patterns are skipped."""
        pattern = pattern.strip()
        if not pattern:
            return
        self.patterns.append(pattern)
        rule = compile_pattern(pattern)
        if rule is not None:
            self._rules.append(rule)
    
    def is_ignored(self, path: str) -> bool:
        """Check if a path should be ignored."""
        normalized = normalize(path)
        return any(rule(normalized) for rule in self._rules)
    
    def __call__(self, path: str) -> bool:
        return self.is_ignored(path)
    
    def filter_paths(self, paths: List[str]) -> List[str]:
        """Filter a list of paths, removing ignored ones."""
        return [path for path in paths if not self.is_ignored(path)]


def get_ignore_matcher(repo_root: Path, filename: str = '.grootignore') -> IgnoreMatcher:
    """
    Create an IgnoreMatcher for a repository.
    
    Loads patterns from:
    1. Built-in default (.groot directory)
    2. The ignore file in repo root
    
    Args:
        repo_root: Path to repository root
        filename: Ignore file name (config ``core.ignorefile``)
        
    Returns:
        Configured IgnoreMatcher instance
    """
    matcher = IgnoreMatcher([REPO_DIR_PATTERN])
    for pattern in read_ignore_file(repo_root, filename):
        matcher.add_pattern(pattern)
    return matcher
