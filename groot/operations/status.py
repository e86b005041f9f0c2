"""Working tree status computation."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from groot.core.hash import hash_file
from groot.utils.ignore import IgnoreMatcher, get_ignore_matcher
from groot.utils.scanner import WorkingTreeScanner

logger = logging.getLogger(__name__)


@dataclass
class StatusReport:
    """
    Status of the working tree relative to the index and HEAD.
    
    - staged: paths in the index
    - modified: tracked paths whose working content differs from the index
      entry, or from HEAD when the path is not staged
    - deleted: staged or committed paths missing from the working tree
    - untracked: paths neither staged nor committed
    """
    staged: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)
    untracked: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    
    @property
    def is_clean(self) -> bool:
        return not (self.staged or self.modified or self.deleted or self.untracked)


def head_files(repo) -> Dict[str, str]:
    """Map each path in the HEAD commit to its digest (last entry wins)."""
    head = repo.graph.current_head()
    if head is None:
        return {}
    commit = repo.graph.get_commit(head)
    if commit is None:
        return {}
    return {entry.path: entry.digest for entry in commit.files}


def compute_status(repo, matcher: Optional[IgnoreMatcher] = None) -> StatusReport:
    """
    Compare the working tree with the index and the HEAD commit.
    
    Args:
        repo: Repository instance
        matcher: Ignore matcher (defaults to the repository ignore file)
    
    Returns:
        StatusReport with sorted path lists
    """
    if matcher is None:
        matcher = get_ignore_matcher(repo.work_tree, repo.config.ignore_file)
    
    report = StatusReport()
    index = repo.index
    index.read()
    staged = {entry.path: entry.digest for entry in index}
    
    report.staged = sorted(path for path in staged if not matcher.is_ignored(path))
    
    committed = head_files(repo)
    scanner = WorkingTreeScanner(repo.work_tree, matcher.is_ignored)
    working = scanner.list_files()
    report.errors = [path for path, _ in scanner.errors]
    
    for path in working:
        # The index entry, when there is one, is what the next commit records
        expected = staged.get(path, committed.get(path))
        if expected is None:
            report.untracked.append(path)
            continue
        
        try:
            current = hash_file(str(repo.work_tree / path))
        except OSError as e:
            logger.warning("Cannot hash %s: %s", path, e)
            report.errors.append(path)
            continue
        
        if current != expected:
            report.modified.append(path)
    
    report.modified.sort()
    report.untracked.sort()
    
    present = set(working)
    report.deleted = sorted(
        path for path in set(committed) | set(staged)
        if path not in present and not matcher.is_ignored(path)
    )
    
    return report
