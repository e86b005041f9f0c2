"""Line-level diff engine."""

from dataclasses import dataclass, field
from difflib import SequenceMatcher
from typing import List, Optional

EQUAL = 'equal'
ADDED = 'added'
REMOVED = 'removed'


@dataclass
class DiffPart:
    """A contiguous run of lines sharing one edit kind."""
    kind: str
    text: str
    
    @property
    def added(self) -> bool:
        return self.kind == ADDED
    
    @property
    def removed(self) -> bool:
        return self.kind == REMOVED
    
    def __repr__(self) -> str:
        """String representation."""
        return f"DiffPart({self.kind}, {self.text!r})"


@dataclass
class FileChange:
    """
    The change a commit made to a single file.
    
    ``old_content`` is None when the file does not exist in the parent
    commit, and ``has_parent`` is False for the root commit. When a blob
    cannot be read from the store, ``unavailable`` holds its digest and no
    diff is computed.
    """
    path: str
    new_content: Optional[str]
    old_content: Optional[str] = None
    has_parent: bool = True
    parts: List[DiffPart] = field(default_factory=list)
    unavailable: Optional[str] = None
    
    @property
    def is_new(self) -> bool:
        return self.unavailable is None and self.old_content is None
    
    @property
    def is_unchanged(self) -> bool:
        return self.unavailable is None and self.old_content == self.new_content


def _append(parts: List[DiffPart], kind: str, lines: List[str]) -> None:
    text = ''.join(lines)
    if not text:
        return
    if parts and parts[-1].kind == kind:
        parts[-1].text += text
    else:
        parts.append(DiffPart(kind, text))


def diff_lines(old_text: str, new_text: str) -> List[DiffPart]:
    """
    Compute a line-based edit script from old_text to new_text.
    
    Lines keep their terminators. Equal runs become ``equal`` parts, lines
    only in new_text ``added`` and lines only in old_text ``removed``; in a
    replaced region the removed part comes first.
    
    Args:
        old_text: Original text
        new_text: Changed text
        
    Returns:
        List of DiffPart objects
    """
    old_lines = old_text.splitlines(keepends=True)
    new_lines = new_text.splitlines(keepends=True)
    
    matcher = SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    parts: List[DiffPart] = []
    
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == 'equal':
            _append(parts, EQUAL, old_lines[i1:i2])
        elif tag == 'delete':
            _append(parts, REMOVED, old_lines[i1:i2])
        elif tag == 'insert':
            _append(parts, ADDED, new_lines[j1:j2])
        else:
            _append(parts, REMOVED, old_lines[i1:i2])
            _append(parts, ADDED, new_lines[j1:j2])
    
    return parts


def decode_content(data: bytes) -> str:
    """Decode stored content as UTF-8, replacing undecodable bytes."""
    return data.decode('utf-8', errors='replace')


class DiffEngine:
    """
    Engine for computing diffs between file contents and commits.
    
    Diffs are for display only; nothing here writes to the repository.
    """
    
    def __init__(self, repo=None):
        """
        Initialize diff engine.
        
        Args:
            repo: Repository instance, needed only for commit diffs
        """
        self.repo = repo
    
    def diff(self, old_text: str, new_text: str) -> List[DiffPart]:
        """Compute the line diff between two texts."""
        return diff_lines(old_text, new_text)
    
    def diff_bytes(self, old_content: bytes, new_content: bytes) -> List[DiffPart]:
        """Compute the line diff between two stored contents."""
        return diff_lines(decode_content(old_content), decode_content(new_content))
    
    def file_change(self, path: str, old_content: Optional[bytes], new_content: bytes,
                    has_parent: bool = True) -> FileChange:
        """
        Describe the change to one file.
        
        Args:
            path: File path
            old_content: Content in the parent commit, None if absent there
            new_content: Content in the commit
            has_parent: False for the root commit
        
        Returns:
            FileChange with parts filled in when an old version exists
        """
        new_text = decode_content(new_content)
        old_text = decode_content(old_content) if old_content is not None else None
        change = FileChange(path=path, new_content=new_text, old_content=old_text,
                            has_parent=has_parent)
        if old_text is not None:
            change.parts = diff_lines(old_text, new_text)
        return change
    
    def diff_commit(self, commit_hash: str) -> List[FileChange]:
        """
        Compute the changes a commit introduced relative to its parent.
        
        Args:
            commit_hash: Commit digest
        
        Returns:
            One FileChange per file recorded in the commit
        """
        return self.repo.graph.changes(commit_hash)
