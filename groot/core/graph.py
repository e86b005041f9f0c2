"""Commit graph: creating, reading and walking commits."""

import logging
from pathlib import Path
from typing import Iterator, List, Optional

from .errors import (
    AmbiguousCommitError,
    BrokenHistoryError,
    CommitNotFoundError,
    FileNotFoundInCommitError,
    GrootError,
    ObjectNotFoundError,
    StorageError,
)
from .index import normalize_path
from .objects import Commit, StagingEntry
from .store import ObjectStore

logger = logging.getLogger(__name__)

MIN_PREFIX_LEN = 4
HEX_DIGITS = set('0123456789abcdef')


class CommitGraph:
    """
    Manages commit records and the history they form.
    
    Commit records are stored under ``objects/commits`` using the same
    fan-out layout as blobs. Each commit points at its parent, so history
    is a singly-linked list from HEAD back to the root commit.
    """
    
    def __init__(self, repo):
        """
        Initialize commit graph.
        
        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.commits = ObjectStore(repo.commits_dir)
    
    def current_head(self) -> Optional[str]:
        """Return the digest HEAD points at, or None before the first commit."""
        return self.repo.refs.resolve_head()
    
    def commit(self, message: str, index_snapshot: Optional[List[StagingEntry]] = None) -> str:
        """
        Record the staged files as a new commit.
        
        Runs under the repository lock. The commit object is written first,
        then HEAD is moved, then the index is cleared. If clearing the index
        fails, HEAD is moved back before the error propagates.
        
        Args:
            message: Commit message
            index_snapshot: Entries to commit (defaults to the current index)
        
        Returns:
            str: Digest of the new commit
        
        Raises:
            RepositoryLockedError: If another process holds the lock
            StorageError: If any write fails
        """
        with self.repo.lock():
            index = self.repo.index
            index.read()
            files = index.snapshot() if index_snapshot is None else list(index_snapshot)
            
            previous = self.current_head()
            commit = Commit.create(message=message, files=files, parent=previous)
            
            digest = self.commits.put(commit.serialize())
            self.repo.refs.set_head(digest)
            
            try:
                index.clear()
            except (GrootError, OSError):
                logger.error("Failed to clear index after commit %s; restoring HEAD", digest)
                self.repo.refs.set_head(previous)
                index.read()
                raise
        
        logger.debug("Created commit %s (parent %s, %d files)", digest, previous, len(files))
        return digest
    
    def get_commit(self, digest: str) -> Optional[Commit]:
        """
        Read a commit record.
        
        Returns:
            Commit, or None if the record is missing or malformed (the
            read error is logged)
        """
        try:
            data = self.commits.get(digest)
        except ObjectNotFoundError:
            logger.warning("Failed to read commit %s: not found", digest)
            return None
        except StorageError as e:
            logger.warning("Failed to read commit %s: %s", digest, e.reason)
            return None
        
        try:
            commit = Commit.from_bytes(data)
        except ValueError as e:
            logger.warning("Failed to read commit %s: %s", digest, e)
            return None
        
        commit._hash = digest
        return commit
    
    def read_commit(self, digest: str) -> Commit:
        """
        Read a commit record that must exist.
        
        Raises:
            CommitNotFoundError: If the record is missing or malformed
        """
        commit = self.get_commit(digest)
        if commit is None:
            raise CommitNotFoundError(digest)
        return commit
    
    def history(self) -> Iterator[Commit]:
        """
        Walk commit history from HEAD to the root commit, newest first.
        
        Yields:
            Commit objects
        
        Raises:
            BrokenHistoryError: When a commit in the chain cannot be read;
                every commit before it has already been yielded
        """
        digest = self.current_head()
        child = None
        visited = set()
        
        while digest:
            if digest in visited:
                raise BrokenHistoryError(digest, child)
            visited.add(digest)
            
            commit = self.get_commit(digest)
            if commit is None:
                raise BrokenHistoryError(digest, child)
            
            yield commit
            child = digest
            digest = commit.parent
    
    def file_at(self, commit: Commit, path: str) -> Optional[str]:
        """
        Find the digest recorded for a path in a commit.
        
        If the commit lists the path more than once, the last entry wins.
        
        Returns:
            Blob digest, or None if the path is not in the commit
        """
        path = normalize_path(path)
        for entry in reversed(commit.files):
            if normalize_path(entry.path) == path:
                return entry.digest
        return None
    
    def resolve(self, ref: str) -> str:
        """
        Resolve a commit reference to a full digest.
        
        Accepts ``HEAD``, a full digest, or a unique prefix of at least
        4 hex characters.
        
        Raises:
            CommitNotFoundError: If nothing matches
            AmbiguousCommitError: If a prefix matches several commits
        """
        ref = ref.strip()
        
        if ref.upper() == 'HEAD':
            head = self.current_head()
            if head is None:
                raise CommitNotFoundError('HEAD')
            return head
        
        prefix = ref.lower()
        if len(prefix) < MIN_PREFIX_LEN or not set(prefix) <= HEX_DIGITS:
            raise CommitNotFoundError(ref)
        
        if len(prefix) == 40:
            if self.commits.exists(prefix):
                return prefix
            raise CommitNotFoundError(ref)
        
        fanout = self.commits.objects_dir / prefix[:2]
        if not fanout.is_dir():
            raise CommitNotFoundError(ref)
        
        candidates = [
            prefix[:2] + item.name
            for item in fanout.iterdir()
            if item.is_file() and item.name.startswith(prefix[2:])
        ]
        
        if not candidates:
            raise CommitNotFoundError(ref)
        if len(candidates) > 1:
            raise AmbiguousCommitError(ref, candidates)
        return candidates[0]
    
    def restore(self, path: str, commit_ref: str) -> Path:
        """
        Overwrite a working-tree file with its content at a commit.
        
        All lookups happen before the working tree is touched, so a failed
        restore leaves the file as it was.
        
        Args:
            path: File path relative to the work tree
            commit_ref: Commit digest or unique prefix
        
        Returns:
            Path of the restored file
        
        Raises:
            CommitNotFoundError: If the commit does not resolve
            FileNotFoundInCommitError: If the commit has no such file
            ObjectNotFoundError: If the file content is missing from the store
        """
        digest = self.resolve(commit_ref)
        commit = self.read_commit(digest)
        
        blob_digest = self.file_at(commit, path)
        if blob_digest is None:
            raise FileNotFoundInCommitError(path, digest)
        
        content = self.repo.store.get(blob_digest)
        
        target = self.repo.work_tree / normalize_path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as e:
            raise StorageError(target, e.strerror or str(e)) from e
        
        logger.debug("Restored %s from commit %s", path, digest)
        return target
    
    def _read_blob(self, digest: str, path: str) -> Optional[bytes]:
        try:
            return self.repo.store.get(digest)
        except ObjectNotFoundError:
            logger.warning("Content of %s unavailable: object %s not found", path, digest)
            return None
    
    def changes(self, commit_ref: str) -> list:
        """
        Describe what a commit changed relative to its parent.
        
        A blob missing from the store does not stop the walk: that file's
        change is returned with ``unavailable`` set to the missing digest.
        
        Returns:
            One FileChange per file entry in the commit, in commit order
        
        Raises:
            CommitNotFoundError: If the commit does not resolve
            BrokenHistoryError: If the parent commit cannot be read
        """
        from groot.operations.diff import FileChange, decode_content
        
        digest = self.resolve(commit_ref)
        commit = self.read_commit(digest)
        
        parent = None
        if commit.parent:
            parent = self.get_commit(commit.parent)
            if parent is None:
                raise BrokenHistoryError(commit.parent, digest)
        
        has_parent = parent is not None
        changes = []
        for entry in commit.files:
            new_content = self._read_blob(entry.digest, entry.path)
            if new_content is None:
                changes.append(FileChange(entry.path, None, has_parent=has_parent,
                                          unavailable=entry.digest))
                continue
            
            old_content = None
            old_digest = self.file_at(parent, entry.path) if has_parent else None
            if old_digest is not None:
                old_content = self._read_blob(old_digest, entry.path)
                if old_content is None:
                    changes.append(FileChange(entry.path, decode_content(new_content),
                                              has_parent=has_parent, unavailable=old_digest))
                    continue
            
            changes.append(self.repo.diff.file_change(
                entry.path, old_content, new_content, has_parent=has_parent
            ))
        
        return changes
    
    def __repr__(self) -> str:
        """String representation."""
        return f"CommitGraph(head={self.current_head()})"
