"""Groot record types: staging entries and commits."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional
from .hash import hash_object, is_digest


@dataclass
class StagingEntry:
    """
    A staged file snapshot.
    
    Holds the path of the file relative to the work tree and the digest of
    its content in the object store. Serialized as ``{"path", "hash"}``.
    """
    path: str
    digest: str
    
    def to_dict(self) -> dict:
        """Serialize to the on-disk mapping."""
        return {'path': self.path, 'hash': self.digest}
    
    @classmethod
    def from_dict(cls, data: dict) -> 'StagingEntry':
        """
        Build an entry from its on-disk mapping.
        
        Raises:
            ValueError: If the mapping lacks ``path`` or ``hash``
        """
        try:
            return cls(path=str(data['path']), digest=str(data['hash']))
        except (KeyError, TypeError):
            raise ValueError(f"Invalid staging entry: {data!r}")
    
    def __repr__(self) -> str:
        """String representation."""
        return f"StagingEntry({self.digest[:7]} {self.path})"


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """
    Format a moment as ISO-8601 UTC with millisecond precision.
    
    Example: ``2024-03-01T12:00:00.000Z``
    """
    if now is None:
        now = datetime.now(timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.strftime('%Y-%m-%dT%H:%M:%S.') + f"{now.microsecond // 1000:03d}Z"


class Commit:
    """
    Represents a commit record.
    
    A commit captures:
    - Timestamp (ISO-8601 string)
    - Commit message
    - The staged files at commit time
    - The parent commit digest, or None for the root commit
    
    The digest of a commit is the SHA-1 of its serialized form, so the
    serialization uses a fixed key order and compact separators.
    """
    
    def __init__(self):
        """Initialize empty commit."""
        self._hash: Optional[str] = None
        self.timestamp: str = ''
        self.message: str = ''
        self.files: List[StagingEntry] = []
        self.parent: Optional[str] = None
    
    def to_dict(self) -> dict:
        """Return the record in serialization key order."""
        return {
            'timestamp': self.timestamp,
            'message': self.message,
            'files': [entry.to_dict() for entry in self.files],
            'parent': self.parent,
        }
    
    def serialize(self) -> bytes:
        """
        Serialize commit to compact JSON.
        
        Format:
        {"timestamp":...,"message":...,"files":[{"path":...,"hash":...}],"parent":...}
        
        Returns:
            bytes: UTF-8 encoded record
        """
        text = json.dumps(self.to_dict(), separators=(',', ':'), ensure_ascii=False)
        return text.encode('utf-8')
    
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit from JSON.
        
        Args:
            data: Serialized commit record
            
        Raises:
            ValueError: If the record is not a valid commit
        """
        try:
            record = json.loads(data.decode('utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"Malformed commit record: {e}")
        
        if not isinstance(record, dict):
            raise ValueError("Malformed commit record: not an object")
        
        missing = [key for key in ('timestamp', 'message', 'files', 'parent') if key not in record]
        if missing:
            raise ValueError(f"Malformed commit record: missing {', '.join(missing)}")
        
        if not isinstance(record['files'], list):
            raise ValueError("Malformed commit record: files is not a list")
        
        parent = record['parent']
        if parent is not None and not (isinstance(parent, str) and is_digest(parent)):
            raise ValueError(f"Malformed commit record: invalid parent {parent!r}")
        
        files = [StagingEntry.from_dict(item) for item in record['files']]
        for entry in files:
            if not is_digest(entry.digest):
                raise ValueError(f"Malformed commit record: invalid hash for {entry.path}")
        
        self.timestamp = str(record['timestamp'])
        self.message = str(record['message'])
        self.files = files
        self.parent = parent
        self._hash = None
    
    def compute_hash(self) -> str:
        """
        Compute and cache the commit digest.
        
        Returns:
            str: 40-character SHA-1 hash of the serialized record
        """
        if self._hash is None:
            self._hash = hash_object(self.serialize())
        return self._hash
    
    @property
    def hash(self) -> str:
        """Commit digest."""
        return self.compute_hash()
    
    @classmethod
    def create(
        cls,
        message: str,
        files: List[StagingEntry],
        parent: Optional[str] = None,
        timestamp: Optional[str] = None
    ) -> 'Commit':
        """
        Create a new commit.
        
        Args:
            message: Commit message
            files: Staged entries to snapshot
            parent: Digest of the parent commit, None for the root commit
            timestamp: ISO-8601 timestamp (defaults to now)
            
        Returns:
            Commit: New commit object
        """
        commit = cls()
        commit.message = message
        commit.files = list(files)
        commit.parent = parent or None
        commit.timestamp = timestamp or utc_timestamp()
        return commit
    
    @classmethod
    def from_bytes(cls, data: bytes) -> 'Commit':
        """Build a commit from its serialized record."""
        commit = cls()
        commit.deserialize(data)
        return commit
    
    def __repr__(self) -> str:
        """String representation."""
        parent_info = f", parent={self.parent[:7]}" if self.parent else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
