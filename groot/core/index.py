"""Index (staging area) implementation."""

import json
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from .errors import StorageError
from .objects import StagingEntry
from .store import ObjectStore
from groot.utils.fs import write_text_atomic

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    """Normalize a work-tree relative path to forward slashes without a leading ./"""
    path = str(path).replace('\\', '/')
    while path.startswith('./'):
        path = path[2:]
    return path


class Index:
    """
    Groot index (staging area) implementation.
    
    The index stores the files to be included in the next commit, one
    entry per path. Staging a path again replaces its digest. Every change
    is written to disk immediately as a JSON array of ``{"path", "hash"}``.
    """
    
    def __init__(self, index_file: Path, store: ObjectStore):
        """
        Initialize index and load any entries already on disk.
        
        Args:
            index_file: Path to the index file
            store: Object store that receives staged content
        """
        self.index_file = Path(index_file)
        self.store = store
        self.entries: Dict[str, StagingEntry] = {}
        self.read()
    
    def stage(self, path: str, content: bytes) -> str:
        """
        Stage content for a path.
        
        Args:
            path: File path relative to the work tree
            content: File content
            
        Returns:
            str: Digest of the staged content
        """
        digest = self.store.put(content)
        path = normalize_path(path)
        self.entries.pop(path, None)
        self.entries[path] = StagingEntry(path=path, digest=digest)
        self.write()
        logger.debug("Staged %s as %s", path, digest)
        return digest
    
    def add_file(self, work_tree: Path, filepath) -> str:
        """
        Stage a file from the working tree.
        
        Args:
            work_tree: Root of the working tree
            filepath: Path to file (absolute or relative to the work tree)
            
        Returns:
            str: SHA-1 hash of staged content
            
        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the path is not a file or lies outside the work tree
        """
        work_tree = Path(work_tree).resolve()
        file_path = Path(filepath)
        
        if not file_path.is_absolute():
            file_path = work_tree / file_path
        
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        
        if not file_path.is_file():
            raise ValueError(f"Not a file: {filepath}")
        
        try:
            rel_path = file_path.resolve().relative_to(work_tree)
        except ValueError:
            raise ValueError(f"Path is outside the repository: {filepath}")
        
        return self.stage(rel_path.as_posix(), file_path.read_bytes())
    
    def snapshot(self) -> List[StagingEntry]:
        """Return the staged entries in staging order without clearing."""
        return [StagingEntry(entry.path, entry.digest) for entry in self.entries.values()]
    
    def get_entry(self, path: str) -> Optional[StagingEntry]:
        """Get entry by path."""
        return self.entries.get(normalize_path(path))
    
    def clear(self) -> None:
        """Clear all entries from index and persist the empty index."""
        self.entries.clear()
        self.write()
    
    def write(self) -> None:
        """
        Write index to disk.
        
        Raises:
            StorageError: If the index file cannot be written
        """
        data = [entry.to_dict() for entry in self.entries.values()]
        write_text_atomic(self.index_file, json.dumps(data, separators=(',', ':')))
    
    def read(self) -> None:
        """
        Read index from disk.
        
        A missing or empty file is an empty index. Files holding the same path
        more than once keep the last entry for that path.
        
        Raises:
            StorageError: If the file is unreadable or not a JSON array of entries
        """
        self.entries.clear()
        
        try:
            text = self.index_file.read_text(encoding='utf-8')
        except FileNotFoundError:
            return
        except OSError as e:
            raise StorageError(self.index_file, e.strerror or str(e)) from e
        
        if not text.strip():
            return
        
        try:
            data = json.loads(text)
            if not isinstance(data, list):
                raise ValueError("index is not a JSON array")
            for item in data:
                entry = StagingEntry.from_dict(item)
                entry.path = normalize_path(entry.path)
                self.entries.pop(entry.path, None)
                self.entries[entry.path] = entry
        except ValueError as e:
            raise StorageError(self.index_file, f"malformed index: {e}") from e
    
    def __len__(self) -> int:
        """Number of entries in index."""
        return len(self.entries)
    
    def __contains__(self, path: str) -> bool:
        return normalize_path(path) in self.entries
    
    def __iter__(self) -> Iterator[StagingEntry]:
        return iter(list(self.entries.values()))
    
    def __repr__(self) -> str:
        """String representation."""
        return f"Index(entries={len(self.entries)})"
