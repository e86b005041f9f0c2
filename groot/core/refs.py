"""HEAD pointer management for Groot."""

import logging
from pathlib import Path
from typing import Optional

from .hash import is_digest
from groot.utils.fs import read_text_safe, write_text_atomic

logger = logging.getLogger(__name__)


class RefManager:
    """
    Manages the HEAD pointer.
    
    HEAD holds the digest of the latest commit, or is empty before the
    first commit. It is replaced atomically, never edited in place.
    """
    
    def __init__(self, head_file: Path):
        """
        Initialize reference manager.
        
        Args:
            head_file: Path to the HEAD file
        """
        self.head_file = Path(head_file)
    
    def resolve_head(self) -> Optional[str]:
        """
        Resolve HEAD to a commit hash.
        
        Returns:
            Commit hash, or None if HEAD is missing, empty or unreadable
        """
        content = read_text_safe(self.head_file)
        if content is None:
            return None
        
        content = content.strip()
        if not content:
            return None
        
        if not is_digest(content):
            logger.warning("HEAD does not hold a valid digest: %r", content[:80])
            return None
        
        return content
    
    def set_head(self, commit_hash: Optional[str]) -> None:
        """
        Point HEAD at a commit.
        
        Args:
            commit_hash: Commit digest, or None to empty HEAD
            
        Raises:
            StorageError: If HEAD cannot be written
        """
        write_text_atomic(self.head_file, commit_hash or '')
        logger.debug("HEAD -> %s", commit_hash or '(empty)')
    
    def __repr__(self) -> str:
        """String representation."""
        return f"RefManager(head={self.resolve_head()})"
