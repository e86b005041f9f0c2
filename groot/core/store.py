"""Content-addressable object storage."""

import logging
from pathlib import Path

from .errors import ObjectNotFoundError, StorageError
from .hash import hash_object
from groot.utils.fs import write_bytes_atomic

logger = logging.getLogger(__name__)


class ObjectStore:
    """
    Stores raw file content keyed by its SHA-1 digest.
    
    Objects live in subdirectories named by the first 2 characters of the
    digest, with the remaining 38 characters as the filename. Objects are
    written once and never modified or deleted.
    """
    
    def __init__(self, objects_dir: Path):
        """
        Initialize object store.
        
        Args:
            objects_dir: Root of the object database
        """
        self.objects_dir = Path(objects_dir)
    
    def path_for(self, digest: str) -> Path:
        """
        Get filesystem path for an object.
        
        Args:
            digest: 40-character SHA-1 hash
            
        Returns:
            Path: Full path to object file
        """
        return self.objects_dir / digest[:2] / digest[2:]
    
    def put(self, content: bytes) -> str:
        """
        Write content to the store.
        
        The object is flushed to disk and moved into place atomically, so a
        digest that names an object never names a partial one. Writing the
        same content twice rewrites identical bytes at the same path.
        
        Args:
            content: Raw bytes to store
            
        Returns:
            str: SHA-1 digest of the content
            
        Raises:
            StorageError: If the object cannot be written
        """
        digest = hash_object(content)
        path = self.path_for(digest)
        
        write_bytes_atomic(path, content)
        
        logger.debug("Wrote object %s (%d bytes)", digest, len(content))
        return digest
    
    def get(self, digest: str) -> bytes:
        """
        Read content back from the store.
        
        Raises:
            ObjectNotFoundError: If no object exists for the digest
            StorageError: If the object exists but cannot be read
        """
        path = self.path_for(digest)
        
        try:
            return path.read_bytes()
        except (FileNotFoundError, NotADirectoryError, IsADirectoryError):
            raise ObjectNotFoundError(digest)
        except OSError as e:
            raise StorageError(path, e.strerror or str(e)) from e
    
    def exists(self, digest: str) -> bool:
        """Check if an object exists for the digest."""
        return self.path_for(digest).is_file()
    
    def __repr__(self) -> str:
        """String representation."""
        return f"ObjectStore(path={self.objects_dir})"
