"""Hash utilities for Groot."""

import hashlib


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        40-character lowercase hex string
    """
    return hashlib.sha1(data).hexdigest()


def hash_text(text: str) -> str:
    """Compute SHA-1 hash of the UTF-8 encoding of text."""
    return hash_object(text.encode('utf-8'))


def hash_file(filepath: str) -> str:
    """
    Compute SHA-1 hash of file.
    
    Args:
        filepath: Path to file
        
    Returns:
        40-character hex string
    """
    with open(filepath, 'rb') as f:
        return hash_object(f.read())


def is_digest(value: str) -> bool:
    """Return True if value looks like a full 40-character hex digest."""
    return len(value) == 40 and all(c in '0123456789abcdef' for c in value)
