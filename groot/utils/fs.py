"""Filesystem helpers: atomic writes and the repository lock file."""

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from groot.core.errors import RepositoryLockedError, StorageError

logger = logging.getLogger(__name__)


def write_bytes_atomic(path: Path, data: bytes) -> None:
    """Write bytes to file atomically (temp then replace)."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=path.parent, prefix='.tmp_')
    except OSError as e:
        raise StorageError(path, e.strerror or str(e)) from e
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except OSError as e:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise StorageError(path, e.strerror or str(e)) from e


def write_text_atomic(path: Path, text: str) -> None:
    """Write text to file atomically."""
    write_bytes_atomic(path, text.encode('utf-8'))


def read_text_safe(path: Path) -> Optional[str]:
    """Read file as text; return None if not found or error."""
    try:
        return Path(path).read_text(encoding='utf-8')
    except (FileNotFoundError, OSError):
        return None


@contextmanager
def lock_file(path: Path) -> Iterator[Path]:
    """
    Hold an exclusive lock file for the duration of the block.
    
    The lock is a plain file created with O_CREAT | O_EXCL and removed on
    exit, whether or not the block raised.
    
    Raises:
        RepositoryLockedError: If the lock file already exists
        StorageError: If the lock file cannot be created
    """
    path = Path(path)
    try:
        fd = os.open(path, os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o644)
    except FileExistsError:
        raise RepositoryLockedError(path)
    except OSError as e:
        raise StorageError(path, e.strerror or str(e)) from e
    
    try:
        os.write(fd, f"{os.getpid()}\n".encode())
    finally:
        os.close(fd)
    logger.debug("Acquired lock %s", path)
    
    try:
        yield path
    finally:
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        logger.debug("Released lock %s", path)
