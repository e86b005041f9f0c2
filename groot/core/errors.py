"""Exceptions raised by the Groot core."""

from typing import Optional


class GrootError(Exception):
    """Base exception for Groot."""
    pass


class StorageError(GrootError, OSError):
    """Raised when the object database or a repository file cannot be read or written."""
    
    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Storage error at {self.path}: {reason}")


class ObjectNotFoundError(GrootError):
    """Raised when a digest has no backing object."""
    
    def __init__(self, digest: str):
        self.digest = digest
        super().__init__(f"Object {digest} not found")


class CommitNotFoundError(GrootError):
    """Raised when a commit digest (or prefix) does not resolve."""
    
    def __init__(self, digest: str):
        self.digest = digest
        super().__init__(f"Commit {digest} not found")


class AmbiguousCommitError(GrootError):
    """Raised when a digest prefix matches more than one commit."""
    
    def __init__(self, prefix: str, candidates):
        self.prefix = prefix
        self.candidates = sorted(candidates)
        super().__init__(
            f"Commit prefix {prefix} is ambiguous ({len(self.candidates)} matches)"
        )


class FileNotFoundInCommitError(GrootError):
    """Raised when a commit has no entry for the requested path."""
    
    def __init__(self, path: str, digest: str):
        self.path = path
        self.digest = digest
        super().__init__(f"File {path} not found in commit {digest}")


class BrokenHistoryError(GrootError):
    """Raised when the parent chain references a commit that cannot be read."""
    
    def __init__(self, missing: str, child: Optional[str] = None):
        self.missing = missing
        self.child = child
        msg = f"Broken history: commit {missing} cannot be read"
        if child:
            msg += f" (parent of {child})"
        super().__init__(msg)


class NotARepositoryError(GrootError):
    """Raised when no .groot directory can be found."""
    
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"Not a groot repository: {self.path}")


class RepositoryExistsError(GrootError):
    """Raised by init when the repository directory is already present."""
    
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"Repository already exists at {self.path}")


class RepositoryLockedError(GrootError):
    """Raised when another process holds the repository lock."""
    
    def __init__(self, lock_path):
        self.lock_path = str(lock_path)
        super().__init__(
            f"Unable to lock repository: {self.lock_path} exists. "
            "Another groot process may be running; remove the file if not."
        )


class ConfigError(GrootError):
    """Raised when a configuration key, value or file cannot be used."""
    
    def __init__(self, source, reason: str):
        self.source = str(source)
        self.reason = reason
        super().__init__(f"Invalid configuration {self.source}: {reason}")
