"""Core functionality for Groot.

This module contains the core data structures:
- Records (StagingEntry, Commit)
- Object store
- Index/staging area
- HEAD management
- Commit graph
- Repository context
- Configuration management
- Hashing utilities

For diffing and status, see groot.operations
For ignore handling and tree scanning, see groot.utils
"""

from groot.core.errors import (
    GrootError,
    StorageError,
    ObjectNotFoundError,
    CommitNotFoundError,
    AmbiguousCommitError,
    FileNotFoundInCommitError,
    BrokenHistoryError,
    NotARepositoryError,
    RepositoryExistsError,
    RepositoryLockedError,
    ConfigError,
)
from groot.core.objects import StagingEntry, Commit
from groot.core.hash import hash_object, hash_file
from groot.core.store import ObjectStore
from groot.core.index import Index
from groot.core.refs import RefManager
from groot.core.graph import CommitGraph
from groot.core.repository import Repository
from groot.core.config import Config, get_config

__all__ = [
    'GrootError',
    'StorageError',
    'ObjectNotFoundError',
    'CommitNotFoundError',
    'AmbiguousCommitError',
    'FileNotFoundInCommitError',
    'BrokenHistoryError',
    'NotARepositoryError',
    'RepositoryExistsError',
    'RepositoryLockedError',
    'ConfigError',
    'StagingEntry',
    'Commit',
    'ObjectStore',
    'Index',
    'RefManager',
    'CommitGraph',
    'Repository',
    'Config',
    'get_config',
    'hash_object',
    'hash_file',
]
