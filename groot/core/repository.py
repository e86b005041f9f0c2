"""Repository management for Groot."""

import logging
from pathlib import Path
from typing import Optional

from .errors import NotARepositoryError, RepositoryExistsError, StorageError
from groot.utils.fs import lock_file, write_text_atomic

logger = logging.getLogger(__name__)

REPO_DIR_NAME = '.groot'


class Repository:
    """
    Represents a Groot repository.
    
    A repository owns the .groot directory and is the context every
    operation runs against. Components are created lazily:
    
    - ``store``: content-addressed blobs
    - ``index``: the staging area
    - ``refs``: the HEAD pointer
    - ``graph``: commit records and history
    - ``diff``: the line diff engine
    """
    
    def __init__(self, path: str = '.'):
        """
        Initialize repository.
        
        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.groot_dir = self.work_tree / REPO_DIR_NAME
        self.objects_dir = self.groot_dir / 'objects'
        self.commits_dir = self.objects_dir / 'commits'
        self.head_file = self.groot_dir / 'HEAD'
        self.index_file = self.groot_dir / 'index'
        self.config_file = self.groot_dir / 'config'
        self.lock_path = self.groot_dir / 'lock'
        
        self._store = None
        self._index = None
        self._ref_manager = None
        self._graph = None
        self._diff_engine = None
        self._config = None
    
    @property
    def store(self):
        """Get ObjectStore instance."""
        if self._store is None:
            from .store import ObjectStore
            self._store = ObjectStore(self.objects_dir)
        return self._store
    
    @property
    def index(self):
        """Get Index instance."""
        if self._index is None:
            from .index import Index
            self._index = Index(self.index_file, self.store)
        return self._index
    
    @property
    def refs(self):
        """Get RefManager instance."""
        if self._ref_manager is None:
            from .refs import RefManager
            self._ref_manager = RefManager(self.head_file)
        return self._ref_manager
    
    @property
    def graph(self):
        """Get CommitGraph instance."""
        if self._graph is None:
            from .graph import CommitGraph
            self._graph = CommitGraph(self)
        return self._graph
    
    @property
    def diff(self):
        """Get DiffEngine instance."""
        if self._diff_engine is None:
            from groot.operations.diff import DiffEngine
            self._diff_engine = DiffEngine(self)
        return self._diff_engine
    
    @property
    def config(self):
        """Get Config instance for this repository."""
        if self._config is None:
            from .config import Config
            self._config = Config(self.config_file)
        return self._config
    
    def init(self) -> 'Repository':
        """
        Initialize a new repository.
        
        Creates the .groot directory structure:
        .groot/
        ├── objects/       # Blob database
        │   └── commits/   # Commit records
        ├── HEAD           # Current commit digest (empty until first commit)
        ├── index          # Staging area (JSON array)
        └── config         # Repository configuration
        
        Returns:
            Repository: self for method chaining
            
        Raises:
            RepositoryExistsError: If repository already exists
            StorageError: If the structure cannot be created
        """
        if self.groot_dir.exists():
            raise RepositoryExistsError(self.groot_dir)
        
        try:
            self.groot_dir.mkdir(parents=True)
            self.objects_dir.mkdir()
            self.commits_dir.mkdir()
        except OSError as e:
            raise StorageError(self.groot_dir, e.strerror or str(e)) from e
        
        write_text_atomic(self.head_file, '')
        write_text_atomic(self.index_file, '[]')
        write_text_atomic(self.config_file, '[core]\nrepositoryformatversion = 0\n')
        
        logger.debug("Initialized repository at %s", self.groot_dir)
        return self
    
    def is_initialized(self) -> bool:
        """Check whether the .groot directory exists."""
        return self.groot_dir.is_dir()
    
    def lock(self):
        """Context manager holding the repository lock file."""
        return lock_file(self.lock_path)
    
    # Shortcuts for the operations callers use most
    
    def stage(self, path: str, content: bytes) -> str:
        """Stage content for a path. See Index.stage."""
        return self.index.stage(path, content)
    
    def commit(self, message: str) -> str:
        """Commit the staged files. See CommitGraph.commit."""
        return self.graph.commit(message)
    
    def history(self):
        """Walk history from HEAD. See CommitGraph.history."""
        return self.graph.history()
    
    def restore(self, path: str, commit_ref: str) -> Path:
        """Restore a file from a commit. See CommitGraph.restore."""
        return self.graph.restore(path, commit_ref)
    
    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.
        
        Searches from the given path upwards until it finds a .groot directory
        or reaches the filesystem root.
        
        Args:
            path: Starting path for search
            
        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()
        
        while True:
            if (current / REPO_DIR_NAME).is_dir():
                return cls(str(current))
            
            # Reached filesystem root
            if current == current.parent:
                return None
            
            current = current.parent
    
    @classmethod
    def open(cls, path: str = '.') -> 'Repository':
        """
        Like find_repository, but raises when no repository is found.
        
        Raises:
            NotARepositoryError: If no .groot directory exists at or above path
        """
        repo = cls.find_repository(path)
        if repo is None:
            raise NotARepositoryError(Path(path).resolve())
        return repo
    
    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
