"""Repository initialization tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from groot.core.errors import NotARepositoryError, RepositoryExistsError
from groot.core.repository import Repository


@pytest.fixture
def temp_repo():
    """Create temporary repository for testing."""
    temp_dir = tempfile.mkdtemp()
    repo = Repository(temp_dir)
    yield repo
    shutil.rmtree(temp_dir)


def test_repository_init(temp_repo):
    """Test repository initialization creates structure."""
    temp_repo.init()
    assert temp_repo.groot_dir.is_dir()
    assert temp_repo.objects_dir.is_dir()
    assert temp_repo.commits_dir.is_dir()
    assert temp_repo.head_file.exists()
    assert temp_repo.index_file.exists()
    assert temp_repo.config_file.exists()


def test_repository_head_starts_empty(temp_repo):
    """Test HEAD is empty before the first commit."""
    temp_repo.init()
    assert temp_repo.head_file.read_text() == ''
    assert temp_repo.graph.current_head() is None


def test_repository_index_starts_empty(temp_repo):
    """Test the index file is an empty JSON array."""
    temp_repo.init()
    assert temp_repo.index_file.read_text() == '[]'
    assert len(temp_repo.index) == 0


def test_repository_config_content(temp_repo):
    """Test config file contains version."""
    temp_repo.init()
    assert 'repositoryformatversion' in temp_repo.config_file.read_text()


def test_repository_already_exists(temp_repo):
    """Test duplicate init raises error."""
    temp_repo.init()
    with pytest.raises(RepositoryExistsError, match="already exists"):
        temp_repo.init()


def test_find_repository_from_subdirectory(temp_repo):
    """Test find_repository walks up to the .groot directory."""
    temp_repo.init()
    nested = temp_repo.work_tree / 'a' / 'b'
    nested.mkdir(parents=True)
    
    found = Repository.find_repository(str(nested))
    assert found is not None
    assert found.work_tree == temp_repo.work_tree


def test_find_repository_none(temp_repo):
    """Test find_repository returns None outside a repository."""
    assert Repository.find_repository(str(temp_repo.work_tree)) is None


def test_open_raises_outside_repository(temp_repo):
    """Test open raises NotARepositoryError."""
    with pytest.raises(NotARepositoryError):
        Repository.open(str(temp_repo.work_tree))


def test_components_are_cached(temp_repo):
    """Test lazily created components are reused."""
    temp_repo.init()
    assert temp_repo.store is temp_repo.store
    assert temp_repo.index is temp_repo.index
    assert temp_repo.graph is temp_repo.graph
    assert temp_repo.diff is temp_repo.diff
