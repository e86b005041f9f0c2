"""Shared pytest fixtures for Groot tests."""

import os
import pytest
import tempfile
import shutil
from pathlib import Path
from groot.core.config import Config
from groot.core.repository import Repository


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep tests away from the user's global config and GROOT_* variables."""
    home = tmp_path_factory.mktemp('home')
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', home / '.grootconfig')
    for key in list(os.environ):
        if key.startswith('GROOT_'):
            monkeypatch.delenv(key)
    return home


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def in_repo(repo, monkeypatch):
    """Run the test from inside the repository work tree."""
    monkeypatch.chdir(repo.work_tree)
    return repo


def write_and_stage(repo, path, content):
    """Write a working file and stage it; returns the blob digest."""
    file_path = repo.work_tree / path
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_bytes(content if isinstance(content, bytes) else content.encode())
    return repo.index.add_file(repo.work_tree, path)


@pytest.fixture
def stage_file(repo):
    """Return a helper that writes and stages a file in the repository."""
    def _stage(path, content):
        return write_and_stage(repo, path, content)
    return _stage


@pytest.fixture
def repo_with_commits(repo):
    """
    Repository with two commits.
    
    - first:  a.txt = "hello\\n"
    - second: a.txt = "hello\\nworld\\n", b.txt = "bee\\n"
    
    The commit digests are available as ``repo.first`` and ``repo.second``.
    """
    write_and_stage(repo, 'a.txt', 'hello\n')
    repo.first = repo.commit('first')
    
    write_and_stage(repo, 'a.txt', 'hello\nworld\n')
    write_and_stage(repo, 'b.txt', 'bee\n')
    repo.second = repo.commit('second')
    
    return repo


@pytest.fixture
def working_files(repo):
    """Create sample file structure in repository."""
    file1 = repo.work_tree / "test1.txt"
    file2 = repo.work_tree / "test2.txt"
    
    (repo.work_tree / "subdir").mkdir()
    file3 = repo.work_tree / "subdir" / "test3.txt"
    
    file1.write_text("Content 1")
    file2.write_text("Content 2")
    file3.write_text("Content 3")
    
    return {
        'file1': file1,
        'file2': file2,
        'file3': file3
    }
