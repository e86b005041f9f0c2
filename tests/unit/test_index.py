"""Index tests."""

import json
import pytest
from groot.core.errors import StorageError
from groot.core.hash import hash_object
from groot.core.index import Index, normalize_path
from groot.core.objects import StagingEntry


def test_index_creation(repo):
    """Test a fresh repository has an empty index."""
    assert len(repo.index) == 0
    assert repo.index.snapshot() == []


def test_stage_returns_digest_and_stores_content(repo):
    """Test staging writes the content to the object store."""
    digest = repo.index.stage('a.txt', b'hello\n')
    assert digest == hash_object(b'hello\n')
    assert repo.store.get(digest) == b'hello\n'


def test_stage_persists_immediately(repo):
    """Test the index file is written on every stage."""
    repo.index.stage('a.txt', b'hello\n')
    data = json.loads(repo.index_file.read_text())
    assert data == [{'path': 'a.txt', 'hash': hash_object(b'hello\n')}]


def test_stage_visible_to_new_index(repo):
    """Test a new Index instance loads staged entries from disk."""
    repo.index.stage('a.txt', b'one')
    repo.index.stage('b.txt', b'two')
    
    reloaded = Index(repo.index_file, repo.store)
    assert [e.path for e in reloaded.snapshot()] == ['a.txt', 'b.txt']


def test_stage_same_path_keeps_one_entry(repo):
    """Test re-staging a path replaces its digest."""
    repo.index.stage('a.txt', b'v1')
    repo.index.stage('a.txt', b'v2')
    
    assert len(repo.index) == 1
    assert repo.index.get_entry('a.txt').digest == hash_object(b'v2')


def test_read_collapses_duplicate_paths_last_wins(repo):
    """Test an index file listing a path twice keeps the last entry."""
    repo.index_file.write_text(json.dumps([
        {'path': 'a.txt', 'hash': 'a' * 40},
        {'path': 'b.txt', 'hash': 'b' * 40},
        {'path': 'a.txt', 'hash': 'c' * 40},
    ]))
    index = Index(repo.index_file, repo.store)
    
    assert len(index) == 2
    assert index.get_entry('a.txt').digest == 'c' * 40


def test_snapshot_does_not_clear(repo):
    """Test snapshot returns entries without clearing."""
    repo.index.stage('a.txt', b'x')
    snap = repo.index.snapshot()
    
    assert snap == [StagingEntry('a.txt', hash_object(b'x'))]
    assert len(repo.index) == 1


def test_snapshot_is_a_copy(repo):
    """Test mutating a snapshot does not touch the index."""
    repo.index.stage('a.txt', b'x')
    snap = repo.index.snapshot()
    snap[0].digest = 'f' * 40
    assert repo.index.get_entry('a.txt').digest == hash_object(b'x')


def test_clear(repo):
    """Test clearing empties the index on disk."""
    repo.index.stage('a.txt', b'x')
    repo.index.clear()
    
    assert len(repo.index) == 0
    assert json.loads(repo.index_file.read_text()) == []


def test_add_file(repo):
    """Test staging a working-tree file by relative path."""
    (repo.work_tree / 'dir').mkdir()
    (repo.work_tree / 'dir' / 'f.txt').write_bytes(b'content')
    
    digest = repo.index.add_file(repo.work_tree, 'dir/f.txt')
    
    assert digest == hash_object(b'content')
    assert 'dir/f.txt' in repo.index


def test_add_file_absolute_path(repo):
    """Test absolute paths are stored relative to the work tree."""
    path = repo.work_tree / 'abs.txt'
    path.write_text('abs')
    repo.index.add_file(repo.work_tree, path)
    assert repo.index.get_entry('abs.txt') is not None


def test_add_file_missing(repo):
    """Test adding a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        repo.index.add_file(repo.work_tree, 'missing.txt')


def test_add_file_directory(repo):
    """Test adding a directory raises ValueError."""
    (repo.work_tree / 'dir').mkdir()
    with pytest.raises(ValueError):
        repo.index.add_file(repo.work_tree, 'dir')


def test_add_file_outside_work_tree(repo, tmp_path):
    """Test files outside the work tree are rejected."""
    outside = tmp_path / 'outside.txt'
    outside.write_text('x')
    with pytest.raises(ValueError):
        repo.index.add_file(repo.work_tree, outside)


def test_missing_index_file_is_empty(repo):
    """Test a missing index file reads as empty."""
    repo.index_file.unlink()
    assert len(Index(repo.index_file, repo.store)) == 0


def test_malformed_index_raises(repo):
    """Test a corrupt index file raises StorageError."""
    repo.index_file.write_text('{"not": "a list"}')
    with pytest.raises(StorageError):
        Index(repo.index_file, repo.store)


@pytest.mark.parametrize('raw,expected', [
    ('a.txt', 'a.txt'),
    ('./a.txt', 'a.txt'),
    ('dir\\b.txt', 'dir/b.txt'),
])
def test_normalize_path(raw, expected):
    """Test path normalization for index keys."""
    assert normalize_path(raw) == expected
