"""HEAD pointer and filesystem helper tests."""

import pytest
from groot.core.errors import RepositoryLockedError
from groot.core.refs import RefManager
from groot.utils.fs import lock_file, read_text_safe, write_text_atomic


def test_head_empty_after_init(repo):
    """Test HEAD starts empty."""
    assert repo.head_file.read_text() == ''
    assert repo.refs.resolve_head() is None


def test_set_and_resolve_head(repo):
    """Test HEAD round trip."""
    repo.refs.set_head('a' * 40)
    assert repo.refs.resolve_head() == 'a' * 40
    assert RefManager(repo.head_file).resolve_head() == 'a' * 40


def test_set_head_none_empties(repo):
    """Test clearing HEAD."""
    repo.refs.set_head('a' * 40)
    repo.refs.set_head(None)
    assert repo.head_file.read_text() == ''


def test_head_tolerates_trailing_newline(repo):
    """Test whitespace around the digest is ignored."""
    repo.head_file.write_text('b' * 40 + '\n')
    assert repo.refs.resolve_head() == 'b' * 40


def test_missing_head(tmp_path):
    """Test a missing HEAD file resolves to None."""
    assert RefManager(tmp_path / 'HEAD').resolve_head() is None


def test_invalid_head_logged(repo, caplog):
    """Test a non-digest HEAD is reported and treated as empty."""
    repo.head_file.write_text('ref: refs/heads/main')
    assert repo.refs.resolve_head() is None
    assert 'valid digest' in caplog.text


def test_write_text_atomic_leaves_no_temp_files(tmp_path):
    """Test atomic writes replace the target and clean up."""
    target = tmp_path / 'file'
    write_text_atomic(target, 'one')
    write_text_atomic(target, 'two')
    
    assert target.read_text() == 'two'
    assert [p.name for p in tmp_path.iterdir()] == ['file']


def test_read_text_safe_missing(tmp_path):
    """Test safe reads of missing files."""
    assert read_text_safe(tmp_path / 'nope') is None


def test_lock_file_exclusive(tmp_path):
    """Test a second lock attempt fails while the first is held."""
    path = tmp_path / 'lock'
    with lock_file(path):
        assert path.exists()
        with pytest.raises(RepositoryLockedError):
            with lock_file(path):
                pass
    assert not path.exists()


def test_lock_file_released_on_error(tmp_path):
    """Test the lock is removed when the block raises."""
    path = tmp_path / 'lock'
    with pytest.raises(RuntimeError):
        with lock_file(path):
            raise RuntimeError('boom')
    assert not path.exists()
