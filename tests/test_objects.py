"""Record type tests."""

import json
import pytest
from datetime import datetime, timezone
from groot.core.hash import hash_object
from groot.core.objects import Commit, StagingEntry, utc_timestamp


def test_staging_entry_to_dict():
    """Test entries serialize with a 'hash' key."""
    entry = StagingEntry(path='a.txt', digest='a' * 40)
    assert entry.to_dict() == {'path': 'a.txt', 'hash': 'a' * 40}


def test_staging_entry_from_dict():
    """Test entries load from the on-disk mapping."""
    entry = StagingEntry.from_dict({'path': 'dir/b.txt', 'hash': 'b' * 40})
    assert entry.path == 'dir/b.txt'
    assert entry.digest == 'b' * 40


def test_staging_entry_from_dict_invalid():
    """Test a mapping without hash is rejected."""
    with pytest.raises(ValueError):
        StagingEntry.from_dict({'path': 'a.txt'})


def test_utc_timestamp_format():
    """Test ISO-8601 UTC with millisecond precision."""
    moment = datetime(2024, 3, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)
    assert utc_timestamp(moment) == '2024-03-01T12:30:45.123Z'


def test_commit_serialize_key_order():
    """Test commit records use a fixed key order and compact JSON."""
    commit = Commit.create(
        message='first',
        files=[StagingEntry('a.txt', 'a' * 40)],
        parent=None,
        timestamp='2024-01-01T00:00:00.000Z'
    )
    expected = (
        '{"timestamp":"2024-01-01T00:00:00.000Z","message":"first",'
        '"files":[{"path":"a.txt","hash":"' + 'a' * 40 + '"}],"parent":null}'
    )
    assert commit.serialize() == expected.encode()


def test_commit_hash_is_digest_of_record():
    """Test commit identity is the SHA-1 of its serialized form."""
    commit = Commit.create('msg', [], timestamp='2024-01-01T00:00:00.000Z')
    assert commit.hash == hash_object(commit.serialize())


def test_commit_hash_depends_on_parent():
    """Test two commits that differ only by parent have different digests."""
    root = Commit.create('msg', [], parent=None, timestamp='2024-01-01T00:00:00.000Z')
    child = Commit.create('msg', [], parent='c' * 40, timestamp='2024-01-01T00:00:00.000Z')
    assert root.hash != child.hash


def test_commit_deserialize():
    """Test reading a commit record back."""
    original = Commit.create(
        message='second\n\nbody',
        files=[StagingEntry('a.txt', 'a' * 40), StagingEntry('b.txt', 'b' * 40)],
        parent='c' * 40,
    )
    loaded = Commit.from_bytes(original.serialize())
    
    assert loaded.message == 'second\n\nbody'
    assert loaded.parent == 'c' * 40
    assert loaded.timestamp == original.timestamp
    assert [e.path for e in loaded.files] == ['a.txt', 'b.txt']
    assert loaded.hash == original.hash


def test_commit_deserialize_non_ascii_message():
    """Test non-ASCII messages are stored as UTF-8, not escaped."""
    commit = Commit.create('grüße', [], timestamp='2024-01-01T00:00:00.000Z')
    assert 'grüße'.encode('utf-8') in commit.serialize()
    assert Commit.from_bytes(commit.serialize()).message == 'grüße'


@pytest.mark.parametrize('data', [
    b'not json',
    b'[]',
    json.dumps({'timestamp': 't', 'message': 'm', 'files': []}).encode(),
    json.dumps({'timestamp': 't', 'message': 'm', 'files': 'x', 'parent': None}).encode(),
    json.dumps({'timestamp': 't', 'message': 'm', 'files': [], 'parent': 123}).encode(),
    json.dumps({'timestamp': 't', 'message': 'm', 'files': [], 'parent': 'abc'}).encode(),
    json.dumps({'timestamp': 't', 'message': 'm', 'parent': None,
                'files': [{'path': 'a.txt', 'hash': '../../../etc/passwd'}]}).encode(),
])
def test_commit_deserialize_malformed(data):
    """Test malformed records raise ValueError."""
    with pytest.raises(ValueError):
        Commit.from_bytes(data)
