from pathlib import Path

import pytest

from csvfile.core.functions.byte_source import FileByteSource, MemoryByteSource


def test_file_source_loads_whole_content(write_bytes):
    source = FileByteSource(write_bytes(b"a;b\r\n"))

    assert not source.is_loaded
    assert source.size == 0
    assert source.load() == b"a;b\r\n"
    assert source.is_loaded
    assert source.size == 5


def test_file_source_reuses_cached_buffer(write_bytes):
    path = write_bytes(b"first\n")
    source = FileByteSource(path)
    source.load()

    Path(path).write_bytes(b"second\n")
    assert source.load() == b"first\n"

    source.release()
    assert not source.is_loaded
    assert source.load() == b"second\n"


def test_missing_file_raises_os_error(tmp_path):
    source = FileByteSource(str(tmp_path / "missing.csv"))

    with pytest.raises(OSError):
        source.load()
    assert not source.is_loaded


def test_file_source_without_path_raises():
    with pytest.raises(FileNotFoundError):
        FileByteSource(None).load()


def test_memory_source():
    source = MemoryByteSource(b"x;y\n")

    assert source.load() == b"x;y\n"
    assert source.size == 4
    assert "4 bytes" in source.describe()
