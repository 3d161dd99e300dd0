# csvfile/core/functions/byte_source.py
"""
ByteSource - Whole-content byte providers for the CSV engine

A byte source loads the complete content of a CSV file into memory and keeps
it cached until it is released. The engine parses the cached buffer twice
(measure, then extract), so the content is read from disk only once per load.

Processing pipeline:
    ByteSource.load() → Scanner.measure → Table.resize → Scanner.extract → ByteSource.release()

Implementations:
- FileByteSource: reads a file from disk (file handle is open only during load)
- MemoryByteSource: wraps an existing bytes object

Usage:
    source = FileByteSource("data.csv")
    data = source.load()      # raises OSError if the file cannot be read
    print(source.size)
    source.release()
"""
import logging
import os
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger("csvfile")


class BaseByteSource(ABC):
    """
    Abstract base class for byte sources.

    Subclasses must implement:
    - _read(): Produce the full content as bytes
    - describe(): Return a human-readable source name for logging
    """

    def __init__(self):
        self._buffer: Optional[bytes] = None

    @abstractmethod
    def _read(self) -> bytes:
        """
        Read the whole content.

        Returns:
            Complete content as bytes

        Raises:
            OSError: If the content is not available
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable name of the source."""
        pass

    def load(self) -> bytes:
        """
        Return the content, reading it only if no buffer is cached.

        Returns:
            Cached or freshly read content

        Raises:
            OSError: If the content is not available
        """
        if self._buffer is None:
            self._buffer = self._read()
            logger.debug(f"Loaded {len(self._buffer)} bytes from {self.describe()}")
        return self._buffer

    def release(self) -> None:
        """Drop the cached buffer."""
        self._buffer = None

    @property
    def is_loaded(self) -> bool:
        """Whether a buffer is currently cached."""
        return self._buffer is not None

    @property
    def size(self) -> int:
        """Size of the cached buffer in bytes (0 if nothing is loaded)."""
        return len(self._buffer) if self._buffer is not None else 0


class FileByteSource(BaseByteSource):
    """Byte source backed by a file on disk."""

    def __init__(self, path: Optional[str]):
        super().__init__()
        self._path = path

    @property
    def path(self) -> Optional[str]:
        return self._path

    def _read(self) -> bytes:
        if not self._path:
            raise FileNotFoundError("No CSV file path configured")
        with open(self._path, "rb") as f:
            return f.read()

    def describe(self) -> str:
        return os.fspath(self._path) if self._path else "<no path>"


class MemoryByteSource(BaseByteSource):
    """Byte source wrapping content that is already in memory."""

    def __init__(self, data: bytes):
        super().__init__()
        self._data = bytes(data)

    def _read(self) -> bytes:
        return self._data

    def describe(self) -> str:
        return f"<memory: {len(self._data)} bytes>"


__all__ = [
    "BaseByteSource",
    "FileByteSource",
    "MemoryByteSource",
]
