# csvfile/core/functions/__init__.py
"""
Functions - shared helpers for the CSV engine

Modules:
- byte_source: whole-content byte providers (file, memory)
- sanitizer: replacement of structural characters in user text

Usage:
    from csvfile.core.functions import FileByteSource, sanitize_text
"""

from csvfile.core.functions.byte_source import (
    BaseByteSource,
    FileByteSource,
    MemoryByteSource,
)
from csvfile.core.functions.sanitizer import (
    is_structural_char,
    sanitize_text,
)

__all__ = [
    "BaseByteSource",
    "FileByteSource",
    "MemoryByteSource",
    "is_structural_char",
    "sanitize_text",
]
