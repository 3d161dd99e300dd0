# csvfile/core/processor/__init__.py
"""
Processor module

Format-specific parsing and rendering. CSV is handled by csv_helper.
"""
from csvfile.core.processor import csv_helper

__all__ = ["csv_helper"]
