# csvfile/core/processor/csv_helper/__init__.py
"""
CSV Helper module

Building blocks used by the CSVFile engine.

Modules:
- csv_constants: format defaults, result codes and data classes
- csv_table: 2-D cell store with comment list and capacity management
- csv_scanner: single-pass tokenizer (measure / extract)
- csv_serializer: CSVTable → bytes
"""

# Constants
from csvfile.core.processor.csv_helper.csv_constants import (
    DEFAULT_SEPARATOR,
    DEFAULT_COMMENT_MARKER,
    DEFAULT_SUBSTITUTE,
    DEFAULT_END_OF_LINE,
    MAX_END_OF_LINE_LENGTH,
    TEXT_ENCODING,
    CSVError,
    CSVFormatConfig,
    CSVAssessment,
)

# Table
from csvfile.core.processor.csv_helper.csv_table import CSVTable

# Scanner
from csvfile.core.processor.csv_helper.csv_scanner import CSVScanner

# Serializer
from csvfile.core.processor.csv_helper.csv_serializer import CSVSerializer

__all__ = [
    # Constants
    "DEFAULT_SEPARATOR",
    "DEFAULT_COMMENT_MARKER",
    "DEFAULT_SUBSTITUTE",
    "DEFAULT_END_OF_LINE",
    "MAX_END_OF_LINE_LENGTH",
    "TEXT_ENCODING",
    "CSVError",
    "CSVFormatConfig",
    "CSVAssessment",
    # Table
    "CSVTable",
    # Scanner
    "CSVScanner",
    # Serializer
    "CSVSerializer",
]
