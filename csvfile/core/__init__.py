# csvfile/core/__init__.py
"""
Core module

- CSVFile: CSV model with read / write / assess entry points
- processor: scanner, table and serializer (csv_helper)
- functions: byte sources and the sanitizer
"""
from csvfile.core.csv_file import CSVFile

__all__ = ["CSVFile"]
