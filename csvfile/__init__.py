# csvfile/__init__.py
"""
csvfile

In-memory model for separator-delimited text files with comment lines.

Package layout:
- core: CSV processing modules
    - CSVFile: main model class (read, write, assess, cell/comment access)
    - processor.csv_helper: scanner, table, serializer, constants
    - functions: byte sources and text sanitizing

Usage example:
    from csvfile import CSVFile, CSVError

    csv = CSVFile("data.csv")
    if csv.read() is CSVError.NO_ERROR:
        print(csv.get_cell(0, 0))
"""

__version__ = "0.1.0"

from csvfile.core import CSVFile
from csvfile.core.processor.csv_helper import (
    CSVAssessment,
    CSVError,
    CSVFormatConfig,
)

__all__ = [
    "__version__",
    "CSVFile",
    "CSVAssessment",
    "CSVError",
    "CSVFormatConfig",
]
