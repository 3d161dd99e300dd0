# csvfile/core/processor/csv_helper/csv_constants.py
"""
CSV Constants

Default format characters, result codes and data classes shared by the
scanner, table, serializer and the CSVFile engine.
"""
from dataclasses import dataclass
from enum import Enum


# ============================================================================
# Format Defaults
# ============================================================================

DEFAULT_SEPARATOR = ";"
DEFAULT_COMMENT_MARKER = "#"
DEFAULT_SUBSTITUTE = ":"
DEFAULT_END_OF_LINE = "\r\n"

# End-of-line markers longer than this are truncated
MAX_END_OF_LINE_LENGTH = 3

# Cells are single-byte text: every byte maps to exactly one character
TEXT_ENCODING = "latin-1"

LINE_TERMINATORS = (0x0D, 0x0A)  # \r, \n


# ============================================================================
# Result Codes
# ============================================================================

class CSVError(Enum):
    """Outcome of an engine-level operation."""
    NO_ERROR = 0
    FILE_ERROR = 1      # Missing, unreadable or unwritable file
    MEMORY_ERROR = 2    # Backing storage could not grow
    END_OF_DATA = 3     # Empty or exhausted source (non-fatal)

    def __bool__(self) -> bool:
        return self is not CSVError.NO_ERROR


# ============================================================================
# Data Classes
# ============================================================================

FORMAT_CHAR_FIELDS = ("separator", "comment_marker", "substitute")


def check_format_char(name: str, value: str) -> str:
    """Validate a separator / comment marker / substitute character."""
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")
    if ord(value) > 0xFF:
        raise ValueError(f"{name} must be a single-byte character, got {value!r}")
    if ord(value) in LINE_TERMINATORS:
        raise ValueError(f"{name} cannot be a line terminator")
    return value


def check_end_of_line(value: str) -> str:
    """Validate an end-of-line marker, truncating it to MAX_END_OF_LINE_LENGTH."""
    if not isinstance(value, str) or not value:
        raise ValueError(f"end_of_line must be a non-empty string, got {value!r}")
    value = value[:MAX_END_OF_LINE_LENGTH]
    if any(ord(c) > 0xFF for c in value):
        raise ValueError(f"end_of_line must use single-byte characters, got {value!r}")
    return value


@dataclass
class CSVFormatConfig:
    """Format characters used when parsing and writing.

    Every assignment is validated, in the constructor and afterwards, so a
    config object never holds a value the scanner or serializer cannot use.
    Once all fields are set, the separator, comment marker and substitute
    must be pairwise distinct.

    Attributes:
        separator: Character dividing cells on a data line
        comment_marker: Character introducing a comment line
        substitute: Replacement for characters that would corrupt the layout
        end_of_line: Line terminator written after every line (max 3 chars)
    """
    separator: str = DEFAULT_SEPARATOR
    comment_marker: str = DEFAULT_COMMENT_MARKER
    substitute: str = DEFAULT_SUBSTITUTE
    end_of_line: str = DEFAULT_END_OF_LINE

    def __setattr__(self, name: str, value) -> None:
        if name in FORMAT_CHAR_FIELDS:
            value = check_format_char(name, value)
        elif name == "end_of_line":
            value = check_end_of_line(value)

        if name in FORMAT_CHAR_FIELDS and all(f in self.__dict__ for f in FORMAT_CHAR_FIELDS):
            chars = {f: self.__dict__[f] for f in FORMAT_CHAR_FIELDS}
            chars[name] = value
            self._check_distinct(chars)
        super().__setattr__(name, value)

    def __post_init__(self) -> None:
        self._check_distinct({f: getattr(self, f) for f in FORMAT_CHAR_FIELDS})

    @staticmethod
    def _check_distinct(chars: dict) -> None:
        if len(set(chars.values())) != len(chars):
            raise ValueError(
                "separator, comment_marker and substitute must differ, got "
                + ", ".join(f"{k}={v!r}" for k, v in chars.items())
            )


@dataclass
class CSVAssessment:
    """Shape of a CSV buffer as computed by a measure pass.

    Attributes:
        rows: Number of non-empty data lines
        columns: Maximum number of columns on a data line
        comments: Number of comment lines
        max_line_length: Longest line in bytes, terminator excluded
    """
    rows: int = 0
    columns: int = 0
    comments: int = 0
    max_line_length: int = 0


__all__ = [
    "DEFAULT_SEPARATOR",
    "DEFAULT_COMMENT_MARKER",
    "DEFAULT_SUBSTITUTE",
    "DEFAULT_END_OF_LINE",
    "MAX_END_OF_LINE_LENGTH",
    "TEXT_ENCODING",
    "LINE_TERMINATORS",
    "check_format_char",
    "check_end_of_line",
    "CSVError",
    "CSVFormatConfig",
    "CSVAssessment",
]
