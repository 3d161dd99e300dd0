# csvfile/core/functions/sanitizer.py
"""
Sanitizer - Cleans user-supplied cell and comment text

The CSV format has no quoting, so a value containing the separator, the
comment marker or a line break would change the structure of the written
file. Such characters are replaced by the substitute character.

Replaced characters:
- Control characters (code < 32), except tab
- The active separator
- The active comment marker
- Characters outside the single-byte range (code > 255)

Usage:
    from csvfile.core.functions.sanitizer import sanitize_text

    sanitize_text("Bad ; , Cell \\r\\n \\n", ";", "#", ":")
    # -> "Bad : , Cell :: :"
"""
from typing import Optional

TAB = "\t"
MAX_SINGLE_BYTE = 0xFF


def is_structural_char(char: str, separator: str, comment_marker: str) -> bool:
    """Check whether a character would break the CSV line structure."""
    code = ord(char)
    if code < 0x20 and char != TAB:
        return True
    if code > MAX_SINGLE_BYTE:
        return True
    return char == separator or char == comment_marker


def sanitize_text(
    text: Optional[str],
    separator: str,
    comment_marker: str,
    substitute: str
) -> Optional[str]:
    """
    Replace structural characters in text with the substitute character.

    Args:
        text: User-supplied text (None is passed through)
        separator: Active separator character
        comment_marker: Active comment marker character
        substitute: Replacement character

    Returns:
        New sanitized string, or None if text was None
    """
    if text is None:
        return None
    return "".join(
        substitute if is_structural_char(c, separator, comment_marker) else c
        for c in text
    )


__all__ = [
    "is_structural_char",
    "sanitize_text",
]
