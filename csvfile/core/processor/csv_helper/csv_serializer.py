# csvfile/core/processor/csv_helper/csv_serializer.py
"""
CSV Serializer - CSVTable → bytes

Output Layout:
- One line per comment slot: comment marker, comment text (if set), end of line
- One line per row: cells joined by the separator, end of line
- Unset cells and comments are written as empty text

Usage:
    serializer = CSVSerializer()
    data = serializer.serialize(table, config)

    with open(path, "wb") as f:
        serializer.write(f, table, config)
"""
import io
from typing import BinaryIO, Iterator

from csvfile.core.processor.csv_helper.csv_constants import (
    CSVFormatConfig,
    TEXT_ENCODING,
)
from csvfile.core.processor.csv_helper.csv_table import CSVTable


class CSVSerializer:
    """Renders a CSVTable using the current format configuration."""

    def iter_lines(self, table: CSVTable, config: CSVFormatConfig) -> Iterator[str]:
        """
        Yield every output line, end-of-line marker included.

        Comments come first, then the rows.
        """
        eol = config.end_of_line

        for comment in table.get_comments():
            yield f"{config.comment_marker}{comment or ''}{eol}"

        for row in table.to_rows():
            yield config.separator.join(cell or "" for cell in row) + eol

    def write(self, stream: BinaryIO, table: CSVTable, config: CSVFormatConfig) -> int:
        """
        Write the table to a binary stream.

        Args:
            stream: Destination opened in binary mode
            table: Source table
            config: Format configuration

        Returns:
            Number of bytes written

        Raises:
            OSError: If the stream reports a write error
        """
        written = 0
        for line in self.iter_lines(table, config):
            written += stream.write(line.encode(TEXT_ENCODING))
        stream.flush()
        return written

    def serialize(self, table: CSVTable, config: CSVFormatConfig) -> bytes:
        """Render the table to bytes."""
        buffer = io.BytesIO()
        self.write(buffer, table, config)
        return buffer.getvalue()


__all__ = ["CSVSerializer"]
