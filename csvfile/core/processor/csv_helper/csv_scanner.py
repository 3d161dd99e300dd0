# csvfile/core/processor/csv_helper/csv_scanner.py
"""
CSV Scanner - Single-pass tokenizer for separator/comment delimited text

Walks a byte buffer left to right and recognizes line terminators,
separators, comment markers and cell content.

2-Pass Approach:
1. Pass 1 (measure): count rows, columns, comments and the longest line
   without storing any text
2. Pass 2 (extract): write cells and comments into a CSVTable that was
   sized from the measure pass

Tokenizing Rules:
- '\\r' and '\\n' both end a line; an empty line produces nothing, so CRLF
  behaves like a single terminator
- The first comment marker on a line opens a comment; everything after it
  (separators and markers included) is comment text
- A separator outside a comment closes the current cell, even if it is empty
- A line counts as a row only if it holds at least one cell byte or separator
  before its comment marker
- A final line without a terminator is processed like a terminated one

Usage:
    scanner = CSVScanner()
    assessment = scanner.measure(data, config)
    table.resize(assessment.rows, assessment.columns, assessment.comments)
    scanner.extract(data, config, table)
"""
import logging

from csvfile.core.processor.csv_helper.csv_constants import (
    CSVAssessment,
    CSVFormatConfig,
    LINE_TERMINATORS,
    TEXT_ENCODING,
)
from csvfile.core.processor.csv_helper.csv_table import CSVTable


def _format_byte(char: str) -> int:
    """Return the byte value of a single format character."""
    return char.encode(TEXT_ENCODING)[0]


def _decode(buffer: bytearray) -> str:
    return buffer.decode(TEXT_ENCODING)


class CSVScanner:
    """
    Tokenizer used in measure mode and extract mode.

    The format configuration is passed on every call, so changes made to the
    separator or comment marker between calls are always honored.
    """

    def __init__(self):
        self._logger = logging.getLogger(f"csvfile.{self.__class__.__name__}")

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    # ========================================================================
    # Pass 1: Measure
    # ========================================================================

    def measure(self, data: bytes, config: CSVFormatConfig) -> CSVAssessment:
        """
        Compute the shape of a CSV buffer.

        Args:
            data: Raw file content
            config: Format configuration

        Returns:
            CSVAssessment with row, column and comment counts and the
            longest line length in bytes
        """
        separator = _format_byte(config.separator)
        marker = _format_byte(config.comment_marker)

        rows = 0
        columns = 0
        comments = 0
        max_line_length = 0

        line_start = 0
        separators = 0
        has_content = False
        in_comment = False

        for k, byte in enumerate(data):
            if byte in LINE_TERMINATORS:
                max_line_length = max(max_line_length, k - line_start)
                if has_content:
                    rows += 1
                    columns = max(columns, separators + 1)
                line_start = k + 1
                separators = 0
                has_content = False
                in_comment = False
            elif in_comment:
                continue
            elif byte == marker:
                in_comment = True
                comments += 1
            else:
                if byte == separator:
                    separators += 1
                has_content = True

        # Unterminated last line
        if line_start < len(data):
            max_line_length = max(max_line_length, len(data) - line_start)
            if has_content:
                rows += 1
                columns = max(columns, separators + 1)

        assessment = CSVAssessment(
            rows=rows,
            columns=columns,
            comments=comments,
            max_line_length=max_line_length,
        )
        self.logger.debug(f"Measured {len(data)} bytes: {assessment}")
        return assessment

    # ========================================================================
    # Pass 2: Extract
    # ========================================================================

    def extract(self, data: bytes, config: CSVFormatConfig, table: CSVTable) -> None:
        """
        Populate a table from a CSV buffer.

        The table must already be sized from a measure pass over the same data
        with the same configuration. Values are stored without sanitizing.

        Args:
            data: Raw file content
            config: Format configuration
            table: Destination table
        """
        separator = _format_byte(config.separator)
        marker = _format_byte(config.comment_marker)

        row = 0
        column = 0
        comment = 0
        in_comment = False
        comment_text = bytearray()
        cell_text = bytearray()

        def end_line() -> None:
            nonlocal row, column, comment, in_comment
            if in_comment:
                if comment_text:
                    table.store_comment(comment, _decode(comment_text))
                    comment_text.clear()
                comment += 1
            if cell_text:
                table.store_cell(row, column, _decode(cell_text))
                cell_text.clear()
                column += 1
            if column:
                row += 1
            column = 0
            in_comment = False

        for byte in data:
            if byte in LINE_TERMINATORS:
                end_line()
            elif in_comment:
                comment_text.append(byte)
            elif byte == marker:
                in_comment = True
            elif byte == separator:
                if cell_text:
                    table.store_cell(row, column, _decode(cell_text))
                    cell_text.clear()
                column += 1
            else:
                cell_text.append(byte)

        if data and data[-1] not in LINE_TERMINATORS:
            end_line()

        self.logger.debug(f"Extracted {row} rows, {comment} comments")


__all__ = ["CSVScanner"]
