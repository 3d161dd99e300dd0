# csvfile/core/csv_file.py
"""
CSVFile - In-memory CSV model with read / write / assess entry points

Main features:
- Load a whole file, parse it into a cell grid and a comment list
- Bounds-checked cell and comment access
- Sanitizing of user-supplied text
- Serialization with a configurable separator, comment marker and end of line
- Shape preview (assess) without touching the table

Processing pipeline:
    read:   ByteSource.load → CSVScanner.measure → CSVTable.resize
            → CSVTable.free_content → CSVScanner.extract → ByteSource.release
    write:  CSVTable → CSVSerializer → file
    assess: ByteSource.load → CSVScanner.measure → ByteSource.release

Engine-level operations return a CSVError instead of raising for I/O and
storage failures.

Usage:
    csv = CSVFile.with_capacity(2, 2, 1, path="out.csv")
    csv.set_comment(0, "hdr")
    csv.set_cell(0, 0, "x")
    csv.set_cell(1, 1, "y")
    csv.write()                  # b"#hdr\\r\\nx;\\r\\n;y\\r\\n"

    with CSVFile("out.csv") as csv:
        error, shape = csv.assess(keep_in_memory=True)
        if not error:
            csv.read()
"""
import logging
import traceback
from typing import List, Optional, Tuple

from csvfile.core.functions.byte_source import (
    BaseByteSource,
    FileByteSource,
    MemoryByteSource,
)
from csvfile.core.functions.sanitizer import sanitize_text
from csvfile.core.processor.csv_helper import (
    MAX_END_OF_LINE_LENGTH,
    CSVAssessment,
    CSVError,
    CSVFormatConfig,
    CSVScanner,
    CSVSerializer,
    CSVTable,
)


class CSVFile:
    """
    CSV file model.

    Owns the format configuration, the cell table and a byte source for the
    configured path. The raw file content stays cached in the byte source
    only when keep_in_memory is requested; otherwise it is released at the
    end of each read / assess.

    Attributes:
        config: Format configuration (shared with scanner and serializer calls)
        table: Cell and comment storage
        path: File path used by read, write and assess
    """

    def __init__(self, path: Optional[str] = None, config: Optional[CSVFormatConfig] = None):
        """
        Create an empty CSV model.

        Args:
            path: CSV file path for read / write / assess
            config: Format configuration (defaults: ';', '#', ':', '\\r\\n')
        """
        self._config = config or CSVFormatConfig()
        self._table = CSVTable()
        self._scanner = CSVScanner()
        self._serializer = CSVSerializer()
        self._path = path
        self._source: BaseByteSource = FileByteSource(path)
        self._logger = logging.getLogger(f"csvfile.{self.__class__.__name__}")

    @classmethod
    def with_capacity(
        cls,
        rows: int,
        columns: int,
        comments: int,
        path: Optional[str] = None,
        config: Optional[CSVFormatConfig] = None
    ) -> "CSVFile":
        """
        Create a pre-sized CSV model.

        Args:
            rows: Number of rows
            columns: Number of columns
            comments: Number of comment lines
            path: CSV file path
            config: Format configuration

        Returns:
            CSVFile with all cells and comments unset
        """
        csv_file = cls(path, config)
        error = csv_file.resize(rows, columns, comments)
        if error:
            csv_file.logger.warning(f"Pre-sizing to {rows}x{columns} failed: {error.name}")
        return csv_file

    # ========================================================================
    # Properties
    # ========================================================================

    @property
    def config(self) -> CSVFormatConfig:
        return self._config

    @property
    def table(self) -> CSVTable:
        return self._table

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def path(self) -> Optional[str]:
        return self._path

    @path.setter
    def path(self, path: Optional[str]) -> None:
        # Content cached for the previous path is no longer valid
        self._source.release()
        self._path = path
        self._source = FileByteSource(path)

    @property
    def separator(self) -> str:
        return self._config.separator

    @separator.setter
    def separator(self, value: str) -> None:
        self._config.separator = value

    @property
    def comment_marker(self) -> str:
        return self._config.comment_marker

    @comment_marker.setter
    def comment_marker(self, value: str) -> None:
        self._config.comment_marker = value

    @property
    def substitute(self) -> str:
        return self._config.substitute

    @substitute.setter
    def substitute(self, value: str) -> None:
        self._config.substitute = value

    @property
    def end_of_line(self) -> str:
        return self._config.end_of_line

    @end_of_line.setter
    def end_of_line(self, value: str) -> None:
        if isinstance(value, str) and len(value) > MAX_END_OF_LINE_LENGTH:
            self.logger.debug(f"End of line {value!r} truncated to {MAX_END_OF_LINE_LENGTH} characters")
        self._config.end_of_line = value

    @property
    def row_count(self) -> int:
        return self._table.row_count

    @property
    def column_count(self) -> int:
        return self._table.column_count

    @property
    def comment_count(self) -> int:
        return self._table.comment_count

    @property
    def is_loaded(self) -> bool:
        """Whether raw file content is cached in memory."""
        return self._source.is_loaded

    # ========================================================================
    # Cells and Comments
    # ========================================================================

    def get_cell(self, row: int, column: int) -> Optional[str]:
        """Return the cell text, or None if unset or out of range."""
        return self._table.get_cell(row, column)

    def set_cell(self, row: int, column: int, text: Optional[str]) -> None:
        """
        Set a cell to sanitized text.

        Out-of-range positions are ignored. None clears the cell.

        Args:
            row: Row index
            column: Column index
            text: Cell text
        """
        self._table.store_cell(row, column, self._sanitize(text))

    def get_comment(self, index: int) -> Optional[str]:
        """Return the comment text, or None if unset or out of range."""
        return self._table.get_comment(index)

    def set_comment(self, index: int, text: Optional[str]) -> None:
        """Set a comment line to sanitized text; out-of-range indices are ignored."""
        self._table.store_comment(index, self._sanitize(text))

    def _sanitize(self, text: Optional[str]) -> Optional[str]:
        return sanitize_text(
            text,
            self._config.separator,
            self._config.comment_marker,
            self._config.substitute,
        )

    def to_rows(self) -> List[List[Optional[str]]]:
        """Return a copy of the cell grid."""
        return self._table.to_rows()

    def get_comments(self) -> List[Optional[str]]:
        """Return a copy of the comment lines."""
        return self._table.get_comments()

    def resize(self, rows: int, columns: int, comments: int) -> CSVError:
        """
        Change the table dimensions, keeping the values inside the new bounds.

        Returns:
            CSVError.NO_ERROR, or CSVError.MEMORY_ERROR with the table unchanged
        """
        try:
            self._table.resize(rows, columns, comments)
        except MemoryError:
            self.logger.error(f"Cannot allocate a {rows}x{columns} table with {comments} comments")
            return CSVError.MEMORY_ERROR
        return CSVError.NO_ERROR

    # ========================================================================
    # Read / Assess
    # ========================================================================

    def _load(self, source: BaseByteSource) -> Tuple[CSVError, bytes]:
        """Load raw content, converting failures to a CSVError."""
        try:
            return CSVError.NO_ERROR, source.load()
        except OSError as e:
            self.logger.error(f"Error reading CSV {source.describe()}: {e}")
            self.logger.debug(traceback.format_exc())
            return CSVError.FILE_ERROR, b""
        except MemoryError:
            self.logger.error(f"Not enough memory to load CSV {source.describe()}")
            return CSVError.MEMORY_ERROR, b""

    def _parse(self, source: BaseByteSource, keep_in_memory: bool) -> CSVError:
        error, data = self._load(source)
        if error:
            return error

        try:
            assessment = self._scanner.measure(data, self._config)
            error = self.resize(assessment.rows, assessment.columns, assessment.comments)
            if error:
                return error
            self._table.free_content()
            self._scanner.extract(data, self._config, self._table)
        finally:
            if not keep_in_memory:
                source.release()

        self.logger.info(
            f"CSV read completed: {source.describe()}, {assessment.rows} rows, "
            f"{assessment.columns} cols, {assessment.comments} comments"
        )
        return CSVError.NO_ERROR if data else CSVError.END_OF_DATA

    def read(self, keep_in_memory: bool = False) -> CSVError:
        """
        Read and parse the CSV file at the configured path.

        Any previous table content is replaced. If the file cannot be loaded
        the table is left unchanged.

        Args:
            keep_in_memory: Keep the raw content cached for further calls

        Returns:
            CSVError.NO_ERROR on success, CSVError.END_OF_DATA for an empty
            file (table emptied), CSVError.FILE_ERROR or CSVError.MEMORY_ERROR
        """
        return self._parse(self._source, keep_in_memory)

    def read_bytes(self, data: bytes) -> CSVError:
        """
        Parse CSV content that is already in memory.

        The configured path and any cached file content are not affected.

        Args:
            data: Raw CSV content

        Returns:
            Same codes as read()
        """
        return self._parse(MemoryByteSource(data), keep_in_memory=False)

    def assess(self, keep_in_memory: bool = False) -> Tuple[CSVError, CSVAssessment]:
        """
        Measure the CSV file without parsing it into the table.

        Args:
            keep_in_memory: Keep the raw content cached (e.g. for a following read)

        Returns:
            (error, assessment) tuple. The assessment holds zero counts when
            the file is empty (CSVError.END_OF_DATA) or cannot be loaded.
        """
        error, data = self._load(self._source)
        if error:
            return error, CSVAssessment()

        try:
            assessment = self._scanner.measure(data, self._config)
        finally:
            if not keep_in_memory:
                self._source.release()

        if not data:
            return CSVError.END_OF_DATA, assessment
        return CSVError.NO_ERROR, assessment

    # ========================================================================
    # Write
    # ========================================================================

    def write(self) -> CSVError:
        """
        Write the table to the configured path.

        Returns:
            CSVError.NO_ERROR, or CSVError.FILE_ERROR if the file cannot be
            created or written
        """
        if not self._path:
            self.logger.error("Cannot write CSV: no path configured")
            return CSVError.FILE_ERROR

        # Render first so an encoding failure never leaves a partial file
        try:
            data = self._serializer.serialize(self._table, self._config)
        except UnicodeEncodeError as e:
            self.logger.error(f"Cannot encode CSV {self._path}: {e}")
            return CSVError.FILE_ERROR

        try:
            with open(self._path, "wb") as f:
                written = f.write(data)
        except OSError as e:
            self.logger.error(f"Error writing CSV {self._path}: {e}")
            self.logger.debug(traceback.format_exc())
            return CSVError.FILE_ERROR

        self.logger.info(
            f"CSV write completed: {self._path}, {written} bytes, "
            f"{self.row_count} rows, {self.comment_count} comments"
        )
        return CSVError.NO_ERROR

    def to_bytes(self) -> bytes:
        """Serialize the table to bytes."""
        return self._serializer.serialize(self._table, self._config)

    # ========================================================================
    # Resource Handling
    # ========================================================================

    def release(self) -> None:
        """Drop cached raw file content."""
        self._source.release()

    def close(self) -> None:
        self.release()

    def __enter__(self) -> "CSVFile":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["CSVFile"]
