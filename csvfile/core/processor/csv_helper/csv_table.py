# csvfile/core/processor/csv_helper/csv_table.py
"""
CSV Table - Dense 2-D cell store with a separate comment list

Holds the cell grid and the comment lines of a CSV file together with their
logical counts and allocated capacities.

Storage Layout:
- _cells: allocated_rows lists, each allocated_columns slots long
- _comments: allocated_comments slots
- Unset slots hold None

Capacity Rules:
- Growing past capacity extends the storage; new slots are None
- Shrinking below the previous count clears the discarded range but keeps
  the capacity, so a later grow exposes only unset slots
- Each dimension is handled independently

Usage:
    table = CSVTable()
    table.resize(2, 3, 1)
    table.store_cell(0, 0, "a")
    table.get_cell(0, 0)   # "a"
    table.get_cell(5, 5)   # None (out of range)
"""
import logging
from typing import List, Optional


class CSVTable:
    """
    Row/column grid of optional strings plus an indexed comment list.

    Cell and comment values are stored as given; sanitizing user input is the
    caller's job (see CSVFile.set_cell). Out-of-range reads return None and
    out-of-range writes are ignored.
    """

    def __init__(self, rows: int = 0, columns: int = 0, comments: int = 0):
        self._cells: List[List[Optional[str]]] = []
        self._comments: List[Optional[str]] = []
        self._row_count = 0
        self._column_count = 0
        self._comment_count = 0
        self._allocated_columns = 0
        self._logger = logging.getLogger(f"csvfile.{self.__class__.__name__}")
        if rows or columns or comments:
            self.resize(rows, columns, comments)

    # ========================================================================
    # Dimensions
    # ========================================================================

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def column_count(self) -> int:
        return self._column_count

    @property
    def comment_count(self) -> int:
        return self._comment_count

    @property
    def allocated_rows(self) -> int:
        return len(self._cells)

    @property
    def allocated_columns(self) -> int:
        return self._allocated_columns

    @property
    def allocated_comments(self) -> int:
        return len(self._comments)

    def resize(self, rows: int, columns: int, comments: int) -> None:
        """
        Change the logical dimensions of the table.

        Existing values inside the new bounds are kept. Values outside the new
        bounds are cleared before the counts change. The table is updated
        only once all new storage has been built, so a MemoryError leaves it
        exactly as it was.

        Args:
            rows: New row count
            columns: New column count
            comments: New comment count

        Raises:
            ValueError: If a count is negative
            MemoryError: If the storage cannot grow
        """
        if rows < 0 or columns < 0 or comments < 0:
            raise ValueError(f"Negative table size: {rows}x{columns}, {comments} comments")

        new_columns_capacity = max(columns, self._allocated_columns)
        cells = self._resized_cells(rows, columns, new_columns_capacity)
        comment_slots = self._resized_comments(comments)

        self._cells = cells
        self._comments = comment_slots
        self._allocated_columns = new_columns_capacity
        self._row_count = rows
        self._column_count = columns
        self._comment_count = comments

        self._logger.debug(
            f"Resized to {rows}x{columns}, {comments} comments "
            f"(capacity {len(cells)}x{new_columns_capacity}, {len(comment_slots)})"
        )

    def _resized_cells(
        self,
        rows: int,
        columns: int,
        columns_capacity: int
    ) -> List[List[Optional[str]]]:
        """Build the cell storage for the new dimensions."""
        widen = columns_capacity - self._allocated_columns
        cells: List[List[Optional[str]]] = []

        for r, row in enumerate(self._cells):
            new_row = row + [None] * widen if widen else list(row)
            if r >= rows:
                # Row outside the new bounds: release everything
                new_row = [None] * columns_capacity
            elif columns < self._column_count:
                for c in range(columns, self._column_count):
                    new_row[c] = None
            cells.append(new_row)

        for _ in range(len(cells), rows):
            cells.append([None] * columns_capacity)

        return cells

    def _resized_comments(self, comments: int) -> List[Optional[str]]:
        """Build the comment storage for the new count."""
        slots = list(self._comments)
        for i in range(comments, len(slots)):
            slots[i] = None
        if comments > len(slots):
            slots.extend([None] * (comments - len(slots)))
        return slots

    def free_content(self) -> None:
        """Clear every allocated cell and comment slot, keeping the counts."""
        for row in self._cells:
            for c in range(len(row)):
                row[c] = None
        for i in range(len(self._comments)):
            self._comments[i] = None

    # ========================================================================
    # Cell / Comment Access
    # ========================================================================

    def _in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self._row_count and 0 <= column < self._column_count

    def get_cell(self, row: int, column: int) -> Optional[str]:
        """Return the cell text, or None if unset or out of range."""
        if not self._in_bounds(row, column):
            return None
        return self._cells[row][column]

    def store_cell(self, row: int, column: int, text: Optional[str]) -> None:
        """Store text as-is in a cell; out-of-range positions are ignored."""
        if not self._in_bounds(row, column):
            return
        self._cells[row][column] = text

    def get_comment(self, index: int) -> Optional[str]:
        """Return the comment text, or None if unset or out of range."""
        if not 0 <= index < self._comment_count:
            return None
        return self._comments[index]

    def store_comment(self, index: int, text: Optional[str]) -> None:
        """Store text as-is in a comment slot; out-of-range indices are ignored."""
        if not 0 <= index < self._comment_count:
            return
        self._comments[index] = text

    def get_row(self, row: int) -> List[Optional[str]]:
        """Return a copy of the logical cells of a row (empty if out of range)."""
        if not 0 <= row < self._row_count:
            return []
        return self._cells[row][:self._column_count]

    def to_rows(self) -> List[List[Optional[str]]]:
        """Return a copy of the logical grid."""
        return [self.get_row(r) for r in range(self._row_count)]

    def get_comments(self) -> List[Optional[str]]:
        """Return a copy of the logical comment list."""
        return self._comments[:self._comment_count]


__all__ = ["CSVTable"]
