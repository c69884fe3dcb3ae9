"""
Grid construction.

A grid is the fully materialized form of one table: the header cells, the
body cells of every row inside the print window, and the width of every
column. It is built fresh for each print call.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .cell import Cell

if TYPE_CHECKING:
    from .models import PrinterConfig
    from .source import TableSource

Row = list[Cell]

ROW_NUMBER_HEADER = "#"


@dataclass
class Grid:
    """
    Header row, filtered body rows and column widths of one table.

    Attributes:
        header_row: Header cells, empty when the table has no header
        body_rows: Cells of every printed row, in original order
        column_widths: Width of each column, indexed by column position
        row_indexes: Original index of each printed row
        skipped_rows: Number of source rows read but left out of the window
    """

    header_row: Row = field(default_factory=list)
    body_rows: list[Row] = field(default_factory=list)
    column_widths: list[int] = field(default_factory=list)
    row_indexes: list[int] = field(default_factory=list)
    skipped_rows: int = 0

    @classmethod
    def build(cls, source: TableSource, config: PrinterConfig) -> Grid:
        """
        Read a data source and lay out every cell of the table.

        Body rows are read first so that a short or missing header row can
        be padded to the number of columns the data actually has.

        Args:
            source: Data source to read headers and rows from
            config: Printer configuration

        Returns:
            The laid-out grid
        """
        grid = cls()
        grid._read_rows(source.rows(), config)
        for row in grid.body_rows:
            grid._fold_widths(row)

        grid.header_row = grid._read_headers(source.headers(), config)
        grid._fold_widths(grid.header_row)
        return grid

    @property
    def column_count(self) -> int:
        return len(self.column_widths)

    @property
    def exists(self) -> bool:
        """Whether there is anything to print."""
        return bool(self.header_row or self.body_rows)

    def _read_rows(
        self, rows: Iterable[Iterable[str | None]] | None, config: PrinterConfig
    ) -> None:
        if rows is None:
            return
        for index, values in enumerate(rows):
            if config.past_window(index):
                break
            if not config.includes_row(index):
                self.skipped_rows += 1
                continue
            row = [Cell.build(value, config) for value in values]
            if config.row_numbers:
                row.insert(0, Cell.build(str(index), config))
            self.body_rows.append(row)
            self.row_indexes.append(index)

    def _read_headers(self, headers: Iterable[str | None] | None, config: PrinterConfig) -> Row:
        row = [Cell.build(value, config) for value in headers or ()]
        # The index column is labelled even when the source has no headers
        if config.row_numbers and (row or self.body_rows):
            row.insert(0, Cell.build(ROW_NUMBER_HEADER, config))
        elif not row:
            return row
        # Synthetic headers carry the index of the column they stand in for
        row.extend(Cell.build(str(column), config) for column in range(len(row), self.column_count))
        return row

    def _fold_widths(self, row: Row) -> None:
        for column, cell in enumerate(row):
            if column == len(self.column_widths):
                self.column_widths.append(cell.width)
            else:
                self.column_widths[column] = max(self.column_widths[column], cell.width)
