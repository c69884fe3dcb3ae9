"""
Table renderer with pluggable borders.

This module turns a laid-out Grid into framed text and writes it, encoded,
to a binary stream.
"""

from __future__ import annotations

import codecs
from collections.abc import Iterator
from typing import TYPE_CHECKING, BinaryIO

from .exceptions import ConfigurationError, EncodingError

if TYPE_CHECKING:
    from .borders import BorderStyle
    from .grid import Grid, Row
    from .models import PrinterConfig


def resolve_encoding(encoding: str) -> str:
    """
    Resolve an encoding name to its canonical codec name.

    Raises:
        ConfigurationError: If the platform has no codec by that name
    """
    try:
        return codecs.lookup(encoding).name
    except LookupError:
        raise ConfigurationError("encoding", encoding, "unknown text encoding") from None


class Renderer:
    """Render a grid as a bordered table.

    Example output:
        +----+--------------+
        | id | name         |
        +====+==============+
        | 1  | john         |
        | 2  | verylongname |
        +----+--------------+
    """

    def __init__(self, grid: Grid, style: BorderStyle, config: PrinterConfig) -> None:
        self._grid = grid
        self._style = style
        self._config = config

    def render(self, stream: BinaryIO) -> None:
        """
        Write the table to a binary stream and flush it.

        The full table is encoded before anything is written, so a failure
        leaves the stream untouched.

        Raises:
            ConfigurationError: If the configured encoding is unknown
            EncodingError: If the table cannot be represented in the encoding
        """
        encoding = resolve_encoding(self._config.encoding)
        try:
            data = self.text().encode(encoding)
        except UnicodeEncodeError as e:
            raise EncodingError(encoding, str(e)) from e
        stream.write(data)
        stream.flush()

    def text(self) -> str:
        return "".join(line + "\n" for line in self.lines())

    def lines(self) -> Iterator[str]:
        """Yield every output line of the table, without line terminators."""
        grid = self._grid
        style = self._style
        if not grid.exists:
            return

        yield self._rule(
            style.top_left_corner(),
            style.top_edge_divider(),
            style.horizontal_fill(True, False),
            style.top_right_corner(),
        )
        yield from self._block(grid.header_row)

        body_empty = not grid.body_rows
        if body_empty:
            # Nothing follows the header, so its divider closes the table
            yield self._rule(
                style.bottom_left_corner(),
                style.cross(True, True),
                style.horizontal_fill(False, True),
                style.bottom_right_corner(),
            )
            return

        yield self._rule(
            style.left_edge_divider(True),
            style.cross(True, False),
            style.horizontal_fill(False, True),
            style.right_edge_divider(True),
        )
        for i, row in enumerate(grid.body_rows):
            if i > 0 and self._config.horizontal_dividers:
                yield self._rule(
                    style.left_edge_divider(False),
                    style.cross(False, False),
                    style.horizontal_fill(False, False),
                    style.right_edge_divider(False),
                )
            yield from self._block(row)

        yield self._rule(
            style.bottom_left_corner(),
            style.bottom_edge_divider(),
            style.horizontal_fill(True, False),
            style.bottom_right_corner(),
        )

    def _rule(self, left: str, divider: str, fill: str, right: str) -> str:
        segments = [fill * (width + 2) for width in self._grid.column_widths]
        return left + divider.join(segments) + right

    def _block(self, row: Row) -> Iterator[str]:
        """Lines of one header or body row, its cells advancing in lockstep."""
        border = self._style.vertical_fill(True)
        separator = self._style.vertical_fill(False)
        height = max((cell.line_count for cell in row), default=0)
        for line_index in range(height):
            cells = []
            for column, width in enumerate(self._grid.column_widths):
                line = row[column].line(line_index) if column < len(row) else ""
                cells.append(f" {line.ljust(width)} ")
            yield border + separator.join(cells) + border
