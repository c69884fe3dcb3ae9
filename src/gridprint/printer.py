"""
Table printer facade.

Example:
    from gridprint import TablePrinter

    printer = TablePrinter(border_style="heavy", row_numbers=True)
    print(printer.print(["id", "name"], [["1", "john"], ["2", "tom"]]))
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from typing import Any, BinaryIO, overload

from .exceptions import GridPrintError, PrintError
from .grid import Grid
from .models import PrinterConfig
from .render import Renderer, resolve_encoding
from .source import SimpleTableSource, TableSource

logger = logging.getLogger(__name__)


class TablePrinter:
    """
    Pretty-prints tables.

    A table is an optional header row followed by any number of rows.
    Ideally the header and every row have the same number of columns, but
    ragged input is padded rather than rejected.

    The printer holds only an immutable PrinterConfig, so one instance can
    be shared freely, including between threads.

    Args:
        config: Base configuration (defaults to PrinterConfig())
        **options: PrinterConfig fields overriding the base configuration
    """

    def __init__(self, config: PrinterConfig | None = None, **options: Any) -> None:
        config = config if config is not None else PrinterConfig()
        self._config = config.replace(**options) if options else config

    @property
    def config(self) -> PrinterConfig:
        return self._config

    def with_options(self, **options: Any) -> TablePrinter:
        """Return a new printer whose configuration has the given options changed."""
        return TablePrinter(self._config, **options)

    @overload
    def print(
        self,
        headers: Iterable[str | None] | None = ...,
        rows: Iterable[Iterable[str | None]] | None = ...,
        stream: None = ...,
    ) -> str: ...

    @overload
    def print(
        self,
        headers: Iterable[str | None] | None,
        rows: Iterable[Iterable[str | None]] | None,
        stream: BinaryIO,
    ) -> None: ...

    def print(
        self,
        headers: Iterable[str | None] | None = None,
        rows: Iterable[Iterable[str | None]] | None = None,
        stream: BinaryIO | None = None,
    ) -> str | None:
        """
        Print headers and rows.

        Args:
            headers: Column headers; should have as many values as each row
            rows: Table rows, each an iterable of cell values in column order
            stream: Binary stream to write to; when omitted the table is
                returned as a string instead

        Returns:
            The rendered table when no stream is given, otherwise None

        Raises:
            ConfigurationError: If the configured encoding is unknown
            EncodingError: If the table cannot be written in the encoding
            PrintError: If building the string representation fails
        """
        return self.print_source(SimpleTableSource(headers, rows), stream)

    @overload
    def print_source(self, source: TableSource, stream: None = ...) -> str: ...

    @overload
    def print_source(self, source: TableSource, stream: BinaryIO) -> None: ...

    def print_source(self, source: TableSource, stream: BinaryIO | None = None) -> str | None:
        """
        Print the headers and rows exposed by a data source.

        Args:
            source: Data source describing the table
            stream: Binary stream to write to; when omitted the table is
                returned as a string instead

        Returns:
            The rendered table when no stream is given, otherwise None
        """
        if stream is not None:
            self._write(source, stream)
            return None

        buffer = io.BytesIO()
        try:
            self._write(source, buffer)
            return buffer.getvalue().decode(resolve_encoding(self._config.encoding))
        except GridPrintError:
            raise
        except Exception as e:
            logger.warning("Failed to print table from %r", source, exc_info=True)
            raise PrintError() from e

    def _write(self, source: TableSource, stream: BinaryIO) -> None:
        config = self._config
        resolve_encoding(config.encoding)
        grid = Grid.build(source, config)
        logger.debug(
            "Rendering table: columns=%d rows=%d skipped=%d encoding=%s",
            grid.column_count,
            len(grid.body_rows),
            grid.skipped_rows,
            config.encoding,
        )
        Renderer(grid, config.style, config).render(stream)


DEFAULT_PRINTER = TablePrinter()
"""Printer with the default configuration."""
