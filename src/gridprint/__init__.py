"""
gridprint: bordered, column-aligned text tables.

This library renders a header row and a (possibly ragged) grid of values as
a framed table with:
- Multi-line cells (hard wrap at a maximum cell width, or truncation)
- Column widths fitted to the printed data
- Optional row numbers and a row window selected by original index
- Pluggable border styles (plain ASCII or box drawing)

Example:
    from gridprint import TablePrinter

    printer = TablePrinter(null_value="n/a", max_cell_width=8)
    print(printer.print(["id", "name"], [["1", "john"], ["2", None]]))

    +----+------+
    | id | name |
    +====+======+
    | 1  | john |
    | 2  | n/a  |
    +----+------+
"""

import importlib.metadata

from .borders import (
    BorderStyle,
    BorderStyleName,
    HeavyBorderStyle,
    PlainBorderStyle,
    get_border_style,
)
from .cell import Cell
from .exceptions import (
    ConfigurationError,
    EncodingError,
    GridPrintError,
    PrintError,
)
from .grid import Grid
from .models import PrinterConfig
from .printer import DEFAULT_PRINTER, TablePrinter
from .render import Renderer
from .source import MappingTableSource, SimpleTableSource, TableSource

try:
    __version__ = importlib.metadata.version("gridprint")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "TablePrinter",
    "DEFAULT_PRINTER",
    "PrinterConfig",
    # Data sources
    "TableSource",
    "SimpleTableSource",
    "MappingTableSource",
    # Border styles
    "BorderStyle",
    "BorderStyleName",
    "PlainBorderStyle",
    "HeavyBorderStyle",
    "get_border_style",
    # Layout
    "Cell",
    "Grid",
    "Renderer",
    # Exceptions
    "GridPrintError",
    "ConfigurationError",
    "EncodingError",
    "PrintError",
]
