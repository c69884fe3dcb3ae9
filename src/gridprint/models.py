"""Core models for gridprint."""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, cast

from .borders import BorderStyle, BorderStyleName, PlainBorderStyle, get_border_style
from .exceptions import ConfigurationError

DEFAULT_MAX_CELL_WIDTH = 100
DEFAULT_ENCODING = "utf-8"
DEFAULT_TAB_REPLACEMENT = " " * 8


@dataclass(frozen=True)
class PrinterConfig:
    """
    Immutable table printer configuration.

    A config is created once and shared by reference between every print
    call and every component involved in one. Use :meth:`replace` to derive
    a modified copy.

    Attributes:
        null_value: Text shown in place of absent (None) values
        border_style: Glyph set, or the name of a built-in one
            ("plain" or "heavy")
        max_cell_width: Hard wrap/truncate width in characters (>= 1)
        wraparound: Wrap long or multi-line values onto several lines
            instead of truncating them to one
        start_row: First original row index to print (inclusive, >= 0)
        end_row: Last original row index to print (inclusive), None for
            no upper bound
        horizontal_dividers: Draw a rule between every pair of body rows
        row_numbers: Prepend a "#" column holding each row's original index
        encoding: Output byte encoding
        tab_replacement: Text substituted for every tab character
    """

    null_value: str = ""
    border_style: BorderStyle | BorderStyleName | str = field(default_factory=PlainBorderStyle)
    max_cell_width: int = DEFAULT_MAX_CELL_WIDTH
    wraparound: bool = True
    start_row: int = 0
    end_row: int | None = None
    horizontal_dividers: bool = False
    row_numbers: bool = False
    encoding: str = DEFAULT_ENCODING
    tab_replacement: str = DEFAULT_TAB_REPLACEMENT

    def __post_init__(self) -> None:
        if isinstance(self.border_style, (str, BorderStyleName)):
            object.__setattr__(self, "border_style", get_border_style(self.border_style))
        if self.max_cell_width < 1:
            raise ConfigurationError(
                "max_cell_width", self.max_cell_width, "must be at least 1"
            )
        if self.start_row < 0:
            raise ConfigurationError("start_row", self.start_row, "must not be negative")

    @property
    def style(self) -> BorderStyle:
        """The resolved border style; names are looked up on construction."""
        return cast(BorderStyle, self.border_style)

    def includes_row(self, index: int) -> bool:
        """Whether the row at the given original index lies in the print window."""
        if index < self.start_row:
            return False
        return self.end_row is None or index <= self.end_row

    def past_window(self, index: int) -> bool:
        """Whether no row at or beyond the given original index can be printed."""
        return self.end_row is not None and index > self.end_row

    def replace(self, **changes: Any) -> "PrinterConfig":
        """Return a copy with the given options changed."""
        return dataclasses.replace(self, **changes)
