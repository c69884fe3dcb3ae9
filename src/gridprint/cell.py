"""
Cell layout.

A cell is the display form of one table value: an ordered sequence of
lines, none longer than the configured maximum cell width.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import PrinterConfig

NEWLINE_PATTERN = re.compile(r"\r\n|\n|\r")


@dataclass(frozen=True)
class Cell:
    """
    Wrapped or truncated lines of a single value.

    Attributes:
        lines: Display lines in order, never empty
    """

    lines: tuple[str, ...]

    @classmethod
    def build(cls, value: str | None, config: PrinterConfig) -> Cell:
        """
        Lay out a raw value according to the printer configuration.

        None is replaced by the configured null value and tabs by the
        configured tab replacement. With wraparound the text is split on
        every newline variant and each physical line is hard-wrapped every
        ``max_cell_width`` characters; without it, newlines are dropped and
        the text is truncated to a single line.
        """
        text = config.null_value if value is None else value
        text = text.replace("\t", config.tab_replacement)
        width = config.max_cell_width

        if not config.wraparound:
            text = text.replace("\r", "").replace("\n", "")
            return cls((text[:width],))

        physical = NEWLINE_PATTERN.split(text)
        # Terminating newlines do not open another line
        while len(physical) > 1 and not physical[-1]:
            physical.pop()

        lines: list[str] = []
        for line in physical:
            if not line:
                lines.append("")
                continue
            lines.extend(line[i : i + width] for i in range(0, len(line), width))
        return cls(tuple(lines))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def width(self) -> int:
        """Length of the longest line."""
        return max(map(len, self.lines))

    def line(self, index: int) -> str:
        """Line at the given index, or an empty string past the last line."""
        return self.lines[index] if index < len(self.lines) else ""
