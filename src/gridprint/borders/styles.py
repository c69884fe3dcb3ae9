"""
Border glyph sets.

A border style answers one question per structural position of a table
frame: which single character goes here. Styles hold no state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class BorderStyle(Protocol):
    """Protocol for table border glyph sets.

    The header-to-body divider and the dividers between body rows are
    queried separately, and the header divider also learns whether any
    body rows follow it, since it closes the table when none do.
    """

    def top_left_corner(self) -> str: ...

    def top_right_corner(self) -> str: ...

    def bottom_left_corner(self) -> str: ...

    def bottom_right_corner(self) -> str: ...

    def top_edge_divider(self) -> str:
        """Glyph where the top edge meets an interior column separator."""
        ...

    def bottom_edge_divider(self) -> str:
        """Glyph where the bottom edge meets an interior column separator."""
        ...

    def left_edge_divider(self, header: bool) -> str:
        """
        Glyph where a horizontal divider meets the left border.

        Args:
            header: True for the header-to-body divider, False for a
                divider between two body rows
        """
        ...

    def right_edge_divider(self, header: bool) -> str:
        """Right-border counterpart of left_edge_divider."""
        ...

    def cross(self, header: bool, body_empty: bool) -> str:
        """
        Glyph where a horizontal divider meets an interior column separator.

        Args:
            header: True for the header-to-body divider
            body_empty: True when no body rows follow the header, in which
                case the header divider is the last line of the table
        """
        ...

    def horizontal_fill(self, border: bool, header: bool) -> str:
        """
        Fill glyph of a horizontal line.

        Args:
            border: True for the top and bottom edges
            header: True for the header-to-body divider
        """
        ...

    def vertical_fill(self, border: bool) -> str:
        """
        Fill glyph of a vertical line.

        Args:
            border: True for the outer left and right edges, False for
                the separators between columns
        """
        ...


@dataclass(frozen=True)
class PlainBorderStyle:
    """ASCII border style.

    Example output:
        +----+------+
        | id | name |
        +====+======+
        | 1  | john |
        +----+------+
    """

    def top_left_corner(self) -> str:
        return "+"

    def top_right_corner(self) -> str:
        return "+"

    def bottom_left_corner(self) -> str:
        return "+"

    def bottom_right_corner(self) -> str:
        return "+"

    def top_edge_divider(self) -> str:
        return "+"

    def bottom_edge_divider(self) -> str:
        return "+"

    def left_edge_divider(self, header: bool) -> str:
        return "+"

    def right_edge_divider(self, header: bool) -> str:
        return "+"

    def cross(self, header: bool, body_empty: bool) -> str:
        return "+"

    def horizontal_fill(self, border: bool, header: bool) -> str:
        return "=" if header else "-"

    def vertical_fill(self, border: bool) -> str:
        return "|"


@dataclass(frozen=True)
class HeavyBorderStyle:
    """Box-drawing border style.

    The outer frame and the header divider use double lines; column
    separators and dividers between body rows use single lines.

    Example output:
        ╔════╤══════╗
        ║ id │ name ║
        ╠════╪══════╣
        ║ 1  │ john ║
        ╟────┼──────╢
        ║ 2  │ tom  ║
        ╚════╧══════╝
    """

    def top_left_corner(self) -> str:
        return "╔"

    def top_right_corner(self) -> str:
        return "╗"

    def bottom_left_corner(self) -> str:
        return "╚"

    def bottom_right_corner(self) -> str:
        return "╝"

    def top_edge_divider(self) -> str:
        return "╤"

    def bottom_edge_divider(self) -> str:
        return "╧"

    def left_edge_divider(self, header: bool) -> str:
        return "╠" if header else "╟"

    def right_edge_divider(self, header: bool) -> str:
        return "╣" if header else "╢"

    def cross(self, header: bool, body_empty: bool) -> str:
        if not header:
            return "┼"
        return "╧" if body_empty else "╪"

    def horizontal_fill(self, border: bool, header: bool) -> str:
        return "═" if border or header else "─"

    def vertical_fill(self, border: bool) -> str:
        return "║" if border else "│"
