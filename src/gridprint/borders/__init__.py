"""
Border styles for rendered tables.

Provides the glyph sets used to draw table frames:
- PLAIN: single-byte ASCII characters (default)
- HEAVY: double-line box-drawing frame with single-line interior rules

Example:
    from gridprint.borders import BorderStyleName, get_border_style

    style = get_border_style(BorderStyleName.HEAVY)
    style.top_left_corner()  # '╔'
"""

from __future__ import annotations

from enum import Enum

from .styles import BorderStyle, HeavyBorderStyle, PlainBorderStyle


class BorderStyleName(Enum):
    """Names of the built-in border styles."""

    PLAIN = "plain"
    HEAVY = "heavy"


def get_border_style(name: BorderStyleName | str) -> BorderStyle:
    """
    Look up a built-in border style by name.

    Args:
        name: A BorderStyleName or its string value ("plain", "heavy")

    Returns:
        The border style instance

    Raises:
        ConfigurationError: If the name does not match a built-in style
    """
    from .factory import get_border_style as _get_border_style

    return _get_border_style(name)


__all__ = [
    "BorderStyle",
    "BorderStyleName",
    "HeavyBorderStyle",
    "PlainBorderStyle",
    "get_border_style",
]
