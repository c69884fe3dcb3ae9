"""
Border style factory.

Resolves style names to the built-in BorderStyle implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..exceptions import ConfigurationError
from . import BorderStyleName
from .styles import HeavyBorderStyle, PlainBorderStyle

if TYPE_CHECKING:
    from .styles import BorderStyle


def get_border_style(name: BorderStyleName | str) -> BorderStyle:
    """
    Get border style instance for the requested name.

    Args:
        name: Desired style (PLAIN or HEAVY), as enum member or string value

    Returns:
        Border style instance matching the requested name

    Raises:
        ConfigurationError: If an unknown style name is requested
    """
    if isinstance(name, str):
        try:
            name = BorderStyleName(name.lower())
        except ValueError:
            raise ConfigurationError(
                "border_style",
                name,
                f"expected one of {', '.join(s.value for s in BorderStyleName)}",
            ) from None

    if name == BorderStyleName.PLAIN:
        return PlainBorderStyle()

    if name == BorderStyleName.HEAVY:
        return HeavyBorderStyle()

    raise ConfigurationError("border_style", name, "unknown border style")
