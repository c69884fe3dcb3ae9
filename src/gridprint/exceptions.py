"""Exceptions for gridprint."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class GridPrintError(Exception):
    """
    Base exception for all gridprint errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(GridPrintError):
    """
    Raised when a printer is configured with a value it cannot use.

    This covers a non-positive cell width, a negative start row, an
    unknown border style name and an output encoding the platform cannot
    resolve.

    Attributes:
        field: Name of the offending option
        value: The rejected value
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")


# ---------------------------------------------------------------------------
# Rendering Exceptions
# ---------------------------------------------------------------------------


class EncodingError(GridPrintError):
    """
    Raised when the rendered table cannot be represented in the output encoding.

    Nothing is written to the stream when this is raised.
    """

    def __init__(self, encoding: str, reason: str) -> None:
        self.encoding = encoding
        self.reason = reason
        super().__init__(f"Cannot encode table as {encoding}: {reason}")


class PrintError(GridPrintError):
    """
    Raised by the string-returning print operations when rendering fails.

    The original failure is available as ``__cause__``. No partially
    rendered text is ever returned alongside it.
    """

    def __init__(self, message: str = "Failed to print table") -> None:
        super().__init__(message)
